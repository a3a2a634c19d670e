"""Interpretação de envelopes XML do sistema legado.

O decode embrulha todo valor filho em lista de um elemento; aqui cada
campo folha é desembrulhado antes de virar modelo interno. Valores já
desembrulhados (decoder sem explicit_array) também são aceitos.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from app.domain.customer import EncryptedCustomerRecord, EncryptedValue
from app.infra.codec import decode
from app.protocols.models import (
    CREATE_OPERATION,
    LOOKUP_OPERATION,
    STATUS_NOT_FOUND,
    STATUS_SUCCESS,
    CreateRequest,
    ErrorOutcome,
    LegacyRequest,
    LookupRequest,
    NotFound,
    Outcome,
    SuccessGeneric,
    SuccessWithRecord,
)
from utils.errors import CodecError

logger = logging.getLogger(__name__)

_RECORD_FIELDS = ("id", "nome", "email", "cpf_criptografado", "dataCadastro")


def unwrap(value: Any) -> Any:
    """Remove o embrulho de lista de um elemento.

    Raises:
        CodecError: Lista vazia ou com mais de um elemento.
    """
    if isinstance(value, list):
        if len(value) != 1:
            raise CodecError(f"Expected single value, got {len(value)}")
        return value[0]
    return value


def _field(node: Mapping[str, Any], name: str, *, required: bool = True) -> Any:
    if name not in node:
        if required:
            raise CodecError(f"Missing field: {name}")
        return None
    return unwrap(node[name])


def _text(node: Mapping[str, Any], name: str, *, required: bool = True) -> str | None:
    value = _field(node, name, required=required)
    if value is None:
        return None
    if isinstance(value, Mapping):
        raise CodecError(f"Field {name} must be a scalar")
    return str(value)


def _node(node: Mapping[str, Any], name: str, *, required: bool = True) -> Mapping[str, Any] | None:
    value = _field(node, name, required=required)
    if value is None:
        return None
    if not isinstance(value, Mapping):
        # <dados></dados> vazio decodifica como texto
        if required:
            raise CodecError(f"Field {name} must be a nested element")
        return None
    return value


def _root(wire_text: str, root_name: str) -> Mapping[str, Any]:
    tree = decode(wire_text)
    root = tree.get(root_name)
    if not isinstance(root, Mapping):
        raise CodecError(f"Missing root element: {root_name}")
    return root


def record_from_node(node: Mapping[str, Any]) -> EncryptedCustomerRecord:
    """Converte o nó <cliente> em EncryptedCustomerRecord.

    Raises:
        CodecError: Campo ausente.
        CipherError: cpf_criptografado fora do formato salt:ciphertext.
    """
    values = {name: _text(node, name) for name in _RECORD_FIELDS}
    return EncryptedCustomerRecord(
        customer_id=values["id"],
        name=values["nome"],
        email=values["email"],
        encrypted_cpf=EncryptedValue.parse(values["cpf_criptografado"]),
        registered_at=values["dataCadastro"],
    )


def interpret_reply(wire_text: str) -> Outcome:
    """Transforma a resposta do legado em Outcome.

    Despacha pelo status: "sucesso" (com ou sem registro), "NOT_FOUND"
    e qualquer outro valor como erro.

    Raises:
        CodecError: XML malformado ou sem raiz <resposta>.
    """
    reply = _root(wire_text, "resposta")
    status = _text(reply, "status", required=False) or ""
    message = _text(reply, "mensagem", required=False) or ""
    timestamp = _text(reply, "timestamp", required=False) or ""

    if status == STATUS_SUCCESS:
        data = _node(reply, "dados", required=False)
        customer = _node(data, "cliente", required=False) if data is not None else None
        if customer is not None:
            return SuccessWithRecord(
                record=record_from_node(customer),
                message=message,
                timestamp=timestamp,
            )
        return SuccessGeneric(
            message=message,
            timestamp=timestamp,
            customer_id=_text(reply, "clienteId", required=False),
        )

    if status == STATUS_NOT_FOUND:
        return NotFound(message=message, timestamp=timestamp)

    logger.info(
        "legacy_reply_error_status",
        extra={"component": "legacy_reply", "status": status or "missing"},
    )
    return ErrorOutcome(
        message=message or status or "Erro no sistema legado",
        status=status,
        timestamp=timestamp,
    )


def interpret_request(wire_text: str) -> LegacyRequest:
    """Transforma a requisição recebida pelo legado em modelo tipado.

    Raises:
        CodecError: XML malformado, tipo desconhecido ou campo ausente.
        CipherError: CPF cifrado em formato inválido.
    """
    request = _root(wire_text, "requisicao")
    operation = _text(request, "tipo")
    timestamp = _text(request, "timestamp", required=False) or ""
    data = _node(request, "dados")

    if operation == CREATE_OPERATION:
        return CreateRequest(record=record_from_node(_node(data, "cliente")), timestamp=timestamp)
    if operation == LOOKUP_OPERATION:
        return LookupRequest(customer_id=_text(data, "clienteId"), timestamp=timestamp)
    raise CodecError(f"Unknown operation: {operation}")


class LegacyReplyInterpreter:
    """Implementa ReplyInterpreterProtocol."""

    def interpret_reply(self, wire_text: str) -> Outcome:
        return interpret_reply(wire_text)
