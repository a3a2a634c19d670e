"""Builders de envelopes XML do sistema legado.

Requisição: <requisicao><tipo/><timestamp/><dados/></requisicao>
Resposta:   <resposta><status/><mensagem/>[<dados/>]<timestamp/></resposta>

O builder de cadastro só aceita EncryptedCustomerRecord: o CPF em claro
não tem caminho até o transporte.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from app.infra.codec import encode
from app.protocols.models import CREATE_OPERATION, LOOKUP_OPERATION

if TYPE_CHECKING:
    from app.domain.customer import EncryptedCustomerRecord


def _request_tree(operation: str, timestamp: str, data: dict[str, Any]) -> dict[str, Any]:
    return {
        "requisicao": {
            "tipo": operation,
            "timestamp": timestamp,
            "dados": data,
        }
    }


def build_create_envelope(
    record: EncryptedCustomerRecord,
    timestamp: str,
    *,
    pretty: bool = True,
) -> str:
    """Monta envelope CADASTRO_CLIENTE com o registro completo.

    Args:
        record: Cliente com CPF já cifrado.
        timestamp: Instante ISO-8601 da requisição.
        pretty: Indentação legível.

    Returns:
        XML da requisição.
    """
    tree = _request_tree(CREATE_OPERATION, timestamp, {"cliente": record.to_stored_dict()})
    return encode(tree, pretty=pretty)


def build_lookup_envelope(customer_id: str, timestamp: str, *, pretty: bool = True) -> str:
    """Monta envelope CONSULTA_CLIENTE carregando apenas o id."""
    tree = _request_tree(LOOKUP_OPERATION, timestamp, {"clienteId": customer_id})
    return encode(tree, pretty=pretty)


def build_reply_envelope(
    status: str,
    message: str,
    timestamp: str,
    *,
    record: EncryptedCustomerRecord | None = None,
    customer_id: str | None = None,
    pretty: bool = True,
) -> str:
    """Monta resposta do sistema legado.

    Args:
        status: "sucesso", "NOT_FOUND" ou texto de erro.
        message: Mensagem legível.
        timestamp: Instante ISO-8601 da resposta.
        record: Cliente encontrado (consulta com sucesso).
        customer_id: Id confirmado (ack de cadastro).
        pretty: Indentação legível.
    """
    reply: dict[str, Any] = {"status": status, "mensagem": message}
    if customer_id is not None:
        reply["clienteId"] = customer_id
    if record is not None:
        reply["dados"] = {"cliente": record.to_stored_dict()}
    reply["timestamp"] = timestamp
    return encode({"resposta": reply}, pretty=pretty)


class LegacyEnvelopeBuilder:
    """Implementa EnvelopeBuilderProtocol sobre os builders acima."""

    def __init__(self, pretty: bool = True) -> None:
        self._pretty = pretty

    def build_create_envelope(self, record: EncryptedCustomerRecord, timestamp: str) -> str:
        return build_create_envelope(record, timestamp, pretty=self._pretty)

    def build_lookup_envelope(self, customer_id: str, timestamp: str) -> str:
        return build_lookup_envelope(customer_id, timestamp, pretty=self._pretty)
