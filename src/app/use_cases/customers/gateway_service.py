"""Use case do gateway de clientes: JSON ↔ XML legado.

Cadastro: valida → cifra CPF → envelope → transporte → Outcome → aceito.
Consulta: valida id → envelope → transporte → Outcome → decifra CPF.

O CPF só atravessa o transporte cifrado; a versão decifrada existe apenas
no retorno da consulta e não é armazenada.
"""

from __future__ import annotations

import logging
import uuid
from typing import TYPE_CHECKING

from app.domain.customer import CustomerRecord, utc_now_iso
from app.protocols.models import (
    CreateResult,
    ErrorOutcome,
    NotFound,
    SuccessGeneric,
    SuccessWithRecord,
)
from utils.errors import PeerError

if TYPE_CHECKING:
    from collections.abc import Callable

    from app.domain.customer import CustomerInput
    from app.protocols.crypto import FieldCipherProtocol
    from app.protocols.http_client import LegacyTransportProtocol
    from app.protocols.normalizer import ReplyInterpreterProtocol
    from app.protocols.payload_builder import EnvelopeBuilderProtocol
    from app.protocols.validator import CustomerInputValidatorProtocol

logger = logging.getLogger(__name__)

UNEXPECTED_REPLY_MESSAGE = "Resposta inesperada do sistema legado"


def _new_customer_id() -> str:
    return str(uuid.uuid4())


class CustomerGatewayService:
    """Orquestra cifra, tradução e transporte para o sistema legado.

    Sem estado mutável compartilhado: a chave fica presa ao cipher injetado
    e cada chamada é um round-trip independente.
    """

    def __init__(
        self,
        validator: CustomerInputValidatorProtocol,
        cipher: FieldCipherProtocol,
        builder: EnvelopeBuilderProtocol,
        interpreter: ReplyInterpreterProtocol,
        transport: LegacyTransportProtocol,
        clock: Callable[[], str] = utc_now_iso,
        id_factory: Callable[[], str] = _new_customer_id,
    ) -> None:
        self._validator = validator
        self._cipher = cipher
        self._builder = builder
        self._interpreter = interpreter
        self._transport = transport
        self._clock = clock
        self._id_factory = id_factory

    async def create_customer(self, data: CustomerInput) -> CreateResult:
        """Cadastra cliente no legado.

        Returns:
            CreateResult com id e timestamp gerados localmente; o ack do
            legado só é verificado quanto a sucesso/falha.

        Raises:
            ValidationError: Input inválido (antes de qualquer cifra).
            CipherError, CodecError: Falha interna de tradução.
            TransportError: Legado inacessível.
            PeerError: Legado reportou erro.
        """
        self._validator.validate_customer_input(data)

        record = CustomerRecord(
            customer_id=self._id_factory(),
            name=data.name,
            email=data.email,
            cpf=data.cpf,
            registered_at=self._clock(),
        )
        encrypted = self._cipher.encrypt_customer(record)
        envelope = self._builder.build_create_envelope(encrypted, self._clock())

        logger.info(
            "customer_create_sent",
            extra={"component": "customer_gateway", "customer_id": record.customer_id},
        )
        reply = await self._transport.send_envelope(envelope)
        outcome = self._interpreter.interpret_reply(reply)

        if isinstance(outcome, (SuccessGeneric, SuccessWithRecord)):
            logger.info(
                "customer_create_accepted",
                extra={"component": "customer_gateway", "customer_id": record.customer_id},
            )
            return CreateResult(customer_id=record.customer_id, timestamp=self._clock())

        raise self._peer_error(outcome, operation="create")

    async def lookup_customer(self, customer_id: str) -> CustomerRecord | None:
        """Consulta cliente no legado.

        Returns:
            CustomerRecord com CPF decifrado, ou None se inexistente.

        Raises:
            ValidationError: Id fora do formato.
            CipherError, CodecError: Falha interna de tradução.
            TransportError: Legado inacessível.
            PeerError: Legado reportou erro.
        """
        self._validator.validate_customer_id(customer_id)

        envelope = self._builder.build_lookup_envelope(customer_id, self._clock())
        reply = await self._transport.send_envelope(envelope)
        outcome = self._interpreter.interpret_reply(reply)

        if isinstance(outcome, SuccessWithRecord):
            logger.info(
                "customer_lookup_found",
                extra={"component": "customer_gateway", "customer_id": customer_id},
            )
            return self._cipher.decrypt_customer(outcome.record)

        if isinstance(outcome, (NotFound, SuccessGeneric)):
            logger.info(
                "customer_lookup_not_found",
                extra={"component": "customer_gateway", "customer_id": customer_id},
            )
            return None

        raise self._peer_error(outcome, operation="lookup")

    @staticmethod
    def _peer_error(outcome: object, *, operation: str) -> PeerError:
        message = outcome.message if isinstance(outcome, ErrorOutcome) else UNEXPECTED_REPLY_MESSAGE
        logger.warning(
            "legacy_reported_error",
            extra={
                "component": "customer_gateway",
                "operation": operation,
                "outcome": type(outcome).__name__,
            },
        )
        return PeerError(message)
