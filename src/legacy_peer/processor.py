"""Processamento de envelopes recebidos pelo sistema legado.

Cadastro só grava depois do envelope inteiro ser interpretado: uma falha
de parse não deixa registro parcial.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from api.normalizers.legacy import interpret_request
from api.payload_builders.legacy import build_reply_envelope
from app.domain.customer import utc_now_iso
from app.protocols.models import (
    STATUS_ERROR,
    STATUS_NOT_FOUND,
    STATUS_SUCCESS,
    CreateRequest,
    LookupRequest,
)
from utils.errors import GatewayError

if TYPE_CHECKING:
    from collections.abc import Callable

    from app.protocols.customer_store import CustomerStoreProtocol

logger = logging.getLogger(__name__)

CREATED_MESSAGE = "Cliente cadastrado com sucesso"
FOUND_MESSAGE = "Cliente encontrado"
NOT_FOUND_MESSAGE = "Cliente não encontrado"
DUPLICATE_MESSAGE = "Cliente já cadastrado"
GENERIC_ERROR_MESSAGE = "Erro ao processar requisição"


@dataclass(frozen=True, slots=True)
class ProcessResult:
    """Resposta XML e status HTTP correspondente."""

    status_code: int
    body: str


class LegacyProcessor:
    """Despacha envelopes CADASTRO_CLIENTE / CONSULTA_CLIENTE para o store.

    Args:
        store: Store de clientes (registro com CPF cifrado).
        clock: Fonte do timestamp das respostas.
    """

    def __init__(
        self,
        store: CustomerStoreProtocol,
        clock: Callable[[], str] = utc_now_iso,
    ) -> None:
        self._store = store
        self._clock = clock

    @property
    def store(self) -> CustomerStoreProtocol:
        return self._store

    def process(self, wire_text: str) -> ProcessResult:
        """Processa um envelope e monta a resposta.

        Nunca levanta para erros de processamento: devolve 500 com status "erro".
        """
        try:
            request = interpret_request(wire_text)
        except GatewayError as exc:
            logger.warning(
                "legacy_request_rejected",
                extra={"component": "legacy_peer", "error_type": type(exc).__name__},
            )
            return self.error(str(exc) or GENERIC_ERROR_MESSAGE)

        if isinstance(request, CreateRequest):
            return self._create(request)
        return self._lookup(request)

    def error(self, message: str) -> ProcessResult:
        """Resposta 500 com status "erro"."""
        return ProcessResult(
            status_code=500,
            body=build_reply_envelope(STATUS_ERROR, message, self._clock()),
        )

    def _create(self, request: CreateRequest) -> ProcessResult:
        record = request.record
        if not self._store.save(record):
            logger.warning(
                "legacy_customer_duplicate",
                extra={"component": "legacy_peer", "customer_id": record.customer_id},
            )
            return self.error(DUPLICATE_MESSAGE)

        logger.info(
            "legacy_customer_stored",
            extra={"component": "legacy_peer", "customer_id": record.customer_id},
        )
        return ProcessResult(
            status_code=200,
            body=build_reply_envelope(
                STATUS_SUCCESS,
                CREATED_MESSAGE,
                self._clock(),
                customer_id=record.customer_id,
            ),
        )

    def _lookup(self, request: LookupRequest) -> ProcessResult:
        record = self._store.load(request.customer_id)
        if record is None:
            return ProcessResult(
                status_code=404,
                body=build_reply_envelope(STATUS_NOT_FOUND, NOT_FOUND_MESSAGE, self._clock()),
            )
        return ProcessResult(
            status_code=200,
            body=build_reply_envelope(STATUS_SUCCESS, FOUND_MESSAGE, self._clock(), record=record),
        )
