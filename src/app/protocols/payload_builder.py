"""Protocolos de construção de envelopes para o sistema legado."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from app.domain.customer import EncryptedCustomerRecord


class EnvelopeBuilderProtocol(Protocol):
    """Contrato mínimo para montar envelopes XML outbound."""

    def build_create_envelope(self, record: EncryptedCustomerRecord, timestamp: str) -> str: ...

    def build_lookup_envelope(self, customer_id: str, timestamp: str) -> str: ...
