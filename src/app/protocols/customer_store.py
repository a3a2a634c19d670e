"""Protocolo do store de clientes do sistema legado."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from app.domain.customer import EncryptedCustomerRecord


class CustomerStoreProtocol(Protocol):
    """Store chaveado por id, escrita única por id."""

    def save(self, record: EncryptedCustomerRecord) -> bool: ...

    def load(self, customer_id: str) -> EncryptedCustomerRecord | None: ...
