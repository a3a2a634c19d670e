"""Stores em memória — store de clientes do sistema legado.

ATENÇÃO: Sem persistência entre reinícios. Cada instância é isolada,
o que permite apps independentes por teste.
"""

from __future__ import annotations

from app.domain.customer import EncryptedCustomerRecord
from app.protocols.customer_store import CustomerStoreProtocol


class MemoryCustomerStore(CustomerStoreProtocol):
    """Store de clientes chaveado por id, escrita única por id.

    Guarda apenas o registro com CPF cifrado.
    """

    def __init__(self) -> None:
        self._store: dict[str, EncryptedCustomerRecord] = {}

    def save(self, record: EncryptedCustomerRecord) -> bool:
        """Grava registro; retorna False se o id já existe (sem sobrescrever)."""
        if record.customer_id in self._store:
            return False
        self._store[record.customer_id] = record
        return True

    def load(self, customer_id: str) -> EncryptedCustomerRecord | None:
        """Carrega registro ou None."""
        return self._store.get(customer_id)

