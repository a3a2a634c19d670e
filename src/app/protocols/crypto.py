"""Protocolo de cifra do campo sensível usado pelos use cases.

A implementação concreta fica em app/infra/crypto e é injetada
pelo bootstrap junto com a chave derivada.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from app.domain.customer import CustomerRecord, EncryptedCustomerRecord


class FieldCipherProtocol(Protocol):
    """Interface mínima para cifrar/decifrar o CPF de um registro."""

    def encrypt_customer(self, record: CustomerRecord) -> EncryptedCustomerRecord: ...

    def decrypt_customer(self, record: EncryptedCustomerRecord) -> CustomerRecord: ...
