"""Cliente — registro trafegado entre gateway e sistema legado.

O CPF existe em dois estados que nunca se misturam:
- CustomerRecord: CPF em claro, só existe dentro da fronteira do gateway
- EncryptedCustomerRecord: CPF cifrado, único formato aceito no transporte
"""

from __future__ import annotations

import binascii
from dataclasses import dataclass
from datetime import UTC, datetime

from utils.errors import CipherError

SALT_SIZE = 16  # 128 bits (IV do CBC)
BLOCK_SIZE = 16  # bloco AES
ENCODED_SEPARATOR = ":"


def utc_now_iso() -> str:
    """Instante atual em ISO-8601 UTC com milissegundos (ex: 2026-01-02T10:30:00.123Z)."""
    return datetime.now(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")


@dataclass(frozen=True, slots=True)
class EncryptedValue:
    """Par (salt, ciphertext) serializado como `<hex-salt>:<hex-ciphertext>`.

    Raises:
        CipherError: Salt com tamanho errado ou ciphertext fora do tamanho de bloco.
    """

    salt: bytes
    ciphertext: bytes

    def __post_init__(self) -> None:
        if len(self.salt) != SALT_SIZE:
            raise CipherError(f"Invalid salt size: {len(self.salt)}")
        if not self.ciphertext or len(self.ciphertext) % BLOCK_SIZE:
            raise CipherError(f"Invalid ciphertext size: {len(self.ciphertext)}")

    def encode(self) -> str:
        """Serializa no formato aceito pelo sistema legado."""
        return f"{self.salt.hex()}{ENCODED_SEPARATOR}{self.ciphertext.hex()}"

    @classmethod
    def parse(cls, encoded: str) -> EncryptedValue:
        """Reconstrói o valor a partir do texto serializado.

        Raises:
            CipherError: Se separador ausente, hex inválido, salt com tamanho
                errado ou ciphertext fora do tamanho de bloco.
        """
        salt_hex, separator, ciphertext_hex = encoded.partition(ENCODED_SEPARATOR)
        if not separator:
            raise CipherError("Encrypted value missing separator")
        try:
            salt = binascii.unhexlify(salt_hex)
            ciphertext = binascii.unhexlify(ciphertext_hex)
        except (ValueError, binascii.Error) as exc:
            raise CipherError(f"Invalid hex in encrypted value: {exc}") from exc
        return cls(salt=salt, ciphertext=ciphertext)

    def __str__(self) -> str:
        return self.encode()


@dataclass(frozen=True, slots=True)
class CustomerInput:
    """Dados informados pelo chamador no cadastro."""

    name: str
    email: str
    cpf: str


@dataclass(frozen=True, slots=True)
class CustomerRecord:
    """Cliente com CPF em claro."""

    customer_id: str
    name: str
    email: str
    cpf: str
    registered_at: str

    def to_public_dict(self) -> dict[str, str]:
        """Formato JSON devolvido ao chamador autenticado."""
        return {
            "id": self.customer_id,
            "nome": self.name,
            "email": self.email,
            "cpf": self.cpf,
            "dataCadastro": self.registered_at,
        }


@dataclass(frozen=True, slots=True)
class EncryptedCustomerRecord:
    """Cliente com CPF cifrado, pronto para atravessar o transporte."""

    customer_id: str
    name: str
    email: str
    encrypted_cpf: EncryptedValue
    registered_at: str

    def to_stored_dict(self) -> dict[str, str]:
        """Formato armazenado pelo sistema legado."""
        return {
            "id": self.customer_id,
            "nome": self.name,
            "email": self.email,
            "cpf_criptografado": self.encrypted_cpf.encode(),
            "dataCadastro": self.registered_at,
        }
