"""Cifra AES-256-CBC do campo sensível (CPF).

Formato serializado: hex(salt) + ":" + hex(ciphertext), salt de 16 bytes
aleatório por chamada. Não há tag de autenticação: adulteração que preserve
o padding PKCS7 não é detectada (limitação aceita do formato legado).
"""

from __future__ import annotations

import os

from cryptography.hazmat.primitives import padding
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

from app.domain.customer import (
    CustomerRecord,
    EncryptedCustomerRecord,
    EncryptedValue,
)
from app.infra.crypto.constants import AES_KEY_SIZE, BLOCK_SIZE, KEY_PAD_CHAR, SALT_SIZE
from utils.errors import CipherError


def derive_key(secret: str) -> bytes:
    """Deriva a chave AES a partir do segredo configurado.

    Completa à direita com '0' e trunca em 32 caracteres. Sem KDF: precisa
    ser reproduzida exatamente para ler ciphertexts já armazenados.

    Raises:
        CipherError: Se o resultado não tiver 32 bytes (segredo não-ASCII).
    """
    key = secret.ljust(AES_KEY_SIZE, KEY_PAD_CHAR)[:AES_KEY_SIZE].encode("utf-8")
    if len(key) != AES_KEY_SIZE:
        raise CipherError(f"Derived key must be {AES_KEY_SIZE} bytes, got {len(key)}")
    return key


def _check_key(key: bytes) -> None:
    if not isinstance(key, (bytes, bytearray)) or len(key) != AES_KEY_SIZE:
        raise CipherError(f"AES-256 key must be exactly {AES_KEY_SIZE} bytes")


def encrypt(plaintext: str, key: bytes) -> EncryptedValue:
    """Cifra texto com salt novo.

    Args:
        plaintext: Texto em claro.
        key: Chave de 32 bytes (ver derive_key).

    Returns:
        EncryptedValue com salt e ciphertext.
    """
    _check_key(key)
    salt = os.urandom(SALT_SIZE)
    padder = padding.PKCS7(BLOCK_SIZE * 8).padder()
    padded = padder.update(plaintext.encode("utf-8")) + padder.finalize()
    encryptor = Cipher(algorithms.AES(bytes(key)), modes.CBC(salt)).encryptor()
    ciphertext = encryptor.update(padded) + encryptor.finalize()
    return EncryptedValue(salt=salt, ciphertext=ciphertext)


def decrypt(value: EncryptedValue | str, key: bytes) -> str:
    """Decifra valor produzido por encrypt.

    Args:
        value: EncryptedValue ou sua forma serializada.
        key: Mesma chave usada na cifra.

    Raises:
        CipherError: Encoding inválido, padding inválido (chave errada)
            ou plaintext que não é UTF-8.
    """
    _check_key(key)
    encrypted = EncryptedValue.parse(value) if isinstance(value, str) else value
    decryptor = Cipher(algorithms.AES(bytes(key)), modes.CBC(encrypted.salt)).decryptor()
    padded = decryptor.update(encrypted.ciphertext) + decryptor.finalize()
    try:
        unpadder = padding.PKCS7(BLOCK_SIZE * 8).unpadder()
        data = unpadder.update(padded) + unpadder.finalize()
    except ValueError as exc:
        raise CipherError("Invalid padding (wrong key or corrupted data)") from exc
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise CipherError("Decrypted data is not valid UTF-8") from exc


def encrypt_customer(record: CustomerRecord, key: bytes) -> EncryptedCustomerRecord:
    """Cifra o CPF do registro, preservando os demais campos."""
    return EncryptedCustomerRecord(
        customer_id=record.customer_id,
        name=record.name,
        email=record.email,
        encrypted_cpf=encrypt(record.cpf, key),
        registered_at=record.registered_at,
    )


def decrypt_customer(record: EncryptedCustomerRecord, key: bytes) -> CustomerRecord:
    """Decifra o CPF do registro para devolução ao chamador."""
    return CustomerRecord(
        customer_id=record.customer_id,
        name=record.name,
        email=record.email,
        cpf=decrypt(record.encrypted_cpf, key),
        registered_at=record.registered_at,
    )


class AesCbcFieldCipher:
    """Implementa FieldCipherProtocol com a chave derivada no startup.

    Args:
        key: Chave de 32 bytes, imutável durante a vida do processo.
    """

    def __init__(self, key: bytes) -> None:
        _check_key(key)
        self._key = bytes(key)

    @classmethod
    def from_secret(cls, secret: str) -> AesCbcFieldCipher:
        """Cria cipher a partir do segredo configurado (ENCRYPTION_KEY)."""
        return cls(derive_key(secret))

    def encrypt_customer(self, record: CustomerRecord) -> EncryptedCustomerRecord:
        return encrypt_customer(record, self._key)

    def decrypt_customer(self, record: EncryptedCustomerRecord) -> CustomerRecord:
        return decrypt_customer(record, self._key)
