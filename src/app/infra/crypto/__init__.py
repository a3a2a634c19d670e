"""Criptografia do campo sensível (CPF) trafegado para o sistema legado.

AES-256-CBC com salt aleatório por chamada, serializado em hex.
Localizado em app/infra/: use cases dependem do protocolo, não deste módulo.
"""

from .constants import AES_KEY_SIZE, BLOCK_SIZE, SALT_SIZE
from .field_cipher import (
    AesCbcFieldCipher,
    decrypt,
    decrypt_customer,
    derive_key,
    encrypt,
    encrypt_customer,
)

__all__ = [
    "AES_KEY_SIZE",
    "AesCbcFieldCipher",
    "BLOCK_SIZE",
    "SALT_SIZE",
    "decrypt",
    "decrypt_customer",
    "derive_key",
    "encrypt",
    "encrypt_customer",
]
