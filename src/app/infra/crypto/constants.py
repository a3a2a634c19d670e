"""Constantes criptográficas do campo sensível (CPF)."""

from app.domain.customer import BLOCK_SIZE, ENCODED_SEPARATOR, SALT_SIZE

AES_KEY_SIZE = 32  # 256 bits
KEY_PAD_CHAR = "0"

__all__ = ["AES_KEY_SIZE", "BLOCK_SIZE", "ENCODED_SEPARATOR", "KEY_PAD_CHAR", "SALT_SIZE"]
