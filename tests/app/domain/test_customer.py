"""Testes dos modelos de cliente."""

from __future__ import annotations

import re

import pytest

from app.domain.customer import CustomerRecord, EncryptedValue, utc_now_iso
from utils.errors import CipherError


def test_utc_now_iso_has_milliseconds_and_z_suffix() -> None:
    assert re.fullmatch(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z", utc_now_iso())


def test_encrypted_value_encode_and_parse() -> None:
    value = EncryptedValue(salt=bytes(range(16)), ciphertext=b"\xff" * 32)
    encoded = value.encode()

    assert encoded == "000102030405060708090a0b0c0d0e0f:" + "ff" * 32
    assert str(value) == encoded
    assert EncryptedValue.parse(encoded) == value


def test_encrypted_value_parse_accepts_uppercase_hex() -> None:
    value = EncryptedValue.parse("AB" * 16 + ":" + "CD" * 16)
    assert value.salt == b"\xab" * 16


@pytest.mark.parametrize(
    "encoded",
    ["", ":", "00" * 16, "00" * 16 + ":" + "0", "00" * 17 + ":" + "00" * 16],
)
def test_encrypted_value_parse_rejects_malformed(encoded: str) -> None:
    with pytest.raises(CipherError):
        EncryptedValue.parse(encoded)


def test_public_dict_uses_wire_names() -> None:
    record = CustomerRecord(
        customer_id="id-1",
        name="Ana",
        email="ana@example.com",
        cpf="12345678901",
        registered_at="2026-01-02T10:30:00.000Z",
    )
    assert record.to_public_dict() == {
        "id": "id-1",
        "nome": "Ana",
        "email": "ana@example.com",
        "cpf": "12345678901",
        "dataCadastro": "2026-01-02T10:30:00.000Z",
    }
