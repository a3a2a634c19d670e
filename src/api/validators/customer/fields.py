"""Validadores de input de clientes (cadastro e consulta)."""

from __future__ import annotations

from typing import TYPE_CHECKING

from api.validators.customer.limits import (
    CPF_PATTERN,
    CUSTOMER_ID_PATTERN,
    EMAIL_PATTERN,
    MAX_NAME_LENGTH,
)
from utils.errors import ValidationError

if TYPE_CHECKING:
    from app.domain.customer import CustomerInput


def validate_customer_input(data: CustomerInput) -> None:
    """Valida campos de cadastro.

    Raises:
        ValidationError: Campo ausente, CPF fora do formato ou email inválido.
    """
    if not data.name or not data.email or not data.cpf:
        raise ValidationError("Campos obrigatórios: nome, email, cpf")

    if len(data.name) > MAX_NAME_LENGTH:
        raise ValidationError(f"Nome excede {MAX_NAME_LENGTH} caracteres")

    if not CPF_PATTERN.fullmatch(data.cpf):
        raise ValidationError("CPF inválido. Deve conter 11 dígitos numéricos.")

    if not EMAIL_PATTERN.fullmatch(data.email):
        raise ValidationError("Email inválido")


def validate_customer_id(customer_id: str) -> None:
    """Valida formato do id de consulta.

    Raises:
        ValidationError: Id fora do formato UUID v4.
    """
    if not customer_id or not CUSTOMER_ID_PATTERN.fullmatch(customer_id):
        raise ValidationError("ID inválido")


class CustomerInputValidator:
    """Implementa CustomerInputValidatorProtocol."""

    def validate_customer_input(self, data: CustomerInput) -> None:
        validate_customer_input(data)

    def validate_customer_id(self, customer_id: str) -> None:
        validate_customer_id(customer_id)
