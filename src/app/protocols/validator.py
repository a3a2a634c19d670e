"""Protocolos de validação de input do chamador."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from utils.errors import ValidationError

if TYPE_CHECKING:
    from app.domain.customer import CustomerInput

__all__ = ["CustomerInputValidatorProtocol", "ValidationError"]


class CustomerInputValidatorProtocol(Protocol):
    """Contrato mínimo para validação de cadastro e consulta."""

    def validate_customer_input(self, data: CustomerInput) -> None: ...

    def validate_customer_id(self, customer_id: str) -> None: ...
