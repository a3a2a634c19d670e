"""Validators de input de clientes."""

from api.validators.customer.fields import (
    CustomerInputValidator,
    validate_customer_id,
    validate_customer_input,
)

__all__ = [
    "CustomerInputValidator",
    "validate_customer_id",
    "validate_customer_input",
]
