"""Limites e formatos aceitos para cadastro de clientes."""

import re

CPF_PATTERN = re.compile(r"^\d{11}$")
EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
# UUID v4 (ids gerados pelo gateway)
CUSTOMER_ID_PATTERN = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-4[0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}$",
    re.IGNORECASE,
)
MAX_NAME_LENGTH = 200
