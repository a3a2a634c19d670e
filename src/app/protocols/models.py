"""Modelos trocados entre tradutor e use cases do gateway.

Outcomes são construídos logo após o parse da resposta do legado,
consumidos uma vez pelo use case e descartados.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from app.domain.customer import EncryptedCustomerRecord

OperationKind = Literal["CADASTRO_CLIENTE", "CONSULTA_CLIENTE"]

CREATE_OPERATION: OperationKind = "CADASTRO_CLIENTE"
LOOKUP_OPERATION: OperationKind = "CONSULTA_CLIENTE"

STATUS_SUCCESS = "sucesso"
STATUS_NOT_FOUND = "NOT_FOUND"
STATUS_ERROR = "erro"


@dataclass(frozen=True, slots=True)
class SuccessWithRecord:
    """Consulta encontrou o cliente (CPF ainda cifrado)."""

    record: EncryptedCustomerRecord
    message: str = ""
    timestamp: str = ""


@dataclass(frozen=True, slots=True)
class SuccessGeneric:
    """Confirmação genérica de sucesso, sem registro (ack de cadastro)."""

    message: str = ""
    timestamp: str = ""
    customer_id: str | None = None


@dataclass(frozen=True, slots=True)
class NotFound:
    """Cliente inexistente no legado."""

    message: str = ""
    timestamp: str = ""


@dataclass(frozen=True, slots=True)
class ErrorOutcome:
    """Legado reportou erro de processamento."""

    message: str
    status: str = STATUS_ERROR
    timestamp: str = ""


Outcome = SuccessWithRecord | SuccessGeneric | NotFound | ErrorOutcome


@dataclass(frozen=True, slots=True)
class CreateRequest:
    """Envelope CADASTRO_CLIENTE recebido pelo legado."""

    record: EncryptedCustomerRecord
    timestamp: str


@dataclass(frozen=True, slots=True)
class LookupRequest:
    """Envelope CONSULTA_CLIENTE recebido pelo legado."""

    customer_id: str
    timestamp: str


LegacyRequest = CreateRequest | LookupRequest


@dataclass(frozen=True, slots=True)
class CreateResult:
    """Resultado do cadastro devolvido ao chamador."""

    customer_id: str
    timestamp: str
