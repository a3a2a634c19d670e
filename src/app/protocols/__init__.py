"""Protocolos e contratos do core da aplicação."""

from .crypto import FieldCipherProtocol
from .customer_store import CustomerStoreProtocol
from .http_client import LegacyTransportProtocol
from .models import (
    CreateRequest,
    CreateResult,
    ErrorOutcome,
    LegacyRequest,
    LookupRequest,
    NotFound,
    Outcome,
    SuccessGeneric,
    SuccessWithRecord,
)
from .normalizer import ReplyInterpreterProtocol
from .payload_builder import EnvelopeBuilderProtocol
from .validator import CustomerInputValidatorProtocol

__all__ = [
    "CreateRequest",
    "CreateResult",
    "CustomerInputValidatorProtocol",
    "CustomerStoreProtocol",
    "EnvelopeBuilderProtocol",
    "ErrorOutcome",
    "FieldCipherProtocol",
    "LegacyRequest",
    "LegacyTransportProtocol",
    "LookupRequest",
    "NotFound",
    "Outcome",
    "ReplyInterpreterProtocol",
    "SuccessGeneric",
    "SuccessWithRecord",
]
