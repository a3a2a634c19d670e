"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    CipherError,
    CodecError,
    GatewayError,
    InfrastructureError,
    PeerError,
    TransportError,
    ValidationError,
)

__all__ = [
    "CipherError",
    "CodecError",
    "GatewayError",
    "InfrastructureError",
    "PeerError",
    "TransportError",
    "ValidationError",
]
