"""Builders de envelopes XML para o sistema legado de clientes."""

from api.payload_builders.legacy.envelope import (
    LegacyEnvelopeBuilder,
    build_create_envelope,
    build_lookup_envelope,
    build_reply_envelope,
)

__all__ = [
    "LegacyEnvelopeBuilder",
    "build_create_envelope",
    "build_lookup_envelope",
    "build_reply_envelope",
]
