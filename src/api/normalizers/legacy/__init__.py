"""Normalizer do sistema legado — XML de resposta/requisição → modelos internos."""

from .reply import (
    LegacyReplyInterpreter,
    interpret_reply,
    interpret_request,
    record_from_node,
    unwrap,
)

__all__ = [
    "LegacyReplyInterpreter",
    "interpret_reply",
    "interpret_request",
    "record_from_node",
    "unwrap",
]
