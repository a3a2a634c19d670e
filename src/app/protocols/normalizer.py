"""Protocolos de interpretação de respostas do sistema legado."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from .models import Outcome


class ReplyInterpreterProtocol(Protocol):
    """Contrato mínimo para transformar XML de resposta em Outcome."""

    def interpret_reply(self, wire_text: str) -> Outcome: ...
