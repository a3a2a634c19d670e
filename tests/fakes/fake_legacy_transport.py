"""Fakes do transporte para o sistema legado, sem IO."""

from __future__ import annotations

from typing import TYPE_CHECKING

from app.infra.stores import MemoryCustomerStore
from legacy_peer import LegacyProcessor

if TYPE_CHECKING:
    from collections.abc import Callable


class FakeLegacyTransport:
    """Implementa LegacyTransportProtocol devolvendo resposta fixa.

    Guarda os envelopes enviados para asserções sobre o que cruzou o transporte.
    """

    def __init__(
        self,
        reply: str = "",
        *,
        error: Exception | None = None,
        handler: Callable[[str], str] | None = None,
    ) -> None:
        self._reply = reply
        self._error = error
        self._handler = handler
        self.sent: list[str] = []

    async def send_envelope(self, wire_text: str) -> str:
        self.sent.append(wire_text)
        if self._error is not None:
            raise self._error
        if self._handler is not None:
            return self._handler(wire_text)
        return self._reply


def in_process_legacy_transport(
    store: MemoryCustomerStore | None = None,
) -> FakeLegacyTransport:
    """Transporte que entrega os envelopes direto ao processador do legado."""
    processor = LegacyProcessor(store if store is not None else MemoryCustomerStore())
    return FakeLegacyTransport(handler=lambda wire_text: processor.process(wire_text).body)
