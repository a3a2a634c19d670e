"""Protocolos HTTP usados pelo app.

Evita dependência direta da camada api.
"""

from __future__ import annotations

from typing import Protocol


class LegacyTransportProtocol(Protocol):
    """Contrato mínimo para o round-trip com o sistema legado.

    Implementações devem levantar TransportError quando o legado
    estiver inacessível e devolver o corpo da resposta nos demais casos.
    """

    async def send_envelope(self, wire_text: str) -> str: ...
