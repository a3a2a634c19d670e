"""Correlation id por requisição, injetado nos logs.

Usa ContextVar: cada requisição (task asyncio) enxerga o próprio valor.
O id chega pelo header x-correlation-id ou é gerado na borda, e é
devolvido ao chamador no mesmo header.
"""

from __future__ import annotations

import re
import uuid
from contextvars import ContextVar, Token

CORRELATION_HEADER = "x-correlation-id"

# Aceita ids de outros serviços sem permitir injeção nos logs
_VALID_CORRELATION_ID = re.compile(r"^[A-Za-z0-9._\-]{1,128}$")

_correlation_id: ContextVar[str] = ContextVar("correlation_id", default="")


def get_correlation_id() -> str:
    """Retorna o correlation_id do contexto atual (vazio se não definido)."""
    return _correlation_id.get()


def set_correlation_id(correlation_id: str | None = None) -> Token[str]:
    """Define o correlation_id no contexto atual.

    Valores ausentes ou fora do formato são substituídos por um UUID novo.

    Returns:
        Token para reset posterior via reset_correlation_id().
    """
    if not correlation_id or not _VALID_CORRELATION_ID.match(correlation_id):
        correlation_id = str(uuid.uuid4())
    return _correlation_id.set(correlation_id)


def reset_correlation_id(token: Token[str]) -> None:
    """Restaura o correlation_id ao valor anterior."""
    _correlation_id.reset(token)
