"""Settings do simulador do sistema legado."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache


@dataclass(frozen=True)
class LegacySettings:
    """Configurações do sistema legado.

    Attributes:
        port: Porta HTTP do legado
    """

    port: int = 3001

    def validate(self) -> list[str]:
        """Valida configurações do legado."""
        errors: list[str] = []
        if not 0 < self.port < 65536:
            errors.append("LEGACY_PORT fora do intervalo válido")
        return errors


@lru_cache(maxsize=1)
def get_legacy_settings() -> LegacySettings:
    """Retorna instância cacheada de LegacySettings."""
    return LegacySettings(port=int(os.getenv("LEGACY_PORT", "3001")))
