"""Settings do gateway (API JSON → sistema legado XML).

Os defaults existem para desenvolvimento local; em staging/production
o bootstrap recusa os segredos padrão.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

DEFAULT_API_KEY = "minha-api-key-segura-123"
DEFAULT_ENCRYPTION_KEY = "chave-padrao-32-caracteres!!"
DEFAULT_LEGACY_SYSTEM_URL = "http://localhost:3001"


@dataclass(frozen=True)
class GatewaySettings:
    """Configurações do gateway.

    Attributes:
        api_key: Credencial Bearer exigida em /api/*
        encryption_key: Segredo do qual a chave AES é derivada
        legacy_system_url: URL base do sistema legado
        request_timeout_seconds: Timeout do round-trip com o legado
        port: Porta HTTP do gateway
    """

    api_key: str = DEFAULT_API_KEY
    encryption_key: str = DEFAULT_ENCRYPTION_KEY
    legacy_system_url: str = DEFAULT_LEGACY_SYSTEM_URL
    request_timeout_seconds: float = 10.0
    port: int = 3000

    def validate(self, *, strict: bool = False) -> list[str]:
        """Valida configurações do gateway.

        Args:
            strict: Recusa segredos padrão (staging/production).

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if not self.api_key:
            errors.append("API_KEY não configurada")

        if not self.encryption_key:
            errors.append("ENCRYPTION_KEY não configurada")
        elif len(self.encryption_key.encode("utf-8")) != len(self.encryption_key):
            errors.append("ENCRYPTION_KEY deve conter apenas caracteres ASCII")

        if not self.legacy_system_url.startswith(("http://", "https://")):
            errors.append("LEGACY_SYSTEM_URL deve começar com http:// ou https://")

        if self.request_timeout_seconds <= 0:
            errors.append("LEGACY_REQUEST_TIMEOUT_SECONDS deve ser > 0")

        if strict:
            if self.api_key == DEFAULT_API_KEY:
                errors.append("API_KEY padrão não permitida neste ambiente")
            if self.encryption_key == DEFAULT_ENCRYPTION_KEY:
                errors.append("ENCRYPTION_KEY padrão não permitida neste ambiente")

        return errors


def _load_gateway_from_env() -> GatewaySettings:
    """Carrega GatewaySettings de variáveis de ambiente."""
    return GatewaySettings(
        api_key=os.getenv("API_KEY", DEFAULT_API_KEY),
        encryption_key=os.getenv("ENCRYPTION_KEY", DEFAULT_ENCRYPTION_KEY),
        legacy_system_url=os.getenv("LEGACY_SYSTEM_URL", DEFAULT_LEGACY_SYSTEM_URL),
        request_timeout_seconds=float(os.getenv("LEGACY_REQUEST_TIMEOUT_SECONDS", "10")),
        port=int(os.getenv("PORT", "3000")),
    )


@lru_cache(maxsize=1)
def get_gateway_settings() -> GatewaySettings:
    """Retorna instância cacheada de GatewaySettings."""
    return _load_gateway_from_env()
