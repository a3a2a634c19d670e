"""Agregador de settings do gateway de clientes.

Re-exporta todas as settings e funções de cada módulo.
"""

from __future__ import annotations

from config.settings.base import (
    BaseSettings,
    Environment,
    get_base_settings,
)
from config.settings.gateway import (
    DEFAULT_API_KEY,
    DEFAULT_ENCRYPTION_KEY,
    DEFAULT_LEGACY_SYSTEM_URL,
    GatewaySettings,
    get_gateway_settings,
)
from config.settings.legacy import (
    LegacySettings,
    get_legacy_settings,
)

__all__ = [
    "DEFAULT_API_KEY",
    "DEFAULT_ENCRYPTION_KEY",
    "DEFAULT_LEGACY_SYSTEM_URL",
    "BaseSettings",
    "Environment",
    "GatewaySettings",
    "LegacySettings",
    "get_base_settings",
    "get_gateway_settings",
    "get_legacy_settings",
]
