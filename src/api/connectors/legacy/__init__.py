"""Conector HTTP do sistema legado de clientes."""

from api.connectors.legacy.http_client import (
    HttpClientConfig,
    LegacyHttpClient,
    create_legacy_http_client,
)

__all__ = ["HttpClientConfig", "LegacyHttpClient", "create_legacy_http_client"]
