"""Formatters de logging estruturado (python-json-logger).

Campos obrigatórios em ordem fixa: asctime, level, logger, service,
correlation_id, message. Campos passados via `extra` vêm em seguida.
"""

from __future__ import annotations

from pythonjsonlogger.json import JsonFormatter

# Ordem de serialização dos campos obrigatórios
LOG_FIELD_ORDER = (
    "asctime",
    "levelname",
    "name",
    "service",
    "correlation_id",
    "message",
)

REQUIRED_LOG_FIELDS = frozenset(LOG_FIELD_ORDER)

# Mapeamento de nomes de campos para formato padrão
FIELD_RENAME_MAP = {
    "levelname": "level",
    "name": "logger",
}


def create_json_formatter() -> JsonFormatter:
    """Cria formatter JSON com campos padronizados.

    Exemplo de output:
        {
            "asctime": "2026-02-02 10:30:00,123",
            "level": "INFO",
            "logger": "app.use_cases.customers.gateway_service",
            "service": "legacy_bridge",
            "correlation_id": "abc-123",
            "message": "customer_create_accepted",
            "customer_id": "0f8c..."
        }
    """
    format_string = " ".join(f"%({field})s" for field in LOG_FIELD_ORDER)
    return JsonFormatter(format_string, rename_fields=FIELD_RENAME_MAP)
