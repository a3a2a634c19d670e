"""Bootstrap da aplicação — inicialização e wiring.

Composition root: carrega .env, configura logging e conecta as
implementações concretas (cifra, builders, normalizer, cliente HTTP)
aos protocolos do use case.

Uso:
    from app.bootstrap import initialize_app, validate_runtime_settings

    initialize_app()
    validate_runtime_settings()
"""

from __future__ import annotations

import logging

from dotenv import load_dotenv

from app.bootstrap.dependencies import create_customer_gateway_service, create_legacy_client
from app.observability import get_correlation_id
from config.logging import configure_logging
from config.settings import GatewaySettings, get_base_settings, get_gateway_settings

# Nome do serviço para logs
SERVICE_NAME = "legacy_bridge"

logger = logging.getLogger(__name__)


def initialize_app(service_name: str = SERVICE_NAME) -> None:
    """Inicializa logging estruturado com correlation_id.

    Deve ser chamada uma vez no início do serviço, antes de ler settings
    (o .env é carregado aqui).
    """
    load_dotenv()
    configure_logging(
        level=get_base_settings().log_level,
        service_name=service_name,
        correlation_id_getter=get_correlation_id,
    )


def validate_runtime_settings(gateway: GatewaySettings | None = None) -> None:
    """Valida settings obrigatórias no startup.

    Em `staging`/`production` falha rápido para impedir boot inválido.
    Em `development` mantém alerta sem bloquear execução local.
    """
    base = get_base_settings()
    errors = [f"base: {error}" for error in base.validate()]
    gateway = gateway or get_gateway_settings()
    errors.extend(f"gateway: {error}" for error in gateway.validate(strict=base.is_strict))

    if not errors:
        logger.info(
            "settings_validated",
            extra={"component": "bootstrap", "result": "ok", "environment": base.environment},
        )
        return

    logger.warning(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "result": "failed",
            "environment": base.environment,
            "error_count": len(errors),
            "errors": errors,
        },
    )
    if base.is_strict:
        details = "\n".join(f"- {error}" for error in errors)
        raise RuntimeError(f"Configuração inválida para {base.environment}:\n{details}")


__all__ = [
    "SERVICE_NAME",
    "create_customer_gateway_service",
    "create_legacy_client",
    "initialize_app",
    "validate_runtime_settings",
]
