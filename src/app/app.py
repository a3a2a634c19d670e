"""Entrypoint do gateway de clientes.

Expõe a API JSON autenticada (/api/clientes) e traduz cada chamada em um
envelope XML para o sistema legado.

Uso (produção):
    uvicorn app.app:app --host 0.0.0.0 --port 3000

Uso (desenvolvimento):
    uvicorn app.app:app --reload --host 0.0.0.0 --port 3000
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

import httpx
from fastapi import FastAPI

from api.middleware import install_request_context
from api.routes import create_api_router, register_exception_handlers
from app.bootstrap import (
    create_customer_gateway_service,
    create_legacy_client,
    initialize_app,
    validate_runtime_settings,
)
from config.logging import get_logger
from config.settings import get_gateway_settings

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

    from config.settings import GatewaySettings

# Inicializar logging ANTES de qualquer import que use logger
initialize_app()

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Gerencia ciclo de vida da aplicação.

    Startup:
    - Valida configurações (falha em staging/production)
    - Abre o AsyncClient do legado, se nenhum foi injetado

    Shutdown:
    - Fecha o AsyncClient aberto aqui
    """
    logger.info("app_starting", extra={"service": "legacy-bridge"})
    settings = app.state.gateway_settings
    validate_runtime_settings(settings)

    owned_client = None
    if app.state.owns_http_client:
        owned_client = httpx.AsyncClient()
        app.state.owned_http_client = owned_client
        _wire_legacy(app, settings, owned_client)

    try:
        yield
    finally:
        logger.info("app_shutting_down", extra={"service": "legacy-bridge"})
        if owned_client is not None:
            await owned_client.aclose()


def _wire_legacy(app: FastAPI, settings: GatewaySettings, http_client: httpx.AsyncClient) -> None:
    legacy_client = create_legacy_client(settings, http_client)
    app.state.legacy_client = legacy_client
    app.state.customer_service = create_customer_gateway_service(settings, legacy_client)


def create_app(
    settings: GatewaySettings | None = None,
    http_client: httpx.AsyncClient | None = None,
) -> FastAPI:
    """Cria e configura a aplicação FastAPI.

    Args:
        settings: Settings do gateway. Se None, lê do ambiente.
        http_client: AsyncClient usado para falar com o legado. Se None, o
            lifespan abre um compartilhado no startup e fecha no shutdown.

    Returns:
        Aplicação FastAPI configurada.
    """
    settings = settings or get_gateway_settings()

    fastapi_app = FastAPI(
        title="Legacy Bridge",
        description="Gateway JSON para o sistema legado de clientes (XML)",
        version="1.0.0",
        lifespan=lifespan,
    )

    fastapi_app.state.gateway_settings = settings
    fastapi_app.state.owns_http_client = http_client is None
    # Client injetado: pronto já, sem depender do lifespan
    if http_client is not None:
        _wire_legacy(fastapi_app, settings, http_client)

    register_exception_handlers(fastapi_app)
    install_request_context(fastapi_app)
    fastapi_app.include_router(create_api_router())

    logger.info(
        "app_configured",
        extra={"service": "legacy-bridge", "legacy_system_url": settings.legacy_system_url},
    )

    return fastapi_app


# Aplicação ASGI exposta para uvicorn
app = create_app()


def main() -> None:
    """Entrypoint para execução direta (desenvolvimento)."""
    import uvicorn

    settings = get_gateway_settings()
    logger.info("Starting legacy bridge gateway", extra={"port": settings.port})
    uvicorn.run(
        "app.app:app",
        host="0.0.0.0",
        port=settings.port,
    )


if __name__ == "__main__":
    main()
