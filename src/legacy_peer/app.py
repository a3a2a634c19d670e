"""Entrypoint do simulador do sistema legado.

Uso:
    uvicorn legacy_peer.app:app --host 0.0.0.0 --port 3001
"""

from __future__ import annotations

from fastapi import FastAPI

from api.middleware import install_request_context
from app.bootstrap import initialize_app
from app.infra.stores import MemoryCustomerStore
from config.logging import get_logger
from config.settings import get_legacy_settings
from legacy_peer.processor import LegacyProcessor
from legacy_peer.routes import router

SERVICE_NAME = "legacy_peer"

initialize_app(SERVICE_NAME)

logger = get_logger(__name__)


def create_app(store: MemoryCustomerStore | None = None) -> FastAPI:
    """Cria o app do legado com store próprio.

    Args:
        store: Store de clientes. Se None, cria um vazio (isolado por app).
    """
    fastapi_app = FastAPI(
        title="Sistema Legado (simulador)",
        description="Recebe envelopes XML de clientes",
        version="1.0.0",
    )
    fastapi_app.state.processor = LegacyProcessor(
        store if store is not None else MemoryCustomerStore()
    )
    install_request_context(fastapi_app)
    fastapi_app.include_router(router)

    logger.info("legacy_app_configured", extra={"service": SERVICE_NAME})
    return fastapi_app


app = create_app()


def main() -> None:
    """Entrypoint para execução direta."""
    import uvicorn

    settings = get_legacy_settings()
    logger.info("Starting legacy system simulator", extra={"port": settings.port})
    uvicorn.run("legacy_peer.app:app", host="0.0.0.0", port=settings.port)


if __name__ == "__main__":
    main()
