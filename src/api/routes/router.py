"""Agregador de rotas do gateway.

Uso:
    from api.routes import create_api_router

    app = FastAPI()
    app.include_router(create_api_router())
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from api.middleware.auth import require_api_key
from api.routes.customers.router import router as customers_router
from api.routes.health.router import router as health_router


def create_api_router() -> APIRouter:
    """Cria router principal com todos os sub-routers registrados.

    Returns:
        APIRouter com /health, /ready e /api/* (autenticado).
    """
    api_router = APIRouter()

    # Health checks (sem prefixo e sem autenticação)
    api_router.include_router(health_router, tags=["health"])

    api_router.include_router(
        customers_router,
        prefix="/api",
        tags=["clientes"],
        dependencies=[Depends(require_api_key)],
    )

    return api_router
