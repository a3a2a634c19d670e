"""Rotas de clientes."""

from api.routes.customers.router import router

__all__ = ["router"]
