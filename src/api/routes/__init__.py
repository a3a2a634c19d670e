"""Rotas HTTP do gateway.

Estrutura:
- routes/customers/: cadastro e consulta de clientes (/api/clientes)
- routes/health/: health checks e readiness
- errors.py: mapeamento de exceções para respostas JSON
"""

from __future__ import annotations

from api.routes.errors import register_exception_handlers
from api.routes.router import create_api_router

__all__ = ["create_api_router", "register_exception_handlers"]
