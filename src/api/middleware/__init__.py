"""Middlewares HTTP compartilhados (autenticação, contexto de requisição)."""

from api.middleware.auth import AuthenticationError, check_bearer_credential, require_api_key
from api.middleware.request_context import install_request_context

__all__ = [
    "AuthenticationError",
    "check_bearer_credential",
    "install_request_context",
    "require_api_key",
]
