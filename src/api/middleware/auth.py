"""Autenticação por API Key no header Authorization.

Formato esperado: `Authorization: Bearer <API_KEY>`.
- header ausente → 401
- formato diferente de "Bearer <token>" → 401
- token diferente da chave configurada → 403

Roda como dependência do router /api: requisição rejeitada nunca chega
ao tradutor nem ao sistema legado.
"""

from __future__ import annotations

import hmac
import logging

from fastapi import Request

logger = logging.getLogger(__name__)

BEARER_SCHEME = "Bearer"


class AuthenticationError(Exception):
    """Credencial ausente, malformada ou inválida."""

    def __init__(self, message: str, status_code: int) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


def check_bearer_credential(authorization: str | None, expected_key: str) -> None:
    """Valida header Authorization contra a chave configurada.

    Raises:
        AuthenticationError: 401 para ausente/malformado, 403 para chave errada.
    """
    if not authorization:
        raise AuthenticationError(
            "Autenticação necessária. Forneça o header Authorization.",
            status_code=401,
        )

    parts = authorization.split(" ")
    if len(parts) != 2 or parts[0] != BEARER_SCHEME:
        raise AuthenticationError(
            "Formato de autenticação inválido. Use: Bearer {API_KEY}",
            status_code=401,
        )

    if not hmac.compare_digest(parts[1].encode("utf-8"), expected_key.encode("utf-8")):
        raise AuthenticationError("API Key inválida", status_code=403)


async def require_api_key(request: Request) -> None:
    """Dependência FastAPI que protege as rotas /api."""
    settings = request.app.state.gateway_settings
    try:
        check_bearer_credential(request.headers.get("authorization"), settings.api_key)
    except AuthenticationError as exc:
        logger.warning(
            "auth_rejected",
            extra={
                "component": "auth",
                "status_code": exc.status_code,
                "path": request.url.path,
            },
        )
        raise
