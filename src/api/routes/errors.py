"""Mapeamento de exceções do gateway para respostas JSON.

- ValidationError / corpo inválido → 400
- AuthenticationError → 401/403
- CipherError, CodecError → 500 genérico (detalhe só no log)
- PeerError → 502 com a mensagem do legado
- TransportError → 503 "Sistema legado indisponível"
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from api.middleware.auth import AuthenticationError
from utils.errors import (
    CipherError,
    CodecError,
    PeerError,
    TransportError,
    ValidationError,
)

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Erro interno do servidor"
UNAVAILABLE_MESSAGE = "Sistema legado indisponível"


def _failure(status_code: int, message: str, **extra: object) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "message": message, **extra},
    )


async def _handle_authentication(request: Request, exc: AuthenticationError) -> JSONResponse:
    return _failure(exc.status_code, exc.message)


async def _handle_validation(request: Request, exc: ValidationError) -> JSONResponse:
    return _failure(400, str(exc))


async def _handle_request_validation(
    request: Request,
    exc: RequestValidationError,
) -> JSONResponse:
    return _failure(400, "Corpo da requisição inválido")


async def _handle_internal(request: Request, exc: CipherError | CodecError) -> JSONResponse:
    logger.error(
        "translation_failed",
        extra={
            "component": "customer_routes",
            "error_type": type(exc).__name__,
            "error": str(exc),
            "path": request.url.path,
        },
    )
    return _failure(500, INTERNAL_ERROR_MESSAGE)


async def _handle_peer(request: Request, exc: PeerError) -> JSONResponse:
    return _failure(502, "Erro no sistema legado", error=exc.message)


async def _handle_transport(request: Request, exc: TransportError) -> JSONResponse:
    logger.warning(
        "legacy_unavailable",
        extra={"component": "customer_routes", "reason": str(exc), "path": request.url.path},
    )
    return _failure(503, UNAVAILABLE_MESSAGE)


def register_exception_handlers(app: FastAPI) -> None:
    """Registra handlers de exceção do gateway no app."""
    app.add_exception_handler(AuthenticationError, _handle_authentication)
    app.add_exception_handler(ValidationError, _handle_validation)
    app.add_exception_handler(RequestValidationError, _handle_request_validation)
    app.add_exception_handler(CipherError, _handle_internal)
    app.add_exception_handler(CodecError, _handle_internal)
    app.add_exception_handler(PeerError, _handle_peer)
    app.add_exception_handler(TransportError, _handle_transport)
