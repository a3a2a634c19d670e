"""Middleware HTTP de contexto: correlation_id e log de acesso."""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING

from app.observability import (
    CORRELATION_HEADER,
    get_correlation_id,
    reset_correlation_id,
    set_correlation_id,
)

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from fastapi import FastAPI, Request, Response

logger = logging.getLogger(__name__)


def install_request_context(app: FastAPI) -> None:
    """Registra middleware que define correlation_id e loga cada requisição."""

    @app.middleware("http")
    async def _request_context(
        request: Request,
        call_next: Callable[[Request], Awaitable[Response]],
    ) -> Response:
        token = set_correlation_id(request.headers.get(CORRELATION_HEADER))
        started_at = time.perf_counter()
        try:
            response = await call_next(request)
            response.headers[CORRELATION_HEADER] = get_correlation_id()
            logger.info(
                "http_request",
                extra={
                    "method": request.method,
                    "path": request.url.path,
                    "status_code": response.status_code,
                    "latency_ms": round((time.perf_counter() - started_at) * 1000, 2),
                },
            )
            return response
        finally:
            reset_correlation_id(token)
