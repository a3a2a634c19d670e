"""Endpoints de health check do gateway."""

from __future__ import annotations

import time
from typing import Any

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from app.domain.customer import utc_now_iso

router = APIRouter()


class HealthResponse(BaseModel):
    """Resposta do health check."""

    status: str
    timestamp: str


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Liveness probe — verifica se o serviço está rodando."""
    return HealthResponse(status="OK", timestamp=utc_now_iso())


@router.get("/ready")
async def readiness_check(request: Request) -> JSONResponse:
    """Readiness probe — verifica o /health do sistema legado."""
    legacy_client: Any | None = getattr(request.app.state, "legacy_client", None)
    started_at = time.perf_counter()
    legacy_ok = legacy_client is not None and await legacy_client.check_health()
    latency_ms = round((time.perf_counter() - started_at) * 1000, 2)

    payload = {
        "status": "ready" if legacy_ok else "not_ready",
        "checks": {
            "legacy": {
                "status": "ok" if legacy_ok else "failed",
                "latency_ms": latency_ms if legacy_client is not None else None,
            },
        },
        "timestamp": utc_now_iso(),
    }
    return JSONResponse(content=payload, status_code=200 if legacy_ok else 503)
