"""Endpoints HTTP do sistema legado."""

from __future__ import annotations

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse, Response

from app.domain.customer import utc_now_iso
from legacy_peer.processor import NOT_FOUND_MESSAGE, LegacyProcessor

router = APIRouter()

XML_MEDIA_TYPE = "application/xml"


def _processor(request: Request) -> LegacyProcessor:
    return request.app.state.processor


@router.post("/processar")
async def process_envelope(request: Request) -> Response:
    """Recebe envelope XML do gateway e responde em XML."""
    processor = _processor(request)
    raw = await request.body()
    try:
        wire_text = raw.decode("utf-8")
    except UnicodeDecodeError:
        result = processor.error("Corpo da requisição não é UTF-8")
    else:
        result = processor.process(wire_text)
    return Response(content=result.body, status_code=result.status_code, media_type=XML_MEDIA_TYPE)


@router.get("/clientes/{customer_id}")
async def get_stored_customer(customer_id: str, request: Request) -> JSONResponse:
    """Registro armazenado, com CPF ainda cifrado."""
    record = _processor(request).store.load(customer_id)
    if record is None:
        return JSONResponse(
            status_code=404,
            content={"success": False, "message": NOT_FOUND_MESSAGE},
        )
    return JSONResponse(content={"success": True, "cliente": record.to_stored_dict()})


@router.get("/health")
async def health_check() -> dict[str, str]:
    """Liveness probe."""
    return {"status": "OK", "timestamp": utc_now_iso()}
