"""Endpoints de clientes: cadastro e consulta via sistema legado."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from app.domain.customer import CustomerInput
from app.use_cases.customers import CustomerGatewayService

router = APIRouter()

NOT_FOUND_MESSAGE = "Cliente não encontrado"


class CustomerCreateBody(BaseModel):
    """Corpo do POST /clientes (validação de formato fica no use case)."""

    nome: str | None = None
    email: str | None = None
    cpf: str | None = None


class CustomerCreatedResponse(BaseModel):
    """Resposta do cadastro."""

    success: bool = True
    message: str = "Cliente cadastrado com sucesso"
    clienteId: str
    timestamp: str


def get_customer_service(request: Request) -> CustomerGatewayService:
    """Service injetado no app pelo bootstrap."""
    return request.app.state.customer_service


@router.post("/clientes", status_code=201, response_model=CustomerCreatedResponse)
async def create_customer(
    body: CustomerCreateBody,
    service: CustomerGatewayService = Depends(get_customer_service),
) -> CustomerCreatedResponse:
    """Cadastra cliente: cifra CPF e encaminha CADASTRO_CLIENTE ao legado."""
    result = await service.create_customer(
        CustomerInput(name=body.nome or "", email=body.email or "", cpf=body.cpf or "")
    )
    return CustomerCreatedResponse(clienteId=result.customer_id, timestamp=result.timestamp)


@router.get("/clientes/{customer_id}")
async def lookup_customer(
    customer_id: str,
    service: CustomerGatewayService = Depends(get_customer_service),
) -> JSONResponse:
    """Consulta cliente no legado e devolve CPF decifrado."""
    record = await service.lookup_customer(customer_id)
    if record is None:
        return JSONResponse(
            status_code=404,
            content={"success": False, "message": NOT_FOUND_MESSAGE},
        )
    return JSONResponse(content={"success": True, "cliente": record.to_public_dict()})
