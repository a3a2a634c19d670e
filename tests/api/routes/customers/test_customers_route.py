"""Testes das rotas /api/clientes contra o legado em processo."""

from __future__ import annotations

from collections.abc import AsyncIterator

import httpx
import pytest
import pytest_asyncio

from app.app import create_app
from config.settings import GatewaySettings
from legacy_peer.app import create_app as create_legacy_app

API_KEY = "chave-de-teste"
AUTH = {"Authorization": f"Bearer {API_KEY}"}
SETTINGS = GatewaySettings(
    api_key=API_KEY,
    encryption_key="segredo-de-teste",
    legacy_system_url="http://legacy",
)


@pytest_asyncio.fixture
async def client() -> AsyncIterator[httpx.AsyncClient]:
    legacy_http = httpx.AsyncClient(transport=httpx.ASGITransport(app=create_legacy_app()))
    gateway = create_app(settings=SETTINGS, http_client=legacy_http)
    async with httpx.AsyncClient(
        transport=httpx.ASGITransport(app=gateway),
        base_url="http://gateway",
    ) as http_client:
        yield http_client
    await legacy_http.aclose()


@pytest.mark.asyncio
async def test_create_returns_201(client: httpx.AsyncClient) -> None:
    response = await client.post(
        "/api/clientes",
        json={"nome": "Maria", "email": "maria@example.com", "cpf": "12345678901"},
        headers=AUTH,
    )
    body = response.json()

    assert response.status_code == 201
    assert body["success"] is True
    assert body["message"] == "Cliente cadastrado com sucesso"
    assert len(body["clienteId"]) == 36
    assert body["timestamp"].endswith("Z")


@pytest.mark.asyncio
async def test_create_with_missing_field_returns_400(client: httpx.AsyncClient) -> None:
    response = await client.post(
        "/api/clientes",
        json={"nome": "Maria", "email": "maria@example.com"},
        headers=AUTH,
    )

    assert response.status_code == 400
    assert response.json() == {
        "success": False,
        "message": "Campos obrigatórios: nome, email, cpf",
    }


@pytest.mark.asyncio
async def test_create_with_invalid_cpf_returns_400(client: httpx.AsyncClient) -> None:
    response = await client.post(
        "/api/clientes",
        json={"nome": "Maria", "email": "maria@example.com", "cpf": "123"},
        headers=AUTH,
    )
    assert response.status_code == 400
    assert "CPF inválido" in response.json()["message"]


@pytest.mark.asyncio
async def test_create_with_non_json_body_returns_400(client: httpx.AsyncClient) -> None:
    response = await client.post(
        "/api/clientes",
        content=b"nao e json",
        headers={**AUTH, "Content-Type": "application/json"},
    )
    assert response.status_code == 400
    assert response.json()["success"] is False


@pytest.mark.asyncio
async def test_lookup_invalid_id_returns_400(client: httpx.AsyncClient) -> None:
    response = await client.get("/api/clientes/123", headers=AUTH)
    assert response.status_code == 400
    assert response.json()["message"] == "ID inválido"


@pytest.mark.asyncio
async def test_lookup_unknown_returns_404(client: httpx.AsyncClient) -> None:
    response = await client.get(
        "/api/clientes/0f8c3a52-8d4e-4b7a-9c1e-2f3a4b5c6d7e",
        headers=AUTH,
    )
    assert response.status_code == 404
    assert response.json() == {"success": False, "message": "Cliente não encontrado"}


@pytest.mark.asyncio
async def test_health_does_not_require_auth(client: httpx.AsyncClient) -> None:
    response = await client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "OK"


@pytest.mark.asyncio
async def test_correlation_id_is_echoed(client: httpx.AsyncClient) -> None:
    response = await client.get("/health", headers={"x-correlation-id": "req-123"})
    assert response.headers["x-correlation-id"] == "req-123"


@pytest.mark.asyncio
async def test_ready_checks_legacy_health(client: httpx.AsyncClient) -> None:
    response = await client.get("/ready")
    assert response.status_code == 200
    assert response.json()["checks"]["legacy"]["status"] == "ok"
