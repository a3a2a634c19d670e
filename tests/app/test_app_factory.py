"""Testes do ciclo de vida do client HTTP do gateway."""

from __future__ import annotations

import httpx
import pytest

from app.app import create_app
from config.settings import GatewaySettings

SETTINGS = GatewaySettings(
    api_key="chave-app",
    encryption_key="segredo-app",
    legacy_system_url="http://legacy",
)


def test_factory_opens_no_client_without_lifespan() -> None:
    gateway = create_app(settings=SETTINGS)

    assert not hasattr(gateway.state, "owned_http_client")
    assert not hasattr(gateway.state, "customer_service")


@pytest.mark.asyncio
async def test_lifespan_opens_and_closes_owned_client() -> None:
    gateway = create_app(settings=SETTINGS)

    async with gateway.router.lifespan_context(gateway):
        owned = gateway.state.owned_http_client
        assert not owned.is_closed
        assert gateway.state.customer_service is not None
        assert gateway.state.legacy_client is not None

    assert owned.is_closed


@pytest.mark.asyncio
async def test_restarted_lifespan_rewires_fresh_client() -> None:
    gateway = create_app(settings=SETTINGS)

    async with gateway.router.lifespan_context(gateway):
        first = gateway.state.owned_http_client
    async with gateway.router.lifespan_context(gateway):
        second = gateway.state.owned_http_client
        assert not second.is_closed

    assert first is not second


@pytest.mark.asyncio
async def test_injected_client_is_wired_immediately_and_left_open() -> None:
    injected = httpx.AsyncClient()
    gateway = create_app(settings=SETTINGS, http_client=injected)

    assert gateway.state.customer_service is not None
    async with gateway.router.lifespan_context(gateway):
        assert not hasattr(gateway.state, "owned_http_client")

    assert not injected.is_closed
    await injected.aclose()
