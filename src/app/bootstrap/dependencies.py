"""Factories de dependências — wiring do use case de clientes.

A chave AES é derivada aqui, uma vez, e fica presa ao cipher injetado;
nenhum módulo guarda chave ou cliente HTTP em variável global.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from api.connectors.legacy import LegacyHttpClient, create_legacy_http_client
from api.normalizers.legacy import LegacyReplyInterpreter
from api.payload_builders.legacy import LegacyEnvelopeBuilder
from api.validators.customer import CustomerInputValidator
from app.infra.crypto import AesCbcFieldCipher
from app.use_cases.customers import CustomerGatewayService

if TYPE_CHECKING:
    import httpx

    from config.settings import GatewaySettings


def create_legacy_client(
    settings: GatewaySettings,
    http_client: httpx.AsyncClient,
) -> LegacyHttpClient:
    """Cria cliente HTTP do legado conforme settings."""
    return create_legacy_http_client(
        base_url=settings.legacy_system_url,
        timeout_seconds=settings.request_timeout_seconds,
        client=http_client,
    )


def create_customer_gateway_service(
    settings: GatewaySettings,
    transport: LegacyHttpClient,
) -> CustomerGatewayService:
    """Cria use case do gateway com dependências concretas injetadas.

    Raises:
        CipherError: ENCRYPTION_KEY não produz chave de 32 bytes.
    """
    return CustomerGatewayService(
        validator=CustomerInputValidator(),
        cipher=AesCbcFieldCipher.from_secret(settings.encryption_key),
        builder=LegacyEnvelopeBuilder(),
        interpreter=LegacyReplyInterpreter(),
        transport=transport,
    )
