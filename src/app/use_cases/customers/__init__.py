"""Use cases de clientes (gateway para o sistema legado)."""

from .gateway_service import CustomerGatewayService

__all__ = ["CustomerGatewayService"]
