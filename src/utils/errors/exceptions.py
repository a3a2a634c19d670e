"""Exceções do gateway de clientes.

Hierarquia:
- GatewayError: base de toda falha esperada do gateway
- ValidationError: input malformado (local, nunca chega ao tradutor)
- CipherError: cifra/decifra do CPF falhou (encoding inválido, chave errada)
- CodecError: XML malformado ou árvore não serializável
- PeerError: sistema legado reportou erro explicitamente
- InfrastructureError/TransportError: falha transitória de comunicação
"""

from __future__ import annotations


class GatewayError(Exception):
    """Base para falhas esperadas do gateway."""


class ValidationError(GatewayError):
    """Input do chamador inválido."""


class CipherError(GatewayError):
    """Erro em operação de cifra/decifra de campo."""


class CodecError(GatewayError):
    """Falha de serialização ou parsing do formato legado."""


class PeerError(GatewayError):
    """Sistema legado respondeu com erro.

    Args:
        message: Mensagem reportada pelo sistema legado.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InfrastructureError(RuntimeError):
    """Base para falhas de infraestrutura transitórias."""


class TransportError(InfrastructureError):
    """Sistema legado inacessível (conexão recusada, timeout)."""
