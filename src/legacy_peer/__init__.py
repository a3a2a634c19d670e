"""Simulador do sistema legado de clientes.

Recebe envelopes XML em POST /processar, guarda clientes em memória
(CPF sempre cifrado) e responde no formato <resposta> do legado.
"""

from legacy_peer.processor import LegacyProcessor, ProcessResult

__all__ = ["LegacyProcessor", "ProcessResult"]
