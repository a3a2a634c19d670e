"""Normalizers — conversão de payloads externos para modelos internos.

Estrutura:
- legacy/: XML do sistema legado de clientes (respostas e requisições)
"""

from .legacy import interpret_reply, interpret_request, unwrap

__all__ = [
    "interpret_reply",
    "interpret_request",
    "unwrap",
]
