"""Connectors — adapters de borda para sistemas externos.

Estrutura:
- legacy/: sistema legado de clientes (XML sobre HTTP)
"""

__all__: list[str] = []
