"""Payload builders — construção de payloads para sistemas externos.

Estrutura:
- legacy/: envelopes XML do sistema legado de clientes
"""

__all__: list[str] = []
