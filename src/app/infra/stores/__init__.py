"""Stores — implementações concretas de armazenamento.

Módulos disponíveis:
    - memory_stores: store de clientes em memória (sistema legado)
"""

from __future__ import annotations

from app.infra.stores.memory_stores import MemoryCustomerStore

__all__ = ["MemoryCustomerStore"]
