"""Stores: implementações concretas de persistência.

Módulos disponíveis:
    - memory_auth_store: registros de autenticação em memória com lock
"""

from __future__ import annotations

from app.infra.stores.memory_auth_store import AuthRecord, MemoryAuthStateStore

__all__ = [
    "AuthRecord",
    "MemoryAuthStateStore",
]
