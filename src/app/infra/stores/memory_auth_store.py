"""Store de autenticação em memória: apenas para desenvolvimento e testes.

ATENÇÃO: Não usar em staging/production. O lock vale só dentro do processo.
"""

from __future__ import annotations

import threading
from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any

from app.protocols.auth_state import AuthStateStoreProtocol


@dataclass
class AuthRecord:
    """Snapshot de um registro de autenticação carregado do store."""

    id: Any
    token: str
    _store: MemoryAuthStateStore = field(repr=False, compare=False)

    def update(self, attributes: Mapping[str, Any]) -> AuthRecord:
        """Persiste os atributos no store e reflete no snapshot."""
        self._store.write(self.id, attributes)
        if "token" in attributes:
            self.token = attributes["token"]
        return self


class MemoryAuthStateStore(AuthStateStoreProtocol):
    """Store thread-safe; `transaction` segura o lock durante o bloco."""

    def __init__(self, records: Mapping[Any, str] | None = None) -> None:
        self._tokens: dict[Any, str] = dict(records or {})
        self._lock = threading.RLock()

    @contextmanager
    def transaction(self) -> Iterator[MemoryAuthStateStore]:
        with self._lock:
            yield self

    def lock(self, exclusive: bool = True) -> MemoryAuthStateStore:
        # O lock exclusivo já é adquirido pela transação.
        return self

    def find(self, record_id: Any) -> AuthRecord:
        """Retorna um snapshot novo do registro.

        Raises:
            KeyError: Se o registro não existe.
        """
        with self._lock:
            return AuthRecord(id=record_id, token=self._tokens[record_id], _store=self)

    def create(self, record_id: Any, token: str) -> AuthRecord:
        with self._lock:
            self._tokens[record_id] = token
            return AuthRecord(id=record_id, token=token, _store=self)

    def write(self, record_id: Any, attributes: Mapping[str, Any]) -> None:
        with self._lock:
            if record_id not in self._tokens:
                raise KeyError(record_id)
            if "token" in attributes:
                self._tokens[record_id] = attributes["token"]


__all__ = ["AuthRecord", "MemoryAuthStateStore"]
