"""Testes do MemoryAuthStateStore."""

from __future__ import annotations

import pytest

from app.infra.stores.memory_auth_store import AuthRecord, MemoryAuthStateStore
from app.protocols.auth_state import AuthenticationProtocol


class TestMemoryAuthStateStore:
    """Testes do store de autenticação em memória."""

    def test_find_returns_fresh_snapshot(self) -> None:
        store = MemoryAuthStateStore({"a": "t1"})

        first = store.find("a")
        second = store.find("a")

        assert first == second
        assert first is not second

    def test_update_persists_and_reflects(self) -> None:
        store = MemoryAuthStateStore({"a": "t1"})
        record = store.find("a")
        stale = store.find("a")

        record.update({"token": "t2"})

        assert record.token == "t2"
        assert store.find("a").token == "t2"
        assert stale.token == "t1"

    def test_find_unknown_raises(self) -> None:
        with pytest.raises(KeyError):
            MemoryAuthStateStore().find("missing")

    def test_create_then_find(self) -> None:
        store = MemoryAuthStateStore()
        store.create(7, "abc")
        assert store.find(7).token == "abc"

    def test_transaction_lock_find(self) -> None:
        store = MemoryAuthStateStore({"a": "t1"})
        with store.transaction():
            record = store.lock(exclusive=True).find("a")
        assert isinstance(record, AuthRecord)

    def test_record_satisfies_authentication_protocol(self) -> None:
        record = MemoryAuthStateStore({"a": "t1"}).find("a")
        assert isinstance(record, AuthenticationProtocol)
