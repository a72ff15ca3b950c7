"""Ações helper: composições de várias chamadas Canvas sob um nome de ação."""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .client import CanvasClient


class HelperAction(str, Enum):
    """Ações que não mapeiam 1:1 para um endpoint da API."""

    ALL_ACCOUNTS = "HELPER_ALL_ACCOUNTS"


def all_accounts(client: CanvasClient) -> list[Any]:
    """Lista todas as contas, cada uma seguida de suas sub-contas (recursivo)."""
    accounts: list[Any] = []
    for account in client.proxy("LIST_ACCOUNTS", {}, collect_all=True):
        accounts.append(account)
        accounts.extend(
            client.proxy(
                "GET_SUB_ACCOUNTS_OF_ACCOUNT",
                {"account_id": account["id"], "recursive": True},
                collect_all=True,
            )
        )
    return accounts


HELPERS: dict[HelperAction, Callable[[CanvasClient], Any]] = {
    HelperAction.ALL_ACCOUNTS: all_accounts,
}


def resolve_helper(action: str) -> HelperAction | None:
    try:
        return HelperAction(action)
    except ValueError:
        return None


__all__ = ["HELPERS", "HelperAction", "all_accounts", "resolve_helper"]
