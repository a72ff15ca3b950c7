"""Contratos de persistência do estado de autenticação.

O registro de autenticação é um recurso externo, possivelmente
compartilhado entre processos. O cliente Canvas nunca o altera
diretamente: usa transação + lock exclusivo + find + update.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from contextlib import AbstractContextManager
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class AuthenticationProtocol(Protocol):
    """Registro de autenticação com id, token e update."""

    @property
    def id(self) -> Any: ...

    @property
    def token(self) -> str: ...

    def update(self, attributes: Mapping[str, Any]) -> Any: ...


class AuthStateStoreProtocol(ABC):
    """Contrato mínimo do store de autenticação (transação + lock + find)."""

    @abstractmethod
    def transaction(self) -> AbstractContextManager[Any]:
        """Abre transação; o lock adquirido vale até o fim do bloco."""

    @abstractmethod
    def lock(self, exclusive: bool = True) -> AuthStateStoreProtocol:
        """Solicita lock exclusivo para as leituras seguintes."""

    @abstractmethod
    def find(self, record_id: Any) -> AuthenticationProtocol:
        """Carrega um snapshot novo do registro."""
