"""correlation_id por contexto, injetado nos logs pelo CorrelationIdFilter.

Usa ContextVar: cada thread (ou requisição do servidor que usa o cliente
Canvas) enxerga o próprio valor.

Uso:
    token = set_correlation_id(request_id)
    try:
        client.proxy("LIST_YOUR_COURSES", {})
    finally:
        reset_correlation_id(token)
"""

from __future__ import annotations

import uuid
from contextvars import ContextVar, Token

_correlation_id: ContextVar[str] = ContextVar("correlation_id", default="")


def get_correlation_id() -> str:
    """Retorna o correlation_id do contexto atual ('' se não definido)."""
    return _correlation_id.get()


def set_correlation_id(correlation_id: str | None = None) -> Token[str]:
    """Define o correlation_id; gera um UUID quando não informado."""
    return _correlation_id.set(correlation_id or str(uuid.uuid4()))


def reset_correlation_id(token: Token[str]) -> None:
    _correlation_id.reset(token)
