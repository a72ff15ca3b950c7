"""Helpers de logging para a API Canvas (sem tokens)."""

from __future__ import annotations

import logging
from urllib.parse import urlsplit

logger = logging.getLogger(__name__)


def _path_only(url: str) -> str:
    # Query pode carregar filtros do usuário; loga só o path.
    return urlsplit(url).path or url


def log_request_error(method: str, url: str, status_code: int) -> None:
    logger.warning(
        "canvas_request_failed",
        extra={
            "method": method,
            "path": _path_only(url),
            "status_code": status_code,
        },
    )


def log_refresh_required(method: str, url: str, attempt: int) -> None:
    """Loga 401 com desafio do realm (token expirado)."""
    logger.info(
        "canvas_refresh_required",
        extra={
            "method": method,
            "path": _path_only(url),
            "attempt": attempt,
        },
    )


def log_success(method: str, url: str, status_code: int) -> None:
    logger.debug(
        "canvas_request_ok",
        extra={
            "method": method,
            "path": _path_only(url),
            "status_code": status_code,
        },
    )
