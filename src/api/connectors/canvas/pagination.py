"""Paginação por cabeçalho `Link` (rel="next").

A URL `next` já carrega o cursor de continuação e é seguida literalmente,
desde que aponte para a mesma origem (esquema, host e porta) da instância.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from typing import TYPE_CHECKING, Any
from urllib.parse import urlsplit

from .errors import InvalidAPIRequest

if TYPE_CHECKING:
    from .http_client import ApiResponse

logger = logging.getLogger(__name__)

Fetch = Callable[[str], "ApiResponse"]


def next_page_url(link_header: str | None) -> str | None:
    """Extrai a URL marcada com rel="next" de um cabeçalho Link.

    Cabeçalho ausente, vazio ou sem entrada `next` encerra a paginação.
    """
    if not link_header or not link_header.strip():
        return None
    for entry in link_header.split(","):
        parts = entry.split(";")
        if len(parts) < 2:
            continue
        if any(part.strip() == 'rel="next"' for part in parts[1:]):
            url = parts[0].strip().strip("<>").strip()
            return url or None
    return None


def first_page_url(url: str, per_page: int) -> str:
    connector = "&" if "?" in url else "?"
    return f"{url}{connector}per_page={per_page}"


def _origin(url: str) -> tuple[str, str]:
    parts = urlsplit(url)
    return parts.scheme.lower(), parts.netloc.lower()


def same_origin(url: str, base_uri: str | None) -> bool:
    """URLs relativas ou sem base configurada são sempre da instância."""
    if base_uri is None or not url.lower().startswith("http"):
        return True
    return _origin(url) == _origin(base_uri)


def iter_pages(
    fetch: Fetch,
    url: str,
    per_page: int,
    base_uri: str | None = None,
) -> Iterator[ApiResponse]:
    """Itera as páginas de um GET, da primeira até não haver `next`.

    Args:
        fetch: Executa o GET de uma URL (já com refresh de token)
        url: URL da primeira página, sem `per_page`
        per_page: Tamanho de página configurado
        base_uri: Origem da instância; links `next` fora dela são recusados

    Yields:
        ApiResponse de cada página, em ordem.

    Raises:
        InvalidAPIRequest: Link `next` aponta para outra origem.
    """
    next_url: str | None = first_page_url(url, per_page)
    page = 0
    while next_url:
        response = fetch(next_url)
        page += 1
        yield response
        next_url = next_page_url(response.headers.get("link"))
        if next_url and not same_origin(next_url, base_uri):
            logger.warning(
                "canvas_pagination_foreign_link",
                extra={"host": urlsplit(next_url).netloc, "pages": page},
            )
            raise InvalidAPIRequest(
                f"Link de paginação fora da instância: {urlsplit(next_url).netloc}",
                status_code=response.status_code,
            )
    logger.debug("canvas_pagination_done", extra={"pages": page})


def collect_all(
    fetch: Fetch,
    url: str,
    per_page: int,
    base_uri: str | None = None,
) -> list[Any]:
    """Concatena os corpos de todas as páginas, preservando a ordem."""
    results: list[Any] = []
    for response in iter_pages(fetch, url, per_page, base_uri):
        body = response.body
        if isinstance(body, list):
            results.extend(body)
        elif body is not None:
            results.append(body)
    return results


__all__ = ["collect_all", "first_page_url", "iter_pages", "next_page_url", "same_origin"]
