"""Montagem de path e query string a partir do EndpointSpec."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any
from urllib.parse import quote, urlencode

from .errors import MissingRequiredParameter
from .registry import EndpointSpec, ParameterLocation

# Paginação é sempre permitida, mesmo sem declaração no endpoint.
PAGING_PARAMETERS = ("per_page", "page")

# IDs SIS (`sis_course_id:ABC`) e logins (`sis_login_id:a@b`) seguem sem escape.
PATH_SAFE_CHARACTERS = ":@"


def _query_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return ""
    return str(value)


def flatten_query(params: Mapping[str, Any], prefix: str | None = None) -> list[tuple[str, str]]:
    """Achata mapeamentos no formato `parent[child]=v` e listas em `key[]=v`.

    Chaves são ordenadas, como o `to_query` esperado pela API Canvas.
    """
    pairs: list[tuple[str, str]] = []
    for key in sorted(params, key=str):
        value = params[key]
        name = f"{prefix}[{key}]" if prefix else str(key)
        if isinstance(value, Mapping):
            pairs.extend(flatten_query(value, name))
        elif isinstance(value, (list, tuple)):
            pairs.extend((f"{name}[]", _query_value(item)) for item in value)
        else:
            pairs.append((name, _query_value(value)))
    return pairs


def render_path(endpoint: EndpointSpec, params: Mapping[str, Any]) -> str:
    """Substitui os parâmetros de path no template de URI.

    Raises:
        MissingRequiredParameter: Se o template exige parâmetro de path ausente.
    """
    path_names = endpoint.parameters_in(ParameterLocation.PATH)
    args = {
        name: quote(str(params[name]), safe=PATH_SAFE_CHARACTERS)
        for name in path_names
        if name in params and params[name] is not None
    }
    try:
        return endpoint.uri(**args) if args else endpoint.uri()
    except TypeError:
        missing = [name for name in path_names if name not in args]
        if not missing:
            raise
        raise MissingRequiredParameter(missing) from None


def build_query(endpoint: EndpointSpec, params: Mapping[str, Any]) -> str:
    """Filtra params pela allow-list de query e codifica em form-encoding."""
    allowed = set(endpoint.parameters_in(ParameterLocation.QUERY))
    allowed.update(PAGING_PARAMETERS)
    filtered = {key: value for key, value in params.items() if key in allowed}
    if not filtered:
        return ""
    return urlencode(flatten_query(filtered))


def build_url(endpoint: EndpointSpec, params: Mapping[str, Any]) -> str:
    """Retorna `path` ou `path?query` (sem `?` quando a query fica vazia)."""
    path = render_path(endpoint, params)
    query = build_query(endpoint, params)
    return f"{path}?{query}" if query else path


__all__ = [
    "PAGING_PARAMETERS",
    "PATH_SAFE_CHARACTERS",
    "build_query",
    "build_url",
    "flatten_query",
    "render_path",
]
