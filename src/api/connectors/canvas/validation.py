"""Validação de parâmetros obrigatórios contra o registro de endpoints."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .errors import MissingRequiredParameter
from .payload import Payload, StructuredPayload
from .registry import EndpointSpec

# Ações cujo conjunto de obrigatórios depende de `config_type` (ex: by_xml),
# o que não é expressável no registro estático.
IGNORE_REQUIRED_ACTIONS = frozenset(
    {
        "CREATE_EXTERNAL_TOOL_COURSES",
        "CREATE_EXTERNAL_TOOL_ACCOUNTS",
    }
)


def is_blank(value: Any) -> bool:
    """None, string vazia/só espaços e coleções vazias contam como ausentes."""
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (Mapping, list, tuple, set, frozenset)):
        return len(value) == 0
    return False


def _nested_present(source: Mapping[str, Any], parent: str, child: str) -> bool:
    container = source.get(parent)
    if not isinstance(container, Mapping) or is_blank(container):
        return False
    return not is_blank(container.get(child))


def find_missing_parameters(
    endpoint: EndpointSpec,
    params: Mapping[str, Any],
    payload: Payload | None = None,
) -> list[str]:
    """Retorna os nomes de parâmetros obrigatórios ausentes (vazio = válido).

    Args:
        endpoint: Especificação do endpoint
        params: Parâmetros informados pelo chamador
        payload: Payload etiquetado (opcional)

    Returns:
        Lista na ordem de declaração do endpoint.
    """
    if endpoint.name in IGNORE_REQUIRED_ACTIONS:
        return []

    payload_data: Mapping[str, Any] = payload.as_mapping() if payload else {}
    flat_payload: Mapping[str, Any] = (
        payload_data if isinstance(payload, StructuredPayload) else {}
    )

    missing: list[str] = []
    for parameter in endpoint.required_parameters:
        nested = parameter.nested_parts
        if nested:
            parent, child = nested
            if not (
                _nested_present(params, parent, child)
                or _nested_present(payload_data, parent, child)
            ):
                missing.append(parameter.name)
            continue

        if is_blank(params.get(parameter.name)) and is_blank(
            flat_payload.get(parameter.name)
        ):
            missing.append(parameter.name)
    return missing


def validate_parameters(
    endpoint: EndpointSpec,
    params: Mapping[str, Any],
    payload: Payload | None = None,
) -> None:
    """Levanta MissingRequiredParameter se houver obrigatórios ausentes."""
    missing = find_missing_parameters(endpoint, params, payload)
    if missing:
        raise MissingRequiredParameter(missing)


__all__ = [
    "IGNORE_REQUIRED_ACTIONS",
    "find_missing_parameters",
    "is_blank",
    "validate_parameters",
]
