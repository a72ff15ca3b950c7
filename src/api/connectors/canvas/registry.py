"""Tipos do registro de endpoints Canvas.

O registro é gerado offline a partir da documentação da API e consumido
aqui como dado imutável: nome simbólico da ação → EndpointSpec.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType

from .errors import InvalidAPIMethod


class ParameterLocation(str, Enum):
    """Onde o parâmetro é enviado na requisição."""

    PATH = "path"
    QUERY = "query"
    FORM = "form"


class HttpMethod(str, Enum):
    """Verbos suportados pela API Canvas."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"


@dataclass(frozen=True)
class ParameterSpec:
    """Especificação de um parâmetro de endpoint.

    Attributes:
        name: Nome do parâmetro; pode ter um nível de aninhamento (`parent[child]`)
        required: True se o parâmetro é obrigatório
        location: path | query | form
    """

    name: str
    required: bool = False
    location: ParameterLocation = ParameterLocation.QUERY

    @property
    def nested_parts(self) -> tuple[str, str] | None:
        """Retorna (parent, child) quando o nome é `parent[child]`."""
        if "[" not in self.name or "]" not in self.name:
            return None
        parent, _, rest = self.name.partition("[")
        return parent, rest.replace("]", "")


@dataclass(frozen=True)
class EndpointSpec:
    """Endpoint da API: método, template de URI e parâmetros ordenados."""

    name: str
    method: HttpMethod
    uri: Callable[..., str]
    parameters: tuple[ParameterSpec, ...] = ()

    def parameters_in(self, location: ParameterLocation) -> list[str]:
        return [p.name for p in self.parameters if p.location == location]

    @property
    def required_parameters(self) -> list[ParameterSpec]:
        return [p for p in self.parameters if p.required]


class EndpointRegistry:
    """Mapeamento somente-leitura de nome de ação para EndpointSpec."""

    def __init__(self, endpoints: Iterable[EndpointSpec]) -> None:
        table: dict[str, EndpointSpec] = {}
        for endpoint in endpoints:
            if endpoint.name in table:
                raise ValueError(f"Endpoint duplicado no registro: {endpoint.name}")
            table[endpoint.name] = endpoint
        self._endpoints: Mapping[str, EndpointSpec] = MappingProxyType(table)

    def __contains__(self, name: object) -> bool:
        return name in self._endpoints

    def __len__(self) -> int:
        return len(self._endpoints)

    def get(self, name: str) -> EndpointSpec:
        """Busca o endpoint pelo nome da ação.

        Raises:
            InvalidAPIMethod: Se a ação não está registrada.
        """
        try:
            return self._endpoints[name]
        except KeyError:
            raise InvalidAPIMethod(f"Invalid API method: {name}") from None

    def names(self) -> list[str]:
        return sorted(self._endpoints)


__all__ = [
    "EndpointRegistry",
    "EndpointSpec",
    "HttpMethod",
    "ParameterLocation",
    "ParameterSpec",
]
