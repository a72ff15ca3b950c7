"""Payload de requisição: texto já serializado ou mapeamento estruturado."""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Union


@dataclass(frozen=True)
class RawPayload:
    """Payload recebido já serializado (JSON em texto)."""

    text: str

    def to_json(self) -> str:
        return self.text

    def as_mapping(self) -> Mapping[str, Any]:
        """Interpreta o texto como JSON para leitura de campos aninhados.

        Texto vazio ou que não é um objeto JSON resulta em mapeamento vazio.
        """
        if not self.text.strip():
            return {}
        try:
            decoded = json.loads(self.text)
        except json.JSONDecodeError:
            return {}
        return decoded if isinstance(decoded, dict) else {}


@dataclass(frozen=True)
class StructuredPayload:
    """Payload estruturado, serializado em JSON no envio."""

    data: Mapping[str, Any] = field(default_factory=dict)

    def to_json(self) -> str:
        return json.dumps(dict(self.data))

    def as_mapping(self) -> Mapping[str, Any]:
        return self.data


Payload = Union[RawPayload, StructuredPayload]


def coerce_payload(payload: Payload | str | Mapping[str, Any] | None) -> Payload:
    """Normaliza o payload do chamador para o tipo etiquetado.

    None e valores vazios viram StructuredPayload vazio (serializa como `{}`).
    """
    if isinstance(payload, (RawPayload, StructuredPayload)):
        return payload
    if isinstance(payload, str):
        return RawPayload(payload) if payload.strip() else StructuredPayload()
    if not payload:
        return StructuredPayload()
    if isinstance(payload, Mapping):
        return StructuredPayload(payload)
    raise TypeError(f"Payload não suportado: {type(payload).__name__}")


__all__ = ["Payload", "RawPayload", "StructuredPayload", "coerce_payload"]
