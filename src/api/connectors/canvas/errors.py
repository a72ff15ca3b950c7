"""Taxonomia de erros do conector Canvas LMS.

Todas as exceções derivam de CanvasError. Apenas RefreshTokenRequired é
sinal interno: é capturado pelo coordenador de refresh e nunca chega ao
chamador de `proxy`.
"""

from __future__ import annotations

from typing import Any


class CanvasError(RuntimeError):
    """Base para falhas do cliente Canvas."""


class RefreshTokenRequired(CanvasError):
    """Sinal interno: 401 com desafio do realm Canvas (token expirado)."""


class InvalidRefreshOptions(CanvasError):
    """Opções de refresh ausentes ou extras na construção do cliente."""


class RefreshTokenFailed(CanvasError):
    """Troca OAuth de refresh_token falhou ou token segue rejeitado."""


class InvalidAPIMethod(CanvasError):
    """Ação desconhecida ou verbo HTTP não suportado (erro de programação)."""


class MissingRequiredParameter(CanvasError):
    """Parâmetros obrigatórios ausentes na chamada."""

    def __init__(self, missing: list[str]) -> None:
        super().__init__(f"Missing required parameter(s): {', '.join(missing)}")
        self.missing = list(missing)


class InvalidAPIRequest(CanvasError):
    """Resposta não-2xx da API Canvas.

    Attributes:
        status_code: Status HTTP retornado (None se desconhecido)
        body: Corpo da resposta já parseado (JSON ou texto)
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        body: Any = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class InvalidAPIRequestFailed(InvalidAPIRequest):
    """InvalidAPIRequest enriquecido com URL, params e payload da chamada.

    É o erro efetivamente observado por quem chama `CanvasClient.proxy`.
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        body: Any = None,
        url: str | None = None,
        params: Any = None,
        payload: Any = None,
    ) -> None:
        super().__init__(message, status_code=status_code, body=body)
        self.url = url
        self.params = params
        self.payload = payload

    @classmethod
    def from_request_error(
        cls,
        error: InvalidAPIRequest,
        url: str | None,
        params: Any,
        payload: Any,
    ) -> InvalidAPIRequestFailed:
        """Reconstrói o erro com o contexto da requisição original."""
        message = (
            f"{error}"
            f"API Request Url: {url} \n"
            f"API Request Params: {params} \n"
            f"API Request Payload: {payload} \n"
        )
        return cls(
            message,
            status_code=error.status_code,
            body=error.body,
            url=url,
            params=params,
            payload=payload,
        )


__all__ = [
    "CanvasError",
    "InvalidAPIMethod",
    "InvalidAPIRequest",
    "InvalidAPIRequestFailed",
    "InvalidRefreshOptions",
    "MissingRequiredParameter",
    "RefreshTokenFailed",
    "RefreshTokenRequired",
]
