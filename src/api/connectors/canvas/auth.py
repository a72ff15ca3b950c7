"""Autenticação Canvas: snapshot de token, opções e estratégias de refresh.

Estratégias de refresh recebem o próprio cliente e devolvem o novo
snapshot de autenticação; o cliente substitui o snapshot anterior.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Any

import httpx
from pydantic import BaseModel, ConfigDict, ValidationError

from .errors import InvalidRefreshOptions, RefreshTokenFailed

if TYPE_CHECKING:
    from app.protocols.auth_state import AuthenticationProtocol

    from .http_client import CanvasHttpClient

logger = logging.getLogger(__name__)

OAUTH_TOKEN_PATH = "login/oauth2/token"
REQUIRED_REFRESH_OPTIONS = ("client_id", "client_secret", "redirect_uri", "refresh_token")

RefreshCallback = Callable[["CanvasHttpClient"], "AuthenticationProtocol"]


@dataclass(frozen=True)
class TokenAuthentication:
    """Autenticação mínima a partir de um token em texto."""

    token: str
    id: Any = None

    def update(self, attributes: Mapping[str, Any]) -> TokenAuthentication:
        return replace(self, token=attributes.get("token", self.token))


def as_authentication(authentication: str | AuthenticationProtocol) -> AuthenticationProtocol:
    if isinstance(authentication, str):
        return TokenAuthentication(authentication)
    return authentication


class RefreshTokenOptions(BaseModel):
    """Credenciais OAuth para a troca de refresh_token."""

    # IDs de developer key são numéricos; chegam como str no form OAuth.
    model_config = ConfigDict(extra="forbid", frozen=True, coerce_numbers_to_str=True)

    client_id: str
    client_secret: str
    redirect_uri: str
    refresh_token: str


class TokenResponse(BaseModel):
    """Resposta do endpoint OAuth; só `access_token` é obrigatório."""

    model_config = ConfigDict(extra="ignore")

    access_token: str
    token_type: str | None = None
    expires_in: int | None = None


def parse_refresh_options(
    options: Mapping[str, Any] | RefreshTokenOptions | None,
) -> RefreshTokenOptions | None:
    """Valida as opções de refresh na construção do cliente.

    Raises:
        InvalidRefreshOptions: Chaves extras, ausentes ou valores inválidos.
    """
    if isinstance(options, RefreshTokenOptions):
        return options
    if not options:
        return None

    extra = [key for key in options if key not in REQUIRED_REFRESH_OPTIONS]
    if extra:
        raise InvalidRefreshOptions(f"Invalid option(s) provided: {', '.join(extra)}")
    missing = [key for key in REQUIRED_REFRESH_OPTIONS if key not in options]
    if missing:
        raise InvalidRefreshOptions(f"Missing required option(s): {', '.join(missing)}")

    try:
        return RefreshTokenOptions.model_validate(dict(options))
    except ValidationError as exc:
        raise InvalidRefreshOptions(f"Invalid refresh option value(s): {exc}") from exc


def exchange_refresh_token(
    http: httpx.Client,
    url: str,
    options: RefreshTokenOptions,
    headers: Mapping[str, str],
) -> str:
    """Troca o refresh_token por um novo access_token.

    Returns:
        Novo bearer token.

    Raises:
        RefreshTokenFailed: Resposta não-2xx ou sem access_token.
    """
    form = {"grant_type": "refresh_token", **options.model_dump()}
    response = http.post(url, data=form, headers=dict(headers))
    if response.status_code not in (200, 201):
        logger.warning(
            "canvas_refresh_token_failed",
            extra={"status_code": response.status_code},
        )
        raise RefreshTokenFailed(
            f"Http Response: {response.status_code} \n"
            f"Error: {response.text or response.reason_phrase} \n"
        )
    try:
        token = TokenResponse.model_validate(response.json())
    except (ValueError, ValidationError) as exc:
        raise RefreshTokenFailed("Resposta OAuth sem access_token válido") from exc

    logger.info("canvas_refresh_token_ok")
    return token.access_token


def default_refresh_strategy(client: CanvasHttpClient) -> AuthenticationProtocol:
    """Refresh sob lock, evitando trocas duplicadas entre holders concorrentes.

    Recarrega o registro sob lock exclusivo; só troca o token se o registro
    ainda guarda o token que falhou. Caso outro holder já tenha renovado,
    adota o token renovado.
    """
    failed_token = client.authentication.token
    with client.lock() as record:
        if record.token == failed_token:
            record.update({"token": client.refresh_token()})
        else:
            logger.info(
                "canvas_refresh_token_adopted",
                extra={"record_id": record.id},
            )
    return record


def token_refresh_strategy(client: CanvasHttpClient) -> AuthenticationProtocol:
    """Refresh sem store compartilhado: troca o token e cria novo snapshot."""
    current = client.authentication
    return TokenAuthentication(client.refresh_token(), id=getattr(current, "id", None))


__all__ = [
    "OAUTH_TOKEN_PATH",
    "REQUIRED_REFRESH_OPTIONS",
    "RefreshCallback",
    "RefreshTokenOptions",
    "TokenAuthentication",
    "TokenResponse",
    "as_authentication",
    "default_refresh_strategy",
    "exchange_refresh_token",
    "parse_refresh_options",
    "token_refresh_strategy",
]
