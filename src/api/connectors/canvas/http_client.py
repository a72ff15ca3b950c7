"""Cliente HTTP base da API Canvas com refresh de token em 401.

Toda chamada passa por `refreshably`:
- 200/201: sucesso, corpo parseado
- 401 com `WWW-Authenticate: Bearer realm="canvas-lms"`: token expirado,
  executa o callback de refresh e repete a chamada
- demais status: InvalidAPIRequest com status e corpo

O número de refreshes por chamada é limitado por `max_refresh_attempts`.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator, Mapping
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

import httpx

from .auth import (
    OAUTH_TOKEN_PATH,
    RefreshCallback,
    RefreshTokenOptions,
    as_authentication,
    default_refresh_strategy,
    exchange_refresh_token,
    parse_refresh_options,
)
from .canvas_logging import log_refresh_required, log_request_error, log_success
from .errors import (
    InvalidAPIRequest,
    InvalidRefreshOptions,
    RefreshTokenFailed,
    RefreshTokenRequired,
)
from .pagination import collect_all, iter_pages

if TYPE_CHECKING:
    from app.protocols.auth_state import AuthenticationProtocol, AuthStateStoreProtocol

logger: logging.Logger = logging.getLogger(__name__)

USER_AGENT = "LMS-API Python"
CANVAS_REALM_CHALLENGE = 'Bearer realm="canvas-lms"'
SUCCESS_CODES = (200, 201)
DEFAULT_PER_PAGE = 100


@dataclass
class CanvasHttpClientConfig:
    """Configuração de transporte do cliente Canvas."""

    timeout_seconds: float = 30.0
    verify_ssl: bool = True
    per_page: int = DEFAULT_PER_PAGE
    max_refresh_attempts: int = 1
    user_agent: str = USER_AGENT
    default_headers: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class ApiResponse:
    """Resposta da API já validada (2xx) com corpo parseado."""

    status_code: int
    headers: Mapping[str, str]
    body: Any


def parse_body(response: httpx.Response) -> Any:
    """JSON quando possível; texto quando não; None para corpo vazio."""
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return response.text


def api_error(response: httpx.Response, body: Any) -> str:
    """Mensagem de diagnóstico de uma resposta não-2xx."""
    errors = body.get("errors") if isinstance(body, dict) else None
    return (
        f"Status: {response.headers.get('status')} \n"
        f"Http Response: {response.status_code} \n"
        f"Error: {errors or response.reason_phrase} \n"
    )


class CanvasHttpClient:
    """Transporte autenticado da API Canvas.

    Mantém o snapshot de autenticação corrente e coordena o refresh do
    token. Não é dono da persistência do registro de autenticação: usa o
    `auth_store` (transação + lock) apenas durante o refresh.
    """

    def __init__(
        self,
        base_uri: str,
        authentication: str | AuthenticationProtocol,
        refresh_token_options: Mapping[str, Any] | RefreshTokenOptions | None = None,
        *,
        on_auth: RefreshCallback | None = None,
        auth_store: AuthStateStoreProtocol | None = None,
        config: CanvasHttpClientConfig | None = None,
        http_client: httpx.Client | None = None,
    ) -> None:
        """Inicializa o cliente.

        Args:
            base_uri: URL base da instância Canvas (ex: https://x.instructure.com)
            authentication: Token em texto ou registro com id/token/update
            refresh_token_options: client_id, client_secret, redirect_uri,
                refresh_token. Sem opções, 401 não dispara refresh.
            on_auth: Callback de refresh; padrão é a estratégia com lock
            auth_store: Store usado pela estratégia padrão
            config: Configuração de transporte
            http_client: Cliente httpx injetado (testes/pools compartilhados)

        Raises:
            InvalidRefreshOptions: Opções de refresh extras ou ausentes.
        """
        self._config = config or CanvasHttpClientConfig()
        if self._config.max_refresh_attempts < 0:
            raise ValueError("max_refresh_attempts deve ser >= 0")
        self.base_uri = base_uri.rstrip("/")
        self.per_page = self._config.per_page
        self._authentication = as_authentication(authentication)
        self._refresh_options = parse_refresh_options(refresh_token_options)
        self._on_auth = on_auth or default_refresh_strategy
        self._auth_store = auth_store
        self._owns_http = http_client is None
        self._http = http_client or httpx.Client(
            timeout=self._config.timeout_seconds,
            verify=self._config.verify_ssl,
        )

    @property
    def authentication(self) -> AuthenticationProtocol:
        return self._authentication

    @property
    def refresh_enabled(self) -> bool:
        return self._refresh_options is not None

    def close(self) -> None:
        if self._owns_http:
            self._http.close()

    def __enter__(self) -> CanvasHttpClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    # ──────────────────────────────────────────────────────────────────────
    # URLs e headers
    # ──────────────────────────────────────────────────────────────────────

    def full_url(self, api_url: str, use_api_prefix: bool = True) -> str:
        """URLs absolutas são usadas como estão (ex: links de paginação)."""
        if api_url.startswith("http"):
            return api_url
        if use_api_prefix:
            return f"{self.base_uri}/api/v1/{api_url}"
        return f"{self.base_uri}/{api_url}"

    def headers(self, additional_headers: Mapping[str, str] | None = None) -> dict[str, str]:
        return {
            **self._config.default_headers,
            "Authorization": f"Bearer {self._authentication.token}",
            "User-Agent": self._config.user_agent,
            **(additional_headers or {}),
        }

    # ──────────────────────────────────────────────────────────────────────
    # Refresh
    # ──────────────────────────────────────────────────────────────────────

    @contextmanager
    def lock(self) -> Iterator[AuthenticationProtocol]:
        """Transação + lock exclusivo; entrega o registro recarregado.

        Raises:
            InvalidRefreshOptions: Se nenhum auth_store foi configurado.
        """
        if self._auth_store is None:
            raise InvalidRefreshOptions(
                "auth_store é obrigatório para a estratégia de refresh padrão"
            )
        store = self._auth_store
        with store.transaction():
            record = store.lock(exclusive=True).find(self._authentication.id)
            yield record

    def refresh_token(self) -> str:
        """Executa a troca OAuth e retorna o novo access_token."""
        if self._refresh_options is None:
            raise InvalidRefreshOptions("Refresh token options não configuradas")
        return exchange_refresh_token(
            self._http,
            self.full_url(OAUTH_TOKEN_PATH, use_api_prefix=False),
            self._refresh_options,
            self.headers(),
        )

    def check_result(self, response: httpx.Response) -> ApiResponse:
        """Classifica a resposta: sucesso, refresh necessário ou erro.

        Raises:
            RefreshTokenRequired: 401 com desafio do realm Canvas.
            InvalidAPIRequest: Qualquer outro status não-2xx.
        """
        body = parse_body(response)
        if response.status_code in SUCCESS_CODES:
            return ApiResponse(response.status_code, response.headers, body)

        if (
            response.status_code == 401
            and response.headers.get("www-authenticate") == CANVAS_REALM_CHALLENGE
        ):
            raise RefreshTokenRequired(api_error(response, body))

        raise InvalidAPIRequest(
            api_error(response, body),
            status_code=response.status_code,
            body=body,
        )

    def refreshably(self, method: str, url: str, send: Callable[[], httpx.Response]) -> ApiResponse:
        """Executa `send` com refresh de token em 401 expirado.

        `send` é chamado a cada tentativa e deve ler os headers correntes,
        para que a repetição use o token renovado.
        """
        refreshes = 0
        while True:
            response = send()
            try:
                result = self.check_result(response)
            except RefreshTokenRequired as signal:
                log_refresh_required(method, url, refreshes + 1)
                if self._refresh_options is None:
                    raise InvalidAPIRequest(
                        str(signal), status_code=401, body=parse_body(response)
                    ) from None
                if refreshes >= self._config.max_refresh_attempts:
                    raise RefreshTokenFailed(
                        f"Token rejeitado após {refreshes} refresh(es): {method} {url}"
                    ) from None
                refreshes += 1
                self._authentication = self._on_auth(self)
                continue
            except InvalidAPIRequest as exc:
                log_request_error(method, url, exc.status_code or 0)
                raise
            log_success(method, url, result.status_code)
            return result

    # ──────────────────────────────────────────────────────────────────────
    # Verbos
    # ──────────────────────────────────────────────────────────────────────

    def _request(
        self,
        method: str,
        api_url: str,
        content: str | None = None,
        additional_headers: Mapping[str, str] | None = None,
    ) -> ApiResponse:
        url = self.full_url(api_url)

        def send() -> httpx.Response:
            return self._http.request(
                method,
                url,
                content=content,
                headers=self.headers(additional_headers),
            )

        return self.refreshably(method, url, send)

    def api_get_request(
        self, api_url: str, additional_headers: Mapping[str, str] | None = None
    ) -> ApiResponse:
        return self._request("GET", api_url, None, additional_headers)

    def api_post_request(
        self,
        api_url: str,
        payload: str,
        additional_headers: Mapping[str, str] | None = None,
    ) -> ApiResponse:
        return self._request("POST", api_url, payload, additional_headers)

    def api_put_request(
        self,
        api_url: str,
        payload: str,
        additional_headers: Mapping[str, str] | None = None,
    ) -> ApiResponse:
        return self._request("PUT", api_url, payload, additional_headers)

    def api_delete_request(
        self, api_url: str, additional_headers: Mapping[str, str] | None = None
    ) -> ApiResponse:
        return self._request("DELETE", api_url, None, additional_headers)

    def api_get_blocks_request(
        self, api_url: str, additional_headers: Mapping[str, str] | None = None
    ) -> Iterator[ApiResponse]:
        """Itera as páginas de um GET paginado."""
        return iter_pages(
            lambda url: self.api_get_request(url, additional_headers),
            api_url,
            self.per_page,
            self.base_uri,
        )

    def api_get_all_request(
        self, api_url: str, additional_headers: Mapping[str, str] | None = None
    ) -> list[Any]:
        """Coleta todas as páginas em uma única lista."""
        return collect_all(
            lambda url: self.api_get_request(url, additional_headers),
            api_url,
            self.per_page,
            self.base_uri,
        )


__all__ = [
    "CANVAS_REALM_CHALLENGE",
    "USER_AGENT",
    "ApiResponse",
    "CanvasHttpClient",
    "CanvasHttpClientConfig",
    "api_error",
    "parse_body",
]
