"""Cliente Canvas LMS: ponto único de entrada `proxy`.

Fluxo de uma ação:
    proxy → validação de parâmetros → montagem de URL → refresh/transporte
    → (paginação, para GET) → corpo parseado

Uso:
    client = CanvasClient("https://escola.instructure.com", token)
    courses = client.proxy("LIST_YOUR_COURSES", {"state": ["available"]}, collect_all=True)
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Any

from .errors import InvalidAPIMethod, InvalidAPIRequest, InvalidAPIRequestFailed
from .helpers import HELPERS, HelperAction, resolve_helper
from .http_client import ApiResponse, CanvasHttpClient
from .payload import Payload, coerce_payload
from .registry import EndpointRegistry, EndpointSpec, HttpMethod
from .url_builder import build_url
from .urls import CANVAS_URLS
from .validation import validate_parameters

logger = logging.getLogger(__name__)

JSON_HEADERS = {"Content-Type": "application/json"}

PageCallback = Callable[[Any], None]


class CanvasClient(CanvasHttpClient):
    """Cliente de alto nível que resolve ações simbólicas do registro."""

    def __init__(
        self,
        *args: Any,
        registry: EndpointRegistry | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(*args, **kwargs)
        self._registry = registry if registry is not None else CANVAS_URLS

    @property
    def registry(self) -> EndpointRegistry:
        return self._registry

    def proxy(
        self,
        action: str,
        params: Mapping[str, Any] | None = None,
        payload: Payload | str | Mapping[str, Any] | None = None,
        collect_all: bool = False,
        on_page: PageCallback | None = None,
    ) -> Any:
        """Executa uma ação da API pelo nome simbólico.

        Args:
            action: Nome da ação no registro (ex: "LIST_FOLDERS") ou helper
            params: Parâmetros de path e query
            payload: Corpo de POST/PUT (texto JSON ou mapeamento)
            collect_all: Em GET, concatena todas as páginas
            on_page: Em GET, chamado com o corpo de cada página

        Returns:
            Corpo parseado, lista concatenada (collect_all) ou None (on_page).

        Raises:
            InvalidAPIMethod: Ação desconhecida ou verbo não suportado
            MissingRequiredParameter: Obrigatórios ausentes (sem chamada HTTP)
            InvalidAPIRequestFailed: Resposta não-2xx, com URL/params/payload
            RefreshTokenFailed: Troca OAuth falhou ou token segue rejeitado
        """
        helper = resolve_helper(action)
        if helper is not None:
            return self._run_helper(helper).body

        endpoint = self._registry.get(action)
        call_params = dict(params or {})
        body = coerce_payload(payload)
        url: str | None = None
        try:
            validate_parameters(endpoint, call_params, body)
            url = build_url(endpoint, call_params)
            return self._dispatch(endpoint, url, body, collect_all, on_page)
        except InvalidAPIRequestFailed:
            raise
        except InvalidAPIRequest as exc:
            raise InvalidAPIRequestFailed.from_request_error(
                exc, url, call_params, payload
            ) from exc

    def _run_helper(self, helper: HelperAction) -> ApiResponse:
        logger.debug("canvas_helper_started", extra={"helper": helper.value})
        result = HELPERS[helper](self)
        return ApiResponse(status_code=200, headers={}, body=result)

    def _dispatch(
        self,
        endpoint: EndpointSpec,
        url: str,
        body: Payload,
        collect_all: bool,
        on_page: PageCallback | None,
    ) -> Any:
        method = endpoint.method
        if method == HttpMethod.GET:
            if on_page is not None:
                for page in self.api_get_blocks_request(url, JSON_HEADERS):
                    on_page(page.body)
                return None
            if collect_all:
                return self.api_get_all_request(url, JSON_HEADERS)
            return self.api_get_request(url, JSON_HEADERS).body
        if method == HttpMethod.POST:
            return self.api_post_request(url, body.to_json(), JSON_HEADERS).body
        if method == HttpMethod.PUT:
            return self.api_put_request(url, body.to_json(), JSON_HEADERS).body
        if method == HttpMethod.DELETE:
            return self.api_delete_request(url, JSON_HEADERS).body
        raise InvalidAPIMethod(f"Invalid method type: {getattr(method, 'value', method)}")


__all__ = ["CanvasClient", "PageCallback"]
