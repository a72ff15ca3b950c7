"""Factory do cliente Canvas a partir das settings de ambiente."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from api.connectors.canvas import (
    CanvasClient,
    CanvasHttpClientConfig,
    default_refresh_strategy,
    token_refresh_strategy,
)

if TYPE_CHECKING:
    import httpx

    from api.connectors.canvas.auth import RefreshCallback
    from app.protocols.auth_state import AuthenticationProtocol, AuthStateStoreProtocol
    from config.settings import CanvasSettings

logger = logging.getLogger(__name__)


def create_canvas_client(
    settings: CanvasSettings | None = None,
    *,
    authentication: str | AuthenticationProtocol | None = None,
    auth_store: AuthStateStoreProtocol | None = None,
    on_auth: RefreshCallback | None = None,
    http_client: httpx.Client | None = None,
) -> CanvasClient:
    """Cria CanvasClient com config padrão.

    Com `auth_store`, o refresh usa a estratégia com lock (múltiplos holders
    do mesmo registro). Sem store, cada cliente renova o próprio token.

    Args:
        settings: CanvasSettings opcional. Se None, carrega do ambiente.
        authentication: Registro ou token; padrão é CANVAS_ACCESS_TOKEN.
        auth_store: Store compartilhado do registro de autenticação.
        on_auth: Callback de refresh customizado.
        http_client: Cliente httpx injetado.

    Returns:
        Cliente Canvas configurado.
    """
    # Import local para evitar dependência circular
    from config.settings import get_canvas_settings

    canvas = settings or get_canvas_settings()
    config = CanvasHttpClientConfig(
        timeout_seconds=canvas.request_timeout_seconds,
        verify_ssl=canvas.verify_ssl,
        per_page=canvas.per_page,
        max_refresh_attempts=canvas.max_refresh_attempts,
    )
    strategy = on_auth or (
        default_refresh_strategy if auth_store is not None else token_refresh_strategy
    )
    client = CanvasClient(
        canvas.base_uri,
        authentication if authentication is not None else canvas.access_token,
        canvas.refresh_token_options,
        on_auth=strategy,
        auth_store=auth_store,
        config=config,
        http_client=http_client,
    )
    logger.info(
        "canvas_client_created",
        extra={
            "base_uri": canvas.base_uri,
            "refresh_enabled": client.refresh_enabled,
            "shared_auth_store": auth_store is not None,
        },
    )
    return client
