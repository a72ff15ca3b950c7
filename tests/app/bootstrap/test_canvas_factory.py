"""Testes do bootstrap: factory do cliente Canvas e validação de settings."""

from __future__ import annotations

import httpx
import pytest

from api.connectors.canvas import (
    CanvasClient,
    InvalidRefreshOptions,
    default_refresh_strategy,
    token_refresh_strategy,
)
from app.bootstrap import create_canvas_client, validate_runtime_settings
from app.infra.stores.memory_auth_store import MemoryAuthStateStore
from config.settings import CanvasSettings, get_base_settings, get_canvas_settings
from tests.fakes.fake_canvas import RecordingTransport, expired_token_response

SETTINGS = CanvasSettings(
    base_uri="https://canvas.test",
    access_token="env-token",
    per_page=25,
    client_id="a",
    client_secret="b",
    redirect_uri="https://app.test/cb",
    refresh_token="r",
)


@pytest.fixture(autouse=True)
def _clear_settings_cache() -> None:
    get_canvas_settings.cache_clear()
    get_base_settings.cache_clear()


class TestCreateCanvasClient:
    """Testes de create_canvas_client."""

    def test_uses_settings(self) -> None:
        client = create_canvas_client(SETTINGS)

        assert isinstance(client, CanvasClient)
        assert client.base_uri == "https://canvas.test"
        assert client.per_page == 25
        assert client.authentication.token == "env-token"
        assert client.refresh_enabled is True
        assert client._on_auth is token_refresh_strategy
        client.close()

    def test_shared_store_selects_locking_strategy(self) -> None:
        store = MemoryAuthStateStore({"acct": "t"})
        client = create_canvas_client(
            SETTINGS, authentication=store.find("acct"), auth_store=store
        )
        assert client._on_auth is default_refresh_strategy
        client.close()

    def test_without_store_refresh_replaces_token(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            if request.url.path == "/login/oauth2/token":
                return httpx.Response(200, json={"access_token": "fresh"})
            if request.headers["authorization"] == "Bearer env-token":
                return expired_token_response()
            return httpx.Response(200, json=[])

        client = create_canvas_client(
            SETTINGS, http_client=httpx.Client(transport=RecordingTransport(handler))
        )

        assert client.proxy("LIST_ACCOUNTS", {}) == []
        assert client.authentication.token == "fresh"

    def test_partial_oauth_settings_rejected(self) -> None:
        with pytest.raises(InvalidRefreshOptions, match="Missing required option"):
            create_canvas_client(CanvasSettings(base_uri="https://x.test", client_id="a"))

    def test_loads_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CANVAS_BASE_URI", "https://env.test")
        monkeypatch.setenv("CANVAS_ACCESS_TOKEN", "t")
        client = create_canvas_client()
        assert client.full_url("courses") == "https://env.test/api/v1/courses"
        assert client.refresh_enabled is False
        client.close()


class TestValidateRuntimeSettings:
    """Testes de validate_runtime_settings."""

    def test_development_only_warns(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ENVIRONMENT", "development")
        monkeypatch.delenv("CANVAS_BASE_URI", raising=False)
        validate_runtime_settings()

    def test_production_fails_fast(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ENVIRONMENT", "production")
        monkeypatch.delenv("CANVAS_BASE_URI", raising=False)
        with pytest.raises(RuntimeError, match="CANVAS_BASE_URI"):
            validate_runtime_settings()
