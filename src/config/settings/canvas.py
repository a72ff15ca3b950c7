"""Settings específicas da instância Canvas LMS.

Credenciais OAuth são opcionais: sem elas o cliente não renova tokens
expirados e um 401 é tratado como erro definitivo.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

CANVAS_DEFAULT_PER_PAGE: int = 100


@dataclass(frozen=True)
class CanvasSettings:
    """Configurações do cliente Canvas.

    Attributes:
        base_uri: URL base da instância (ex: https://escola.instructure.com)
        access_token: Bearer token inicial
        per_page: Tamanho de página em GETs paginados
        request_timeout_seconds: Timeout das requisições HTTP
        verify_ssl: Verificação de certificado TLS
        max_refresh_attempts: Máximo de refreshes de token por chamada
        client_id: Client ID da developer key (refresh OAuth)
        client_secret: Client secret da developer key
        redirect_uri: Redirect URI registrada na developer key
        refresh_token: Refresh token do usuário
    """

    base_uri: str = ""
    access_token: str = ""
    per_page: int = CANVAS_DEFAULT_PER_PAGE
    request_timeout_seconds: float = 30.0
    verify_ssl: bool = True
    max_refresh_attempts: int = 1

    # OAuth
    client_id: str = ""
    client_secret: str = ""
    redirect_uri: str = ""
    refresh_token: str = ""

    @property
    def refresh_token_options(self) -> dict[str, str] | None:
        """Opções de refresh; None quando nenhuma credencial OAuth foi definida.

        Credenciais parciais são repassadas como estão para que o cliente
        aponte as opções ausentes.
        """
        options = {
            "client_id": self.client_id,
            "client_secret": self.client_secret,
            "redirect_uri": self.redirect_uri,
            "refresh_token": self.refresh_token,
        }
        present = {key: value for key, value in options.items() if value}
        return present or None

    def validate(self) -> list[str]:
        """Valida configurações mínimas do Canvas.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if not self.base_uri:
            errors.append("CANVAS_BASE_URI não configurado")
        elif not self.base_uri.startswith(("http://", "https://")):
            errors.append("CANVAS_BASE_URI deve começar com http:// ou https://")

        if not self.access_token:
            errors.append("CANVAS_ACCESS_TOKEN não configurado")

        if self.per_page <= 0:
            errors.append("CANVAS_PER_PAGE deve ser > 0")

        if self.request_timeout_seconds <= 0:
            errors.append("CANVAS_REQUEST_TIMEOUT_SECONDS deve ser > 0")

        if self.max_refresh_attempts < 0:
            errors.append("CANVAS_MAX_REFRESH_ATTEMPTS deve ser >= 0")

        options = self.refresh_token_options
        if options is not None and len(options) < 4:
            errors.append(
                "Credenciais OAuth incompletas: defina CANVAS_CLIENT_ID, "
                "CANVAS_CLIENT_SECRET, CANVAS_REDIRECT_URI e CANVAS_REFRESH_TOKEN"
            )

        return errors


def _parse_bool(value: str) -> bool:
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _load_from_env() -> CanvasSettings:
    """Carrega CanvasSettings a partir de variáveis de ambiente."""
    return CanvasSettings(
        base_uri=os.getenv("CANVAS_BASE_URI", "").rstrip("/"),
        access_token=os.getenv("CANVAS_ACCESS_TOKEN", ""),
        per_page=int(os.getenv("CANVAS_PER_PAGE", str(CANVAS_DEFAULT_PER_PAGE))),
        request_timeout_seconds=float(
            os.getenv("CANVAS_REQUEST_TIMEOUT_SECONDS", "30")
        ),
        verify_ssl=_parse_bool(os.getenv("CANVAS_VERIFY_SSL", "true")),
        max_refresh_attempts=int(os.getenv("CANVAS_MAX_REFRESH_ATTEMPTS", "1")),
        client_id=os.getenv("CANVAS_CLIENT_ID", ""),
        client_secret=os.getenv("CANVAS_CLIENT_SECRET", ""),
        redirect_uri=os.getenv("CANVAS_REDIRECT_URI", ""),
        refresh_token=os.getenv("CANVAS_REFRESH_TOKEN", ""),
    )


@lru_cache(maxsize=1)
def get_canvas_settings() -> CanvasSettings:
    """Retorna instância cacheada de CanvasSettings."""
    return _load_from_env()


__all__ = ["CANVAS_DEFAULT_PER_PAGE", "CanvasSettings", "get_canvas_settings"]
