"""Formatter JSON com campos obrigatórios de log estruturado."""

from __future__ import annotations

from pythonjsonlogger.json import JsonFormatter

# Ordem fixa: o formato vira a ordem das chaves no JSON
REQUIRED_LOG_FIELDS = (
    "asctime",
    "levelname",
    "name",
    "message",
    "correlation_id",
    "service",
)

FIELD_RENAME_MAP = {
    "levelname": "level",
    "name": "logger",
}


def create_json_formatter() -> JsonFormatter:
    """Cria formatter JSON com campos padronizados.

    Exemplo de output:
        {"asctime": "...", "level": "INFO", "logger": "api.connectors.canvas.auth",
         "message": "canvas_refresh_token_ok", "correlation_id": "abc-123",
         "service": "lms_api"}
    """
    format_string = " ".join(f"%({field})s" for field in REQUIRED_LOG_FIELDS)
    return JsonFormatter(format_string, rename_fields=FIELD_RENAME_MAP)
