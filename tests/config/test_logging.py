"""Testes para config.logging.

Cobre: configure_logging, get_logger, CorrelationIdFilter, create_json_formatter.
"""

from __future__ import annotations

import json
import logging

import pytest

from config.logging import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    CorrelationIdFilter,
    configure_logging,
    create_json_formatter,
    get_logger,
)
from config.logging.config import DEFAULT_SERVICE_NAME, VALID_LOG_LEVELS


def _record(msg: str = "message") -> logging.LogRecord:
    return logging.LogRecord(
        name="api.connectors.canvas.client",
        level=logging.INFO,
        pathname="",
        lineno=0,
        msg=msg,
        args=(),
        exc_info=None,
    )


class TestConfigureLogging:
    """Testes para configure_logging."""

    def test_default_level_is_info(self) -> None:
        configure_logging()
        assert logging.getLogger().level == logging.INFO

    def test_level_is_case_insensitive(self) -> None:
        configure_logging(level="warning")
        assert logging.getLogger().level == logging.WARNING

    def test_invalid_level_raises(self) -> None:
        with pytest.raises(ValueError, match="Nível de log inválido"):
            configure_logging(level="INVALID")

    def test_replaces_handlers(self) -> None:
        root = logging.getLogger()
        root.handlers = [logging.NullHandler(), logging.NullHandler()]
        configure_logging()
        assert len(root.handlers) == 1
        assert any(isinstance(f, CorrelationIdFilter) for f in root.handlers[0].filters)

    def test_quiets_http_library_loggers(self) -> None:
        configure_logging(level="DEBUG")
        assert logging.getLogger("httpx").level == logging.WARNING

    def test_constants(self) -> None:
        assert {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"} == VALID_LOG_LEVELS
        assert DEFAULT_SERVICE_NAME == "lms_api"


class TestGetLogger:
    """Testes para get_logger."""

    def test_returns_named_logger(self) -> None:
        logger = get_logger("api.connectors.canvas")
        assert isinstance(logger, logging.Logger)
        assert logger.name == "api.connectors.canvas"


class TestCorrelationIdFilter:
    """Testes para CorrelationIdFilter."""

    def test_adds_correlation_id_from_getter(self) -> None:
        record = _record()
        assert CorrelationIdFilter("lms_api", lambda: "corr-123").filter(record) is True
        assert record.correlation_id == "corr-123"
        assert record.service == "lms_api"

    def test_preserves_explicit_correlation_id(self) -> None:
        record = _record()
        record.correlation_id = "explicit-id"
        CorrelationIdFilter("svc", lambda: "from-getter").filter(record)
        assert record.correlation_id == "explicit-id"

    def test_empty_string_without_getter(self) -> None:
        record = _record()
        CorrelationIdFilter("svc").filter(record)
        assert record.correlation_id == ""


class TestJsonFormatter:
    """Testes do formatter JSON."""

    def test_output_has_renamed_required_fields(self) -> None:
        record = _record("canvas_request_ok")
        CorrelationIdFilter("lms_api", lambda: "c-1").filter(record)

        data = json.loads(create_json_formatter().format(record))

        assert data["message"] == "canvas_request_ok"
        assert data["level"] == "INFO"
        assert data["logger"] == "api.connectors.canvas.client"
        assert data["service"] == "lms_api"
        assert data["correlation_id"] == "c-1"

    def test_field_constants(self) -> None:
        assert "correlation_id" in REQUIRED_LOG_FIELDS
        assert FIELD_RENAME_MAP == {"levelname": "level", "name": "logger"}
