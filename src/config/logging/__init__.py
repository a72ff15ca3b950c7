"""Configuração de logging estruturado (JSON).

Uso:
    from config.logging import configure_logging, get_logger

    configure_logging(level="INFO", service_name="lms_api")
    logger = get_logger(__name__)

Tokens e segredos OAuth nunca entram nos logs.
"""

from config.logging.config import configure_logging, get_logger
from config.logging.filters import CorrelationIdFilter
from config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
)

__all__ = [
    "FIELD_RENAME_MAP",
    "REQUIRED_LOG_FIELDS",
    "CorrelationIdFilter",
    "configure_logging",
    "create_json_formatter",
    "get_logger",
]
