"""Bootstrap da aplicação: inicialização e wiring.

Composition root: configura logging, valida settings e cria o
cliente Canvas.

Uso:
    from app.bootstrap import initialize_app, create_canvas_client

    initialize_app()
    client = create_canvas_client()
"""

from __future__ import annotations

import logging

from app.bootstrap.canvas_factory import create_canvas_client
from app.observability import get_correlation_id
from config.logging import configure_logging
from config.settings import get_base_settings, get_canvas_settings

logger = logging.getLogger(__name__)


def initialize_app() -> None:
    """Configura logging estruturado JSON com correlation_id.

    Deve ser chamada uma vez no início do serviço.
    """
    base = get_base_settings()
    configure_logging(
        level=base.log_level,
        service_name=base.service_name,
        correlation_id_getter=get_correlation_id,
    )


def validate_runtime_settings() -> None:
    """Valida settings obrigatórias no startup.

    Em `staging`/`production` falha rápido para impedir boot inválido.
    Em `development` mantém alerta sem bloquear execução local.

    Raises:
        RuntimeError: Configuração inválida em ambiente estrito.
    """
    base = get_base_settings()
    errors = [f"base: {error}" for error in base.validate()]
    errors.extend(f"canvas: {error}" for error in get_canvas_settings().validate())

    if not errors:
        logger.info(
            "settings_validated",
            extra={"component": "bootstrap", "environment": base.environment},
        )
        return

    logger.warning(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "environment": base.environment,
            "error_count": len(errors),
            "errors": errors,
        },
    )
    if base.is_strict:
        details = "\n".join(f"- {error}" for error in errors)
        raise RuntimeError(f"Configuração inválida para {base.environment}:\n{details}")


__all__ = ["create_canvas_client", "initialize_app", "validate_runtime_settings"]
