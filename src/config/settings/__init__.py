"""Agregador de settings do lms_api.

Re-exporta todas as settings e funções de cada módulo.
"""

from __future__ import annotations

# Base settings
from config.settings.base import (
    BaseSettings,
    Environment,
    get_base_settings,
)

# Canvas LMS
from config.settings.canvas import (
    CANVAS_DEFAULT_PER_PAGE,
    CanvasSettings,
    get_canvas_settings,
)

__all__ = [
    "CANVAS_DEFAULT_PER_PAGE",
    "BaseSettings",
    "CanvasSettings",
    "Environment",
    "get_base_settings",
    "get_canvas_settings",
]
