"""
Конфигурация PCM Explorer.

Содержит настройки источников данных и логирования.
"""

from .settings import (
    DEFAULT_PROPERTY,
    EXPLORER_CONFIG,
    get_explorer_config,
    validate_config,
)

__all__ = [
    "DEFAULT_PROPERTY",
    "EXPLORER_CONFIG",
    "get_explorer_config",
    "validate_config",
]
