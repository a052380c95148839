"""
Модуль фильтрации каталога PCM по температурному окну.
"""

from .filter_engine import (
    STATUS_FOUND,
    STATUS_NO_MATCHES,
    STATUS_RESET,
    FilterEngine,
    FilterResult,
    FilterSummary,
)
from .temperature_window import TemperatureWindow

__all__ = [
    "STATUS_FOUND",
    "STATUS_NO_MATCHES",
    "STATUS_RESET",
    "FilterEngine",
    "FilterResult",
    "FilterSummary",
    "TemperatureWindow",
]
