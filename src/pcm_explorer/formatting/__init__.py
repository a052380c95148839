"""
Модуль форматирования вывода PCM Explorer.
"""

from .curve_formatter import CurveRenderer, CurveTableFormatter, TextCurveRenderer
from .pcm_details_formatter import (
    NO_RESULTS_LABEL,
    NO_SELECTION_TITLE,
    PLACEHOLDER,
    PcmDetails,
    PcmDetailsFormatter,
    load_status_message,
    result_options,
)

__all__ = [
    "CurveRenderer",
    "CurveTableFormatter",
    "TextCurveRenderer",
    "NO_RESULTS_LABEL",
    "NO_SELECTION_TITLE",
    "PLACEHOLDER",
    "PcmDetails",
    "PcmDetailsFormatter",
    "load_status_message",
    "result_options",
]
