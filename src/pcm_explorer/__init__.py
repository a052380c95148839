"""
PCM Explorer: каталог материалов с фазовым переходом.

Разбор исходных таблиц, фильтрация каталога по температурному окну
и построение кривых свойств по полиномиальным моделям.
"""

from .calculations import CurveEvaluator, CurvePoint, CurveResult, CurveStatus
from .exceptions import PcmExplorerError, SourceUnavailableError
from .explorer import PcmExplorer, PcmExplorerConfig
from .filtering import FilterEngine, FilterResult, FilterSummary, TemperatureWindow
from .models import PcmRecord, PropertyDefinition
from .parsing import parse_pcm_table, parse_property_table
from .state import SelectionState
from .storage import PcmCatalog, PropertyModelCatalog

__version__ = "1.0.0"

__all__ = [
    "CurveEvaluator",
    "CurvePoint",
    "CurveResult",
    "CurveStatus",
    "PcmExplorerError",
    "SourceUnavailableError",
    "PcmExplorer",
    "PcmExplorerConfig",
    "FilterEngine",
    "FilterResult",
    "FilterSummary",
    "TemperatureWindow",
    "PcmRecord",
    "PropertyDefinition",
    "parse_pcm_table",
    "parse_property_table",
    "SelectionState",
    "PcmCatalog",
    "PropertyModelCatalog",
]
