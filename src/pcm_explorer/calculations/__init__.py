"""
Модуль расчёта кривых свойств PCM по полиномиальным моделям.
"""

from .curve_evaluator import (
    CurveEvaluator,
    CurvePoint,
    CurveResult,
    CurveStatus,
    round_half_up,
)

__all__ = [
    "CurveEvaluator",
    "CurvePoint",
    "CurveResult",
    "CurveStatus",
    "round_half_up",
]
