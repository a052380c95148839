"""
Температурное окно фильтрации каталога.

Окно считается введённым только если обе границы конечны и tmin <= tmax.
Во всех остальных случаях фильтр не применяется ("фильтр не задан"),
что отличается от "фильтр ничего не нашёл".
"""

from dataclasses import dataclass
from typing import Optional, Tuple, Union

from ..models.materials import is_finite
from ..parsing.tabular_parser import parse_float

Bound = Union[float, str, None]
WindowLike = Union["TemperatureWindow", Tuple[Bound, Bound], None]


@dataclass(frozen=True)
class TemperatureWindow:
    """Inclusive temperature range [tmin, tmax] in K."""

    tmin: Optional[float]
    tmax: Optional[float]

    @property
    def is_valid(self) -> bool:
        """Both bounds finite and tmin <= tmax."""
        if not (is_finite(self.tmin) and is_finite(self.tmax)):
            return False
        return self.tmin <= self.tmax

    @classmethod
    def from_inputs(
        cls, tmin_text: Optional[str], tmax_text: Optional[str]
    ) -> "TemperatureWindow":
        """
        Построить окно из сырого текста полей формы.

        Args:
            tmin_text: Текст нижней границы
            tmax_text: Текст верхней границы

        Returns:
            TemperatureWindow (возможно, неактивное)
        """
        return cls(parse_float(tmin_text), parse_float(tmax_text))

    @classmethod
    def coerce(cls, window: WindowLike) -> Optional["TemperatureWindow"]:
        """Accept a TemperatureWindow, a (tmin, tmax) pair or None."""
        if window is None or isinstance(window, cls):
            return window
        tmin, tmax = window
        return cls(_coerce_bound(tmin), _coerce_bound(tmax))

    def __str__(self) -> str:
        return f"[{self.tmin}, {self.tmax}] K"


def _coerce_bound(value: Bound) -> Optional[float]:
    """Числа проходят как есть, текст разбирается как ввод формы."""
    if value is None:
        return None
    if isinstance(value, (int, float)):
        return float(value)
    return parse_float(str(value))
