"""
Вычисление кривой свойства по полиномиальной модели.

Реализует детерминированную выборку value(T) = a*T^2 + b*T + c
в целых точках области определения модели выбранного материала.

Техническое описание:
Порядок проверок в evaluate():
1. Материал не выбран -> NOTHING_SELECTED (штатное состояние ожидания)
2. Определения свойств не загружены -> NO_PROPERTY_DATA
3. Нет определения (pcm_id, property_type) -> NO_MATCH, с перечнем
   известных pcm_id и типов свойств для диагностики
4. Определение некорректно (не конечно или tmin >= tmax) -> INVALID_DEFINITION
5. Иначе выборка T от round(tmin) до round(tmax) включительно, шаг 1 K

Округление: half-up, floor(x + 0.5), как у Math.round в веб-интерфейсе.
Результат никогда не кэшируется: каждый вызов строит новый список.
"""

import logging
import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, List, NamedTuple, Optional, Tuple

import numpy as np
import pandas as pd

from ..models.materials import PropertyDefinition

logger = logging.getLogger(__name__)


class CurveStatus(str, Enum):
    """Outcome of a curve evaluation."""

    OK = "ok"
    NOTHING_SELECTED = "nothing_selected"
    NO_PROPERTY_DATA = "no_property_data"
    NO_MATCH = "no_match"
    INVALID_DEFINITION = "invalid_definition"


class CurvePoint(NamedTuple):
    """One sample of the curve."""

    temperature_k: int
    value: float


@dataclass
class CurveResult:
    """Кривая свойства либо структурированная диагностика."""

    status: CurveStatus
    property_type: str
    pcm_id: Optional[str] = None
    points: List[CurvePoint] = field(default_factory=list)
    definition: Optional[PropertyDefinition] = None
    known_pcm_ids: List[str] = field(default_factory=list)
    known_property_types: List[str] = field(default_factory=list)
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.status is CurveStatus.OK

    def as_pairs(self) -> List[Tuple[int, float]]:
        """Упорядоченные пары (T, value)."""
        return [tuple(point) for point in self.points]

    def to_dataframe(self) -> pd.DataFrame:
        """Таблица T/value для экспорта и вывода."""
        return pd.DataFrame(self.points, columns=["T", "value"])


def round_half_up(value: float) -> int:
    """Округление до целого, половины вверх (2.5 -> 3, -2.5 -> -2)."""
    return int(math.floor(value + 0.5))


class CurveEvaluator:
    """
    Детерминированный вычислитель кривых свойств.

    Не хранит состояния между вызовами: результат зависит только
    от аргументов evaluate().
    """

    def evaluate(
        self,
        definitions: Iterable[PropertyDefinition],
        pcm_id: Optional[str],
        property_type: str,
    ) -> CurveResult:
        """
        Построить кривую свойства для выбранного материала.

        Args:
            definitions: Определения свойств в исходном порядке
            pcm_id: Идентификатор выбранного материала (None если не выбран)
            property_type: Ключ свойства

        Returns:
            CurveResult со статусом, точками и диагностикой
        """
        if not pcm_id:
            return CurveResult(
                status=CurveStatus.NOTHING_SELECTED,
                property_type=property_type,
                message="No PCM selected.",
            )

        definitions = list(definitions)
        if not definitions:
            return CurveResult(
                status=CurveStatus.NO_PROPERTY_DATA,
                property_type=property_type,
                pcm_id=pcm_id,
                message="No property data loaded.",
            )

        # Первое определение в порядке источника считается основным
        definition = next((d for d in definitions if d.matches(pcm_id, property_type)), None)
        if definition is None:
            known_ids = list(dict.fromkeys(d.pcm_id for d in definitions))
            known_types = list(dict.fromkeys(d.property_type for d in definitions))
            logger.info(
                f"No '{property_type}' definition for {pcm_id}; "
                f"known ids: {known_ids}, known types: {known_types}"
            )
            return CurveResult(
                status=CurveStatus.NO_MATCH,
                property_type=property_type,
                pcm_id=pcm_id,
                known_pcm_ids=known_ids,
                known_property_types=known_types,
                message=(
                    f"No '{property_type}' data for {pcm_id}. "
                    f"Available PCM ids: {', '.join(known_ids) or '–'}. "
                    f"Available property types: {', '.join(known_types) or '–'}."
                ),
            )

        if not definition.is_valid():
            logger.warning(f"Invalid property definition {pcm_id}/{property_type}: {definition}")
            return CurveResult(
                status=CurveStatus.INVALID_DEFINITION,
                property_type=property_type,
                pcm_id=pcm_id,
                definition=definition,
                message=(
                    f"Property definition '{property_type}' for {pcm_id} is invalid: "
                    f"coefficients and bounds must be numbers with tmin < tmax."
                ),
            )

        points = self.sample(definition)
        return CurveResult(
            status=CurveStatus.OK,
            property_type=property_type,
            pcm_id=pcm_id,
            points=points,
            definition=definition,
            message=f"{definition.name or property_type}: {len(points)} point(s)",
        )

    @staticmethod
    def sample(definition: PropertyDefinition) -> List[CurvePoint]:
        """
        Выборка полинома в целых точках [round(tmin), round(tmax)].

        Args:
            definition: Корректное определение (is_valid() == True)

        Returns:
            Список CurvePoint длиной round(tmax) - round(tmin) + 1
        """
        t_start = round_half_up(definition.tmin)
        t_end = round_half_up(definition.tmax)

        T_values = np.arange(t_start, t_end + 1, dtype=np.float64)
        values = definition.a * T_values ** 2 + definition.b * T_values + definition.c

        return [
            CurvePoint(t_start + index, float(value))
            for index, value in enumerate(values)
        ]
