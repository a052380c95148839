"""
Движок фильтрации каталога PCM по температурному окну.

Техническое описание:
Отбирает материалы, которые остаются в рабочем состоянии внутри окна
[tmin, tmax]:
- температура плавления известна и лежит в [tmin, tmax] (включительно)
- температура кипения известна и строго больше tmax

Если окно не задано или некорректно (граница не число, tmin > tmax),
предикат не применяется и проходят все записи.

Особенности:
- Стабильная фильтрация: порядок каталога сохраняется
- None в числовых полях означает "не проходит"
- Формирует сводку статуса для отображения во внешнем интерфейсе
- Собирает статистику последнего запуска (last_stats), как стадии конвейера
"""

import logging
import time
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional

from ..models.materials import PcmRecord
from .temperature_window import TemperatureWindow, WindowLike

logger = logging.getLogger(__name__)

STATUS_FOUND = "Search completed: {count} PCM(s) found."
STATUS_NO_MATCHES = "Search completed: no matching PCMs."
STATUS_RESET = "Filters reset: showing all PCMs."


@dataclass(frozen=True)
class FilterSummary:
    """Сводка результата фильтрации для интерфейса."""

    match_count: int
    message: str

    @property
    def no_matches(self) -> bool:
        return self.match_count == 0


@dataclass
class FilterResult:
    """Результат фильтрации каталога."""

    records: List[PcmRecord]
    window: Optional[TemperatureWindow]
    window_applied: bool
    summary: FilterSummary
    statistics: Dict[str, Any] = field(default_factory=dict)

    @property
    def first_id(self) -> Optional[str]:
        return self.records[0].id if self.records else None


class FilterEngine:
    """Фильтрация каталога по температурному окну."""

    def __init__(self):
        self.last_stats: Dict[str, Any] = {}

    @staticmethod
    def passes(record: PcmRecord, window: TemperatureWindow) -> bool:
        """
        Предикат окна для одной записи.

        Args:
            record: Запись каталога
            window: Корректное температурное окно

        Returns:
            True если плавление внутри окна, а кипение выше верхней границы
        """
        return record.melts_within(window.tmin, window.tmax) and record.boils_above(window.tmax)

    def filter(self, catalog: Iterable[PcmRecord], window: WindowLike = None) -> FilterResult:
        """
        Отфильтровать каталог.

        Args:
            catalog: Записи каталога в исходном порядке
            window: TemperatureWindow, пара (tmin, tmax) или None

        Returns:
            FilterResult с отобранными записями и сводкой статуса
        """
        start_time = time.time()
        window = TemperatureWindow.coerce(window)
        records = list(catalog)

        window_applied = window is not None and window.is_valid
        if window_applied:
            filtered = [r for r in records if self.passes(r, window)]
        else:
            if window is not None:
                logger.info(f"Temperature window {window} is incomplete or inverted, filter not applied")
            filtered = records

        if filtered:
            message = STATUS_FOUND.format(count=len(filtered))
        else:
            message = STATUS_NO_MATCHES

        execution_time = (time.time() - start_time) * 1000
        self.last_stats = {
            "input_count": len(records),
            "matched_count": len(filtered),
            "rejected_count": len(records) - len(filtered),
            "window_applied": window_applied,
            "execution_time_ms": execution_time,
        }

        logger.info(
            f"Filter {'applied' if window_applied else 'skipped'}: "
            f"{len(filtered)}/{len(records)} PCM(s) ({execution_time:.2f}ms)"
        )

        return FilterResult(
            records=filtered,
            window=window,
            window_applied=window_applied,
            summary=FilterSummary(len(filtered), message),
            statistics=dict(self.last_stats),
        )

    def reset(self, catalog: Iterable[PcmRecord]) -> FilterResult:
        """Сброс фильтра: весь каталог, статус "Filters reset"."""
        result = self.filter(catalog, None)
        result.summary = FilterSummary(result.summary.match_count, STATUS_RESET)
        return result
