"""
Состояние выбора: активный отфильтрованный список и выбранный материал.

Состояние меняется только двумя способами:
- apply_filter_result(): заменяет filtered, выбирает первую запись
  или сбрасывает выбор при пустом результате
- select(): явный выбор пользователем записи из filtered
"""

import logging
from dataclasses import dataclass, field
from typing import Iterable, Optional, Tuple

from ..filtering.filter_engine import FilterResult
from ..models.materials import PcmRecord

logger = logging.getLogger(__name__)


@dataclass
class SelectionState:
    """Transient selection of one PCM within the current filtered view."""

    filtered: Tuple[PcmRecord, ...] = field(default_factory=tuple)
    selected_id: Optional[str] = None

    def show(self, records: Iterable[PcmRecord]) -> None:
        """Replace the view and select its first record (or clear the selection)."""
        self.filtered = tuple(records)
        self.selected_id = self.filtered[0].id if self.filtered else None

    def apply_filter_result(self, result: FilterResult) -> None:
        self.show(result.records)

    def find(self, pcm_id: Optional[str]) -> Optional[PcmRecord]:
        """Find a record of the current view by id."""
        if pcm_id is None:
            return None
        return next((r for r in self.filtered if r.id == pcm_id), None)

    def select(self, pcm_id: str) -> Optional[PcmRecord]:
        """
        Выбрать материал из текущего списка.

        Идентификатор вне filtered не меняет выбор.

        Args:
            pcm_id: Идентификатор материала

        Returns:
            Выбранная запись или None, если id нет в текущем списке
        """
        record = self.find(pcm_id)
        if record is None:
            logger.warning(f"PCM {pcm_id!r} is not in the current result list, selection unchanged")
            return None

        self.selected_id = record.id
        return record

    @property
    def selected(self) -> Optional[PcmRecord]:
        return self.find(self.selected_id)

    def clear(self) -> None:
        self.filtered = ()
        self.selected_id = None
