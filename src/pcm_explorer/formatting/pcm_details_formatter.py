"""
Форматирование сведений о материалах для интерфейса.

Панель свойств выбранного PCM, варианты списка результатов
и сообщение о статусе после загрузки.
"""

from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

from tabulate import tabulate

from ..models.materials import PcmRecord, is_finite

PLACEHOLDER = "–"
NO_SELECTION_TITLE = "No PCM selected."
NO_RESULTS_LABEL = "No results"

STATUS_LOADED = "Showing all PCMs (no filters applied yet)."
STATUS_NOT_LOADED = "No PCM data loaded. Check {location}."


@dataclass(frozen=True)
class PcmDetails:
    """Отформатированная панель свойств."""

    title: str
    melting_point: str = PLACEHOLDER
    boiling_point: str = PLACEHOLDER
    latent_heat: str = PLACEHOLDER
    flash_point: str = PLACEHOLDER
    safety_rating: str = PLACEHOLDER
    cost: str = PLACEHOLDER

    def rows(self) -> List[Tuple[str, str]]:
        return [
            ("Melting point", self.melting_point),
            ("Boiling point", self.boiling_point),
            ("Latent heat", self.latent_heat),
            ("Flash point", self.flash_point),
            ("Safety rating", self.safety_rating),
            ("Cost", self.cost),
        ]


def _number(value: Optional[float], pattern: str) -> str:
    if not is_finite(value):
        return PLACEHOLDER
    return pattern.format(value)


class PcmDetailsFormatter:
    """
    Форматирование панели свойств выбранного материала.
    """

    @staticmethod
    def details(record: Optional[PcmRecord]) -> PcmDetails:
        """
        Сформировать значения панели.

        Args:
            record: Выбранная запись или None

        Returns:
            PcmDetails; без выбора все значения равны "–"
        """
        if record is None:
            return PcmDetails(title=NO_SELECTION_TITLE)

        return PcmDetails(
            title=record.display_name,
            melting_point=_number(record.melting_point_k, "{:.1f} K"),
            boiling_point=_number(record.boiling_point_k, "{:.1f} K"),
            latent_heat=_number(record.latent_heat, "{:.1f} kJ/kg"),
            flash_point=_number(record.flash_point_k, "{:.1f} K"),
            safety_rating=record.safety_rating or PLACEHOLDER,
            cost=_number(record.cost, "{:.2f} (relative units)"),
        )

    def format_details(self, record: Optional[PcmRecord]) -> str:
        """Панель свойств в виде текстовой таблицы."""
        details = self.details(record)
        table = tabulate(details.rows(), tablefmt="plain")
        return f"{details.title}\n{table}"

    @staticmethod
    def format_results(records: Iterable[PcmRecord], selected_id: Optional[str] = None) -> str:
        """Список результатов фильтрации; выбранная запись отмечена '*'."""
        rows = [
            (
                "*" if record.id == selected_id else "",
                record.id,
                record.name,
                _number(record.melting_point_k, "{:.1f}"),
                _number(record.boiling_point_k, "{:.1f}"),
            )
            for record in records
        ]
        if not rows:
            return NO_RESULTS_LABEL
        return tabulate(rows, headers=["", "ID", "Name", "Tmelt, K", "Tboil, K"], tablefmt="simple")


def result_options(records: Iterable[PcmRecord]) -> List[Tuple[str, str]]:
    """
    Варианты выпадающего списка результатов.

    Returns:
        [(id, "<id> — <name>"), ...] или [("", "No results")] для пустого списка
    """
    options = [(record.id, record.display_name) for record in records]
    return options or [("", NO_RESULTS_LABEL)]


def load_status_message(record_count: int, location: str) -> str:
    """Статус после первоначальной загрузки каталога."""
    if record_count > 0:
        return STATUS_LOADED
    return STATUS_NOT_LOADED.format(location=location)
