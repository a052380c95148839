"""
Параллельная загрузка каталога PCM и определений свойств.

Обе таблицы запрашиваются одновременно; загрузчик ждёт завершения
обеих. Недоступный источник деградирует до пустого списка и не мешает
загрузке второй таблицы.
"""

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Callable, List, TypeVar

from ..exceptions import SourceUnavailableError
from ..models.materials import PcmRecord, PropertyDefinition
from ..parsing.tabular_parser import DEFAULT_DELIMITER, parse_pcm_table, parse_property_table
from .text_sources import TextSource

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class LoadReport:
    """Результат загрузки обеих таблиц."""

    pcm_records: List[PcmRecord] = field(default_factory=list)
    property_definitions: List[PropertyDefinition] = field(default_factory=list)
    unavailable_sources: List[str] = field(default_factory=list)

    @property
    def degraded(self) -> bool:
        return bool(self.unavailable_sources)


class CatalogLoader:
    """Загрузчик исходных таблиц из TextSource."""

    def __init__(self, source: TextSource, delimiter: str = DEFAULT_DELIMITER):
        self.source = source
        self.delimiter = delimiter

    async def _load_table(
        self,
        location: str,
        parser: Callable[[str, str], List[T]],
        unavailable: List[str],
    ) -> List[T]:
        try:
            text = await self.source.fetch_text(location)
        except SourceUnavailableError as e:
            logger.warning(f"⚠ {e}; continuing with an empty table")
            unavailable.append(location)
            return []

        rows = parser(text, self.delimiter)
        logger.info(f"✓ {location}: {len(rows)} row(s)")
        return rows

    async def load(
        self, pcm_catalog_location: str, property_data_location: str
    ) -> LoadReport:
        """
        Загрузить обе таблицы параллельно.

        Args:
            pcm_catalog_location: Расположение таблицы каталога PCM
            property_data_location: Расположение таблицы определений свойств

        Returns:
            LoadReport с разобранными записями и списком недоступных источников
        """
        unavailable: List[str] = []
        pcm_records, definitions = await asyncio.gather(
            self._load_table(pcm_catalog_location, parse_pcm_table, unavailable),
            self._load_table(property_data_location, parse_property_table, unavailable),
        )
        return LoadReport(
            pcm_records=pcm_records,
            property_definitions=definitions,
            unavailable_sources=unavailable,
        )
