"""
Контекст PCM Explorer: каталоги, состояние выбора и операции интерфейса.

Все изменяемое состояние принадлежит экземпляру PcmExplorer, который
создаёт вызывающий код; глобальных каталогов нет.

Операции для внешнего интерфейса:
- load_all(): параллельная загрузка обеих таблиц
- filter(window) / reset_filter(): фильтрация каталога по температурному окну
- select_pcm(id): выбор материала из текущего списка
- set_property(key) / get_curve(key): кривая свойства выбранного материала
- get_status_message(): сообщение о статусе для отображения

После фильтрации, сброса, выбора материала или смены свойства вызывается
подключённый CurveRenderer (если есть).
"""

import contextlib
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

from .calculations.curve_evaluator import CurveEvaluator, CurveResult
from .config.settings import EXPLORER_CONFIG
from .filtering.filter_engine import FilterEngine, FilterResult
from .filtering.temperature_window import WindowLike
from .formatting.curve_formatter import CurveRenderer
from .formatting.pcm_details_formatter import load_status_message
from .logging.session_logger import SessionLogger
from .models.materials import PcmRecord
from .sources.catalog_loader import CatalogLoader, LoadReport
from .sources.text_sources import TextSource
from .state.selection_state import SelectionState
from .storage.catalogs import PcmCatalog, PropertyModelCatalog

STATUS_NOT_LOADED_YET = "Loading PCM data..."


@dataclass
class PcmExplorerConfig:
    """
    Конфигурация PcmExplorer.
    """
    logger: logging.Logger = field(default_factory=lambda: logging.getLogger(__name__))

    pcm_catalog_path: str = EXPLORER_CONFIG["pcm_catalog_path"]
    property_data_path: str = EXPLORER_CONFIG["property_data_path"]
    default_property: str = EXPLORER_CONFIG["default_property"]
    delimiter: str = EXPLORER_CONFIG["delimiter"]

    @classmethod
    def from_dict(cls, config: Dict[str, Any]) -> "PcmExplorerConfig":
        """Создать конфигурацию из словаря get_explorer_config()."""
        return cls(
            pcm_catalog_path=config["pcm_catalog_path"],
            property_data_path=config["property_data_path"],
            default_property=config["default_property"],
            delimiter=config["delimiter"],
        )


class PcmExplorer:
    """
    Контекст каталога материалов с фазовым переходом.
    """

    def __init__(
        self,
        config: PcmExplorerConfig,
        source: TextSource,
        renderer: Optional[CurveRenderer] = None,
        session_logger: Optional[SessionLogger] = None,
    ):
        """
        Инициализация контекста.

        Args:
            config: Конфигурация
            source: Источник сырого текста таблиц
            renderer: Компонент отрисовки кривой (опционально)
            session_logger: Логгер сессии (опционально)
        """
        self.config = config
        self.logger = config.logger
        self.renderer = renderer
        self.session_logger = session_logger

        self.loader = CatalogLoader(source, delimiter=config.delimiter)
        self.filter_engine = FilterEngine()
        self.evaluator = CurveEvaluator()

        self.pcm_catalog = PcmCatalog()
        self.property_catalog = PropertyModelCatalog()
        self.selection = SelectionState()

        self.property_type = config.default_property
        self._status_message = STATUS_NOT_LOADED_YET
        self._loaded = False

    def _operation(self, operation_type: str):
        if self.session_logger is None:
            return contextlib.nullcontext()
        return self.session_logger.operation(operation_type)

    def _render(self) -> None:
        if self.renderer is None or not self._loaded:
            return
        self.renderer.draw(
            self.property_type,
            self.property_catalog.definitions,
            self.selection.selected_id,
        )

    async def load_all(self) -> LoadReport:
        """
        Загрузить каталог и определения свойств.

        Обе таблицы запрашиваются параллельно, каталоги заменяются целиком
        только после завершения обоих запросов. Затем показывается весь
        каталог с выбранной первой записью.

        Returns:
            LoadReport загрузки
        """
        with self._operation("load_all"):
            report = await self.loader.load(
                self.config.pcm_catalog_path, self.config.property_data_path
            )

            self.pcm_catalog.replace(report.pcm_records)
            self.property_catalog.replace(report.property_definitions)
            self.selection.show(self.pcm_catalog.records)
            self._status_message = load_status_message(
                len(self.pcm_catalog), self.config.pcm_catalog_path
            )
            self._loaded = True

            self.logger.info(
                f"Loaded {len(self.pcm_catalog)} PCM(s) and "
                f"{len(self.property_catalog)} property definition(s)"
            )
            if report.degraded:
                self.logger.warning(f"Unavailable sources: {', '.join(report.unavailable_sources)}")

        self._render()
        return report

    def _apply(self, result: FilterResult) -> FilterResult:
        self.selection.apply_filter_result(result)
        self._status_message = result.summary.message
        self._render()
        return result

    def filter(self, window: WindowLike) -> FilterResult:
        """
        Отфильтровать каталог по температурному окну.

        Args:
            window: TemperatureWindow, пара (tmin, tmax) или None

        Returns:
            FilterResult; выбор переходит на первую найденную запись
        """
        with self._operation("filter"):
            result = self.filter_engine.filter(self.pcm_catalog, window)
        return self._apply(result)

    def reset_filter(self) -> FilterResult:
        """Сбросить фильтр и показать весь каталог."""
        with self._operation("reset_filter"):
            result = self.filter_engine.reset(self.pcm_catalog)
        return self._apply(result)

    def select_pcm(self, pcm_id: str) -> Optional[PcmRecord]:
        """
        Выбрать материал из текущего списка результатов.

        Returns:
            Выбранная запись или None, если id нет в списке
        """
        record = self.selection.select(pcm_id)
        if record is not None:
            self._render()
        return record

    def set_property(self, property_type: str) -> None:
        """Сменить отображаемое свойство."""
        self.property_type = property_type
        self._render()

    def get_curve(self, property_type: Optional[str] = None) -> CurveResult:
        """
        Кривая свойства для выбранного материала.

        Args:
            property_type: Ключ свойства (по умолчанию текущее свойство)

        Returns:
            CurveResult со статусом и точками
        """
        property_type = property_type or self.property_type
        with self._operation("get_curve"):
            return self.evaluator.evaluate(
                self.property_catalog.definitions,
                self.selection.selected_id,
                property_type,
            )

    def get_status_message(self) -> str:
        return self._status_message

    def selected_pcm(self) -> Optional[PcmRecord]:
        return self.selection.selected

    @property
    def filtered(self) -> Tuple[PcmRecord, ...]:
        return self.selection.filtered
