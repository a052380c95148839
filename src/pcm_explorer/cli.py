"""
Команды интерактивного режима PCM Explorer.

Разбор строки пользователя и вызов операций PcmExplorer.
"""

import shlex
from typing import Callable, List, Optional

from .filtering.temperature_window import TemperatureWindow
from .formatting.curve_formatter import CurveTableFormatter
from .formatting.pcm_details_formatter import PcmDetailsFormatter
from .explorer import PcmExplorer

HELP_TEXT = """Команды:
  filter <tmin> <tmax>   фильтр по температурному окну, K
  reset                  сбросить фильтр
  list                   текущий список результатов
  select <id>            выбрать материал
  details                свойства выбранного материала
  property <key>         сменить отображаемое свойство
  properties             известные типы свойств
  curve [key]            кривая свойства выбранного материала
  status                 сообщение о статусе
  help                   эта справка
  quit                   выход"""


class CommandRunner:
    """Выполнение команд интерактивного режима."""

    def __init__(
        self,
        explorer: PcmExplorer,
        output: Callable[[str], None] = print,
        curve_formatter: Optional[CurveTableFormatter] = None,
    ):
        self.explorer = explorer
        self.output = output
        self.details_formatter = PcmDetailsFormatter()
        self.curve_formatter = curve_formatter or CurveTableFormatter(max_rows=50)

    def execute(self, line: str) -> bool:
        """
        Выполнить одну команду.

        Args:
            line: Строка, введённая пользователем

        Returns:
            False если пользователь завершил работу
        """
        try:
            parts = shlex.split(line)
        except ValueError as e:
            self.output(f"Ошибка разбора команды: {e}")
            return True

        if not parts:
            return True

        command, args = parts[0].lower(), parts[1:]
        handler = getattr(self, f"_cmd_{command}", None)
        if handler is None:
            self.output(f"Неизвестная команда: {command}. Введите 'help'.")
            return True

        return handler(args) is not False

    def _cmd_quit(self, args: List[str]):
        return False

    _cmd_exit = _cmd_quit

    def _cmd_help(self, args: List[str]):
        self.output(HELP_TEXT)

    def _cmd_filter(self, args: List[str]):
        if len(args) != 2:
            self.output("Использование: filter <tmin> <tmax>")
            return
        result = self.explorer.filter(TemperatureWindow.from_inputs(args[0], args[1]))
        self.output(result.summary.message)

    def _cmd_reset(self, args: List[str]):
        result = self.explorer.reset_filter()
        self.output(result.summary.message)

    def _cmd_list(self, args: List[str]):
        self.output(
            self.details_formatter.format_results(
                self.explorer.filtered, self.explorer.selection.selected_id
            )
        )

    def _cmd_select(self, args: List[str]):
        if len(args) != 1:
            self.output("Использование: select <id>")
            return
        record = self.explorer.select_pcm(args[0])
        if record is None:
            self.output(f"{args[0]} нет в текущем списке результатов")
            return
        self.output(self.details_formatter.format_details(record))

    def _cmd_details(self, args: List[str]):
        self.output(self.details_formatter.format_details(self.explorer.selected_pcm()))

    def _cmd_property(self, args: List[str]):
        if len(args) != 1:
            self.output(f"Текущее свойство: {self.explorer.property_type}")
            return
        self.explorer.set_property(args[0])

    def _cmd_properties(self, args: List[str]):
        types = self.explorer.property_catalog.distinct_property_types()
        self.output(", ".join(types) if types else "No property data loaded.")

    def _cmd_curve(self, args: List[str]):
        result = self.explorer.get_curve(args[0] if args else None)
        self.output(self.curve_formatter.format(result))

    def _cmd_status(self, args: List[str]):
        self.output(self.explorer.get_status_message())
