"""
Форматирование кривых свойств с использованием tabulate.

CurveRenderer описывает внешний компонент отрисовки графика;
TextCurveRenderer выводит кривую текстовой таблицей и используется
интерактивным режимом main.py.
"""

from typing import Callable, Optional, Protocol, Sequence

from tabulate import tabulate

from ..calculations.curve_evaluator import CurveEvaluator, CurveResult
from ..models.materials import PropertyDefinition


class CurveRenderer(Protocol):
    """Collaborator that looks up and draws the curve of the selected PCM."""

    def draw(
        self,
        property_key: str,
        property_definitions: Sequence[PropertyDefinition],
        selected_pcm_id: Optional[str],
    ) -> None:
        ...


class CurveTableFormatter:
    """
    Форматирование результата CurveEvaluator.
    """

    def __init__(self, float_format: str = ".4g", max_rows: Optional[int] = None):
        self.float_format = float_format
        self.max_rows = max_rows

    def format(self, result: CurveResult) -> str:
        """
        Таблица T/value или диагностическое сообщение.

        Args:
            result: Результат CurveEvaluator.evaluate()

        Returns:
            Строка для вывода
        """
        if not result.ok:
            return result.message

        rows = result.as_pairs()
        omitted = 0
        if self.max_rows is not None and len(rows) > self.max_rows:
            omitted = len(rows) - self.max_rows
            rows = rows[: self.max_rows]

        title = f"{result.pcm_id}: {result.definition.name or result.property_type}"
        table = tabulate(
            rows,
            headers=["T, K", result.property_type],
            floatfmt=self.float_format,
            tablefmt="simple",
        )
        lines = [title, table]
        if omitted:
            lines.append(f"... {omitted} more point(s)")
        return "\n".join(lines)


class TextCurveRenderer:
    """Текстовая реализация CurveRenderer."""

    def __init__(
        self,
        output: Callable[[str], None] = print,
        formatter: Optional[CurveTableFormatter] = None,
        evaluator: Optional[CurveEvaluator] = None,
    ):
        self.output = output
        self.formatter = formatter or CurveTableFormatter(max_rows=50)
        self.evaluator = evaluator or CurveEvaluator()

    def draw(
        self,
        property_key: str,
        property_definitions: Sequence[PropertyDefinition],
        selected_pcm_id: Optional[str],
    ) -> None:
        result = self.evaluator.evaluate(property_definitions, selected_pcm_id, property_key)
        self.output(self.formatter.format(result))
