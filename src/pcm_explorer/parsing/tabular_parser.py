"""
Табличный парсер исходных CSV-данных каталога PCM.

Превращает сырой текст с разделителями в упорядоченные списки
типизированных записей.

Техническое описание:
Два варианта разбора:

parse_table / parse_pcm_table:
- Первая строка: заголовок, ключи записей берутся из имён колонок
- Остальные строки делятся по фиксированному разделителю, значения обрезаются
- Числовые колонки разбираются parse_float (ошибка разбора -> None)
- Текстовые колонки по умолчанию пустая строка

parse_property_table:
- Заголовок пропускается, колонки читаются по фиксированным позициям:
  pcmId, name, propertyType, a, b, c, tmin, tmax
- Строки с пустой первой колонкой пропускаются (хвостовые пустые строки)

Общие правила:
- Текст менее чем из двух строк даёт пустой список, а не ошибку
- Порядок записей совпадает с порядком строк источника
- Разбор детерминирован: одинаковый текст даёт поэлементно равные списки
"""

import logging
import math
import re
from typing import Any, Dict, Iterable, List, Optional

from ..models.materials import PcmRecord, PropertyDefinition

logger = logging.getLogger(__name__)

DEFAULT_DELIMITER = ","

PCM_NUMERIC_COLUMNS = frozenset(
    {"tmin", "tmax", "latentHeat", "meltingPointK", "boilingPointK", "flashPointK", "cost"}
)

PROPERTY_COLUMNS = ("pcmId", "name", "propertyType", "a", "b", "c", "tmin", "tmax")
PROPERTY_NUMERIC_COLUMNS = frozenset({"a", "b", "c", "tmin", "tmax"})

_LINE_SPLIT = re.compile(r"\r?\n")
_LEADING_NUMBER = re.compile(
    r"[+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)"
)


def parse_float(text: Optional[str]) -> Optional[float]:
    """
    Разбор числа без учёта локали.

    Берётся самый длинный числовой префикс строки (знак, цифры, точка,
    экспонента или Infinity), остаток игнорируется. Если префикса нет,
    возвращается None.

    Args:
        text: Исходное значение ячейки

    Returns:
        float или None, если значение отсутствует или не распознано
    """
    if text is None:
        return None

    match = _LEADING_NUMBER.match(text.strip())
    if not match:
        return None

    token = match.group(0)
    if token.endswith("Infinity"):
        return -math.inf if token.startswith("-") else math.inf
    return float(token)


def _split_lines(text: str) -> List[str]:
    """Обрезать текст и разделить на строки (LF или CRLF)."""
    return _LINE_SPLIT.split(text.strip())


def _split_row(line: str, delimiter: str) -> List[str]:
    return [value.strip() for value in line.split(delimiter)]


def _coerce(value: Optional[str], numeric: bool) -> Any:
    if numeric:
        return parse_float(value)
    return value or ""


def parse_table(
    text: str,
    numeric_columns: Iterable[str],
    delimiter: str = DEFAULT_DELIMITER,
) -> List[Dict[str, Any]]:
    """
    Разбор таблицы с заголовком.

    Args:
        text: Сырой текст таблицы
        numeric_columns: Имена колонок, приводимых к числу
        delimiter: Разделитель колонок

    Returns:
        Список словарей {имя колонки: значение} в порядке строк
    """
    lines = _split_lines(text or "")
    if len(lines) < 2:
        return []

    numeric = set(numeric_columns)
    headers = _split_row(lines[0], delimiter)

    rows = []
    for line in lines[1:]:
        values = _split_row(line, delimiter)
        row = {}
        for position, header in enumerate(headers):
            if not header:
                continue
            value = values[position] if position < len(values) else None
            row[header] = _coerce(value, header in numeric)
        rows.append(row)

    return rows


def parse_pcm_table(text: str, delimiter: str = DEFAULT_DELIMITER) -> List[PcmRecord]:
    """
    Разбор таблицы каталога PCM.

    Args:
        text: Сырой CSV-текст каталога
        delimiter: Разделитель колонок

    Returns:
        Список PcmRecord в порядке строк источника
    """
    rows = parse_table(text, PCM_NUMERIC_COLUMNS, delimiter)
    records = [PcmRecord.model_validate(row) for row in rows]
    logger.debug(f"Parsed {len(records)} PCM records")
    return records


def parse_property_table(
    text: str, delimiter: str = DEFAULT_DELIMITER
) -> List[PropertyDefinition]:
    """
    Разбор таблицы полиномиальных определений свойств.

    Колонки читаются по позициям, заголовок только пропускается.

    Args:
        text: Сырой CSV-текст определений
        delimiter: Разделитель колонок

    Returns:
        Список PropertyDefinition в порядке строк источника
    """
    lines = _split_lines(text or "")
    if len(lines) < 2:
        return []

    definitions = []
    skipped = 0
    for line in lines[1:]:
        values = _split_row(line, delimiter)
        if not values[0]:
            skipped += 1
            continue

        row = {}
        for position, column in enumerate(PROPERTY_COLUMNS):
            value = values[position] if position < len(values) else None
            row[column] = _coerce(value, column in PROPERTY_NUMERIC_COLUMNS)
        definitions.append(PropertyDefinition.model_validate(row))

    if skipped:
        logger.debug(f"Skipped {skipped} property rows with empty pcmId")
    logger.debug(f"Parsed {len(definitions)} property definitions")
    return definitions
