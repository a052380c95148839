"""
Разбор исходных таблиц каталога PCM и определений свойств.
"""

from .tabular_parser import (
    DEFAULT_DELIMITER,
    PCM_NUMERIC_COLUMNS,
    PROPERTY_COLUMNS,
    parse_float,
    parse_pcm_table,
    parse_property_table,
    parse_table,
)

__all__ = [
    "DEFAULT_DELIMITER",
    "PCM_NUMERIC_COLUMNS",
    "PROPERTY_COLUMNS",
    "parse_float",
    "parse_pcm_table",
    "parse_property_table",
    "parse_table",
]
