"""
Источники исходных таблиц и их параллельная загрузка.
"""

from .catalog_loader import CatalogLoader, LoadReport
from .text_sources import FileTextSource, HttpTextSource, TextSource

__all__ = [
    "CatalogLoader",
    "LoadReport",
    "FileTextSource",
    "HttpTextSource",
    "TextSource",
]
