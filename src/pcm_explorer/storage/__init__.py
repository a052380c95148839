"""Модуль хранилища каталогов PCM.

Каталоги материалов и полиномиальных определений свойств,
заменяемые целиком при перезагрузке.
"""

from .catalogs import PcmCatalog, PropertyModelCatalog

__all__ = [
    "PcmCatalog",
    "PropertyModelCatalog",
]
