"""
Модели данных каталога PCM.

Типизированные записи, которые создаёт табличный парсер.
"""

from .materials import PcmRecord, PropertyDefinition, is_finite

__all__ = [
    "PcmRecord",
    "PropertyDefinition",
    "is_finite",
]
