"""
Исключения PCM Explorer.

Ни одно из них не является фатальным для ядра: SourceUnavailableError
перехватывается загрузчиком и превращается в пустой каталог.
"""

from typing import Optional


class PcmExplorerError(Exception):
    """Base error of the package."""


class SourceUnavailableError(PcmExplorerError):
    """Raised by a text source when a table cannot be retrieved."""

    def __init__(self, location: str, reason: Optional[str] = None):
        self.location = location
        self.reason = reason
        message = f"Source unavailable: {location}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)
