"""
Источники сырого текста исходных таблиц.

Загрузчик работает с любым объектом, реализующим протокол TextSource.
Ошибка получения текста всегда сообщается через SourceUnavailableError.
"""

import asyncio
import logging
from pathlib import Path
from typing import Optional, Protocol, Union

import aiohttp

from ..exceptions import SourceUnavailableError

logger = logging.getLogger(__name__)


class TextSource(Protocol):
    """Retrieves raw table text by location."""

    async def fetch_text(self, location: str) -> str:
        ...


class FileTextSource:
    """
    Чтение таблиц из локальных файлов.

    Относительные пути разрешаются от base_dir. Чтение выполняется
    в отдельном потоке, чтобы не блокировать event loop.
    """

    def __init__(self, base_dir: Optional[Union[str, Path]] = None, encoding: str = "utf-8"):
        self.base_dir = Path(base_dir) if base_dir is not None else Path.cwd()
        self.encoding = encoding

    def resolve(self, location: str) -> Path:
        path = Path(location)
        return path if path.is_absolute() else self.base_dir / path

    async def fetch_text(self, location: str) -> str:
        path = self.resolve(location)
        try:
            return await asyncio.to_thread(path.read_text, encoding=self.encoding)
        except (OSError, UnicodeDecodeError) as e:
            raise SourceUnavailableError(str(path), str(e)) from e


class HttpTextSource:
    """
    Загрузка таблиц по HTTP через aiohttp.

    Относительные пути добавляются к base_url. Любой статус, кроме 2xx,
    считается недоступностью источника.
    """

    def __init__(self, base_url: str = "", timeout: float = 10.0, encoding: str = "utf-8"):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.encoding = encoding

    def resolve(self, location: str) -> str:
        if location.startswith(("http://", "https://")) or not self.base_url:
            return location
        return f"{self.base_url}/{location.lstrip('/')}"

    async def fetch_text(self, location: str) -> str:
        url = self.resolve(location)
        try:
            async with aiohttp.ClientSession(
                timeout=aiohttp.ClientTimeout(total=self.timeout)
            ) as session:
                async with session.get(url) as response:
                    if response.status // 100 != 2:
                        raise SourceUnavailableError(url, f"HTTP {response.status}")
                    return await response.text(encoding=self.encoding)
        except (aiohttp.ClientError, asyncio.TimeoutError, UnicodeDecodeError) as e:
            raise SourceUnavailableError(url, str(e) or type(e).__name__) from e
