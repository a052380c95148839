"""
Сессионный логгер PCM Explorer.

Создаёт отдельный лог-файл для каждой сессии работы с каталогом.
Загрузка, фильтрация и построение кривых записываются как операции.
"""

import logging
import logging.handlers
import time
import uuid
from contextlib import contextmanager
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Iterator, Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


@dataclass
class OperationTimer:
    """Контекст операции с измерением времени."""

    logger: logging.Logger
    operation_type: str
    start_time: float = field(default_factory=time.time)
    operation_id: str = field(default_factory=lambda: str(uuid.uuid4()))

    @property
    def duration_ms(self) -> float:
        return (time.time() - self.start_time) * 1000

    def __enter__(self):
        self.logger.info(
            f"Started operation: {self.operation_type} (ID: {self.operation_id[:8]})"
        )
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if exc_type:
            self.logger.error(
                f"Failed operation: {self.operation_type} "
                f"(ID: {self.operation_id[:8]}) "
                f"({self.duration_ms:.1f}ms) - {exc_val}"
            )
        else:
            self.logger.info(
                f"Completed operation: {self.operation_type} "
                f"(ID: {self.operation_id[:8]}) "
                f"({self.duration_ms:.1f}ms)"
            )
        return False  # Не подавлять исключения


class SessionLogger:
    """
    Логгер сессии работы с каталогом.
    """

    def __init__(
        self,
        logs_dir: str = "logs/sessions",
        session_id: Optional[str] = None,
        log_level: str = "INFO",
        enable_file_logging: bool = True,
        enable_console_logging: bool = True,
        max_file_size: int = 10 * 1024 * 1024,  # 10MB
        backup_count: int = 5,
    ):
        """
        Инициализация сессионного логгера.

        Args:
            logs_dir: Директория для логов
            session_id: ID сессии (генерируется если не указан)
            log_level: Уровень логирования
            enable_file_logging: Включить логирование в файл
            enable_console_logging: Включить логирование в консоль
            max_file_size: Максимальный размер файла лога
            backup_count: Количество backup файлов
        """
        self.logs_dir = Path(logs_dir)
        self.session_id = session_id or datetime.now().strftime("%Y%m%d_%H%M%S")
        self.log_file: Optional[Path] = None

        # Логгер пакета: сообщения модулей pcm_explorer.* попадают сюда
        self.logger = logging.getLogger("pcm_explorer")
        self.logger.setLevel(log_level)
        self.logger.handlers.clear()

        formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

        if enable_console_logging:
            console_handler = logging.StreamHandler()
            console_handler.setLevel(log_level)
            console_handler.setFormatter(formatter)
            self.logger.addHandler(console_handler)

        if enable_file_logging:
            self.logs_dir.mkdir(parents=True, exist_ok=True)
            self.log_file = self.logs_dir / f"session_{self.session_id}.log"

            file_handler = logging.handlers.RotatingFileHandler(
                self.log_file,
                maxBytes=max_file_size,
                backupCount=backup_count,
                encoding="utf-8",
            )
            file_handler.setLevel(log_level)
            file_handler.setFormatter(formatter)
            self.logger.addHandler(file_handler)

    @contextmanager
    def operation(self, operation_type: str) -> Iterator[OperationTimer]:
        """
        Контекстный менеджер для именованной операции.

        Исключения пробрасываются дальше после записи в лог.
        """
        with OperationTimer(self.logger, operation_type) as timer:
            yield timer

    def log_info(self, message: str) -> None:
        self.logger.info(message)

    def log_warning(self, message: str) -> None:
        self.logger.warning(message)

    def log_error(self, message: str) -> None:
        self.logger.error(message)

    def close(self) -> None:
        """Закрыть обработчики сессии."""
        for handler in list(self.logger.handlers):
            handler.close()
            self.logger.removeHandler(handler)
