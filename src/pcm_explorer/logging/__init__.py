"""
Логирование сессий PCM Explorer.
"""

from .session_logger import OperationTimer, SessionLogger

__all__ = ["OperationTimer", "SessionLogger"]
