"""
Реализация логгера поверх стандартного модуля logging.
"""

import json
import logging
from typing import Any, Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Настраивает корневой логгер приложения."""
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)


class StandardLogger:
    """Логгер, передающий сообщения в logging с контекстом в виде JSON."""

    def __init__(self, name: str = "meeting_rooms", logger: Optional[logging.Logger] = None):
        self._logger = logger or logging.getLogger(name)

    def _log(self, level: int, message: str, context: dict) -> None:
        if context:
            self._logger.log(
                level, "%s | context=%s", message, json.dumps(context, default=str)
            )
        else:
            self._logger.log(level, message)

    def debug(self, message: str, **kwargs: Any) -> None:
        self._log(logging.DEBUG, message, kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        self._log(logging.INFO, message, kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        self._log(logging.WARNING, message, kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        self._log(logging.ERROR, message, kwargs)
