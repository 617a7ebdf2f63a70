"""TelegramLogger: one-line JSON logging for ``telegram_dataclass``.

Records go to stderr and, when ``LOG_FILE`` is set, to a rotating file.
Package modules log through children of the ``telegram_dataclass`` logger
(``telegram_dataclass.client``, ``telegram_dataclass.config``) and inherit
its handlers.  Client calls attach ``api_endpoint`` and ``status_code``
through ``extra``; those keys land at the top level of the JSON entry.
"""

import json
import logging
import os
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from typing import Any, Dict, List, Optional

_RECORD_ATTRS = frozenset(vars(logging.makeLogRecord({}))) | {"message", "asctime"}


class _JsonFormatter(logging.Formatter):
    """Render a record as ``{"timestamp", "level", "logger", "message", ...}``."""

    def format(self, record: logging.LogRecord) -> str:
        entry: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "func_name": record.funcName,
        }
        entry.update(
            (key, value) for key, value in vars(record).items()
            if key not in _RECORD_ATTRS and key not in entry
        )
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, ensure_ascii=False, default=str)


class TelegramLogger:
    """Configures the ``telegram_dataclass`` logger once per process.

    Usage::

        logger = TelegramLogger.get_logger(config.LOG_LEVEL, config.LOG_FILE)
        logger.info("Webhook registered", extra={"api_endpoint": "setWebhook"})
    """

    LOGGER_NAME: str = "telegram_dataclass"
    ROTATE_BYTES: int = 5 * 1024 * 1024
    ROTATE_BACKUPS: int = 5

    _instance: Optional["TelegramLogger"] = None

    def __init__(self, level: int, log_file: Optional[str]) -> None:
        self.logger = logging.getLogger(self.LOGGER_NAME)
        self.logger.setLevel(level)
        if not self.logger.handlers:
            for handler in self._build_handlers(log_file):
                handler.setLevel(level)
                handler.setFormatter(_JsonFormatter())
                self.logger.addHandler(handler)

    def _build_handlers(self, log_file: Optional[str]) -> List[logging.Handler]:
        handlers: List[logging.Handler] = [logging.StreamHandler()]
        if log_file:
            os.makedirs(os.path.dirname(log_file) or ".", exist_ok=True)
            handlers.append(
                RotatingFileHandler(
                    log_file, maxBytes=self.ROTATE_BYTES, backupCount=self.ROTATE_BACKUPS, encoding="utf-8"
                )
            )
        return handlers

    @classmethod
    def get_logger(cls, level: int = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
        """Return the package logger; only the first call's arguments take effect."""
        if cls._instance is None:
            cls._instance = cls(level, log_file)
        return cls._instance.logger

    def cleanup(self) -> None:
        """Flush, close and detach every handler."""
        for handler in list(self.logger.handlers):
            handler.flush()
            handler.close()
            self.logger.removeHandler(handler)

    @classmethod
    def reset(cls) -> None:
        """Forget the configured logger so the next ``get_logger`` starts fresh."""
        if cls._instance is not None:
            cls._instance.cleanup()
        cls._instance = None
