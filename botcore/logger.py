"""SDKLogger: Singleton JSON logger for the ``botsdk`` logger tree.

Configures the ``botsdk`` logger once with a console handler and, when a
log directory is given, a rotating file handler.  Library modules log via
``logging.getLogger("botsdk.<module>")`` and inherit these handlers.
"""

import json
import logging
import os
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from typing import Optional


_RESERVED_ATTRS = frozenset(vars(logging.makeLogRecord({}))) | {"message", "asctime"}


class _JsonFormatter(logging.Formatter):
    """One JSON line per record, with ``extra={...}`` context inlined.

    The client logs request context this way, e.g.
    ``extra={"api_endpoint": "getFile", "status_code": 502}``.
    """

    def format(self, record: logging.LogRecord) -> str:
        created = datetime.fromtimestamp(record.created, tz=timezone.utc)
        log_entry: dict = {
            "timestamp": created.isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "func_name": record.funcName,
        }
        log_entry.update(
            (key, value) for key, value in vars(record).items()
            if key not in _RESERVED_ATTRS and key not in log_entry
        )
        if record.exc_info:
            log_entry["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(log_entry, ensure_ascii=False, default=str)


class SDKLogger:
    """Singleton owner of the ``botsdk`` logger and its handlers.

    Usage::

        from botcore.logger import SDKLogger

        logger = SDKLogger.get_logger()
        logger.info("Client ready")
    """

    _instance: Optional["SDKLogger"] = None
    _logger: Optional[logging.Logger] = None

    LOGGER_NAME: str = "botsdk"

    # Rotation settings
    _LOG_FILE: str = "botsdk.log"
    _MAX_BYTES: int = 5 * 1024 * 1024  # 5 MB
    _BACKUP_COUNT: int = 5

    def __new__(cls, level: int = logging.INFO, log_dir: Optional[str] = None) -> "SDKLogger":
        """Ensure only one instance is ever created (Singleton)."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._init_logger(level, log_dir)
        return cls._instance

    # ------------------------------------------------------------------
    # Initialisation helpers
    # ------------------------------------------------------------------

    def _init_logger(self, level: int, log_dir: Optional[str]) -> None:
        """Create the underlying :class:`logging.Logger` and attach handlers."""
        self._logger = logging.getLogger(self.LOGGER_NAME)
        self._logger.setLevel(level)

        # Avoid duplicate handlers if the module is reloaded.
        if self._logger.handlers:
            return

        formatter = _JsonFormatter()

        stream_handler = logging.StreamHandler()
        stream_handler.setLevel(level)
        stream_handler.setFormatter(formatter)
        self._logger.addHandler(stream_handler)

        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
            file_handler = RotatingFileHandler(
                os.path.join(log_dir, self._LOG_FILE),
                maxBytes=self._MAX_BYTES,
                backupCount=self._BACKUP_COUNT,
                encoding="utf-8",
            )
            file_handler.setLevel(level)
            file_handler.setFormatter(formatter)
            self._logger.addHandler(file_handler)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    @staticmethod
    def get_logger(level: int = logging.INFO, log_dir: Optional[str] = None) -> logging.Logger:
        """Return the shared ``botsdk`` :class:`logging.Logger`.

        Creates the singleton on first call; later calls return the same
        logger regardless of *level* and *log_dir*.
        """
        instance = SDKLogger(level, log_dir)
        assert instance._logger is not None  # guaranteed by __new__
        return instance._logger
