"""Tests for the JSON log formatter and the SDKLogger singleton."""

import json
import logging
import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from botcore.config import _parse_log_level, _parse_timeout
from botcore.logger import SDKLogger, _JsonFormatter


class TestJsonFormatter:

    def _record(self, **extra) -> logging.LogRecord:
        record = logging.LogRecord(
            name="botsdk.client", level=logging.WARNING, pathname=__file__, lineno=1,
            msg="Telegram API error", args=(), exc_info=None,
        )
        for key, value in extra.items():
            setattr(record, key, value)
        return record

    def test_standard_fields(self) -> None:
        entry = json.loads(_JsonFormatter().format(self._record()))
        assert entry["level"] == "WARNING"
        assert entry["logger"] == "botsdk.client"
        assert entry["message"] == "Telegram API error"
        assert "timestamp" in entry

    def test_extra_fields_merged(self) -> None:
        entry = json.loads(_JsonFormatter().format(self._record(api_endpoint="sendMessage", error_code=400)))
        assert entry["api_endpoint"] == "sendMessage"
        assert entry["error_code"] == 400


class TestSDKLogger:

    def test_singleton(self) -> None:
        assert SDKLogger() is SDKLogger()

    def test_logger_name(self) -> None:
        logger = SDKLogger.get_logger()
        assert logger.name == "botsdk"
        assert logging.getLogger("botsdk.client").parent is logger


class TestConfigParsing:

    def test_log_level(self) -> None:
        assert _parse_log_level("debug") == logging.DEBUG
        assert _parse_log_level("nonsense") == logging.INFO
        assert _parse_log_level(None) == logging.INFO

    def test_timeout(self) -> None:
        assert _parse_timeout("2.5") == 2.5
        assert _parse_timeout("abc") is None
        assert _parse_timeout("0") is None
        assert _parse_timeout(None) is None
