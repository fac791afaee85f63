"""Tests for setup_logging."""

import io
import logging
from unittest.mock import patch

import pytest
from rich.logging import RichHandler

from monitor_client.logger import is_rich_enabled, setup_logging


@pytest.fixture
def target_logger():
    """Provide a fresh logger with no parent and no handlers.

    pytest attaches its own capture handlers to the real root logger, so the
    tests hand this logger to setup_logging instead.
    """
    return logging.Logger("root-under-test")


class TestSetupLogging:
    def test_stream_handler_by_default(self, target_logger, monkeypatch):
        monkeypatch.delenv("MONITOR_RICH_UI", raising=False)
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        stream = io.StringIO()

        setup_logging(logging.INFO, stream=stream, logger=target_logger)
        target_logger.info("hello")

        assert target_logger.level == logging.INFO
        assert len(target_logger.handlers) == 1
        assert "| INFO  | hello" in stream.getvalue()

    def test_debug_format_includes_logger_name(self, target_logger, monkeypatch):
        monkeypatch.delenv("MONITOR_RICH_UI", raising=False)
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        stream = io.StringIO()

        setup_logging("debug", stream=stream, logger=target_logger)
        target_logger.debug("details")

        assert target_logger.level == logging.DEBUG
        assert "root-under-test" in stream.getvalue()

    def test_rich_handler_when_enabled(self, target_logger, monkeypatch):
        monkeypatch.setenv("MONITOR_RICH_UI", "true")
        monkeypatch.delenv("LOG_LEVEL", raising=False)

        setup_logging(logger=target_logger)

        assert is_rich_enabled()
        assert isinstance(target_logger.handlers[0], RichHandler)

    def test_existing_handlers_untouched(self, target_logger, monkeypatch):
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        existing = logging.NullHandler()
        target_logger.addHandler(existing)

        setup_logging(logger=target_logger)

        assert target_logger.handlers == [existing]

    def test_env_level_override(self, target_logger, monkeypatch):
        monkeypatch.delenv("MONITOR_RICH_UI", raising=False)
        monkeypatch.setenv("LOG_LEVEL", "error")

        setup_logging(logging.DEBUG, stream=io.StringIO(), logger=target_logger)

        assert target_logger.level == logging.ERROR

    def test_defaults_to_root_logger(self, target_logger, monkeypatch):
        monkeypatch.delenv("MONITOR_RICH_UI", raising=False)
        monkeypatch.delenv("LOG_LEVEL", raising=False)

        with patch(
            "monitor_client.logger.logging.getLogger", return_value=target_logger
        ) as mock_get_logger:
            setup_logging(stream=io.StringIO())

        mock_get_logger.assert_called_once_with()
        assert len(target_logger.handlers) == 1
