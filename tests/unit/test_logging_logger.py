"""Tests for logger factory."""

import logging

import pytest
from rich.console import Console

from axioscloud.logutils.config import LogConfig, reset_config
from axioscloud.logutils.formatters import CompactFormatter, JSONFormatter, StandardFormatter
from axioscloud.logutils.handlers import RichConsoleHandler, StreamHandlerWithFlush
from axioscloud.logutils.logger import get_logger, reset_logging

pytestmark = pytest.mark.unit


@pytest.fixture(autouse=True)
def reset_all():
    """Reset logging and config before and after each test."""
    reset_logging()
    reset_config()
    yield
    reset_logging()
    reset_config()


class TestGetLogger:
    """Tests for get_logger function."""

    def test_returns_logger_instance(self):
        """get_logger should return a Logger instance."""
        logger = get_logger("test.module")
        assert isinstance(logger, logging.Logger)
        assert logger.name == "test.module"

    def test_configured_only_once(self):
        """Logger should only be configured once."""
        logger1 = get_logger("test.logger")
        handler_count = len(logger1.handlers)

        logger2 = get_logger("test.logger")

        assert logger1 is logger2
        assert len(logger2.handlers) == handler_count == 1

    def test_does_not_propagate(self):
        """Named loggers should not duplicate output through the root."""
        assert get_logger("test.propagate").propagate is False

    def test_custom_level(self):
        """Logger should use the provided config level."""
        logger = get_logger("error.logger", config=LogConfig(level="ERROR"))
        assert logger.level == logging.ERROR

    def test_module_level(self):
        """Per-module levels should override the global one."""
        config = LogConfig(level="ERROR", module_levels={"axioscloud.test.codec": "DEBUG"})
        assert get_logger("axioscloud.test.codec", config=config).level == logging.DEBUG

    def test_unknown_level_falls_back(self):
        """An unknown level name should fall back to WARNING."""
        logger = get_logger("bad.level", config=LogConfig(level="LOUD"))
        assert logger.level == logging.WARNING


class TestHandlers:
    """Tests for handler selection."""

    def test_json(self):
        """JSON output should use a flushing stream handler."""
        logger = get_logger("test.json", config=LogConfig(json_format=True))
        handler = logger.handlers[0]
        assert isinstance(handler, StreamHandlerWithFlush)
        assert isinstance(handler.formatter, JSONFormatter)

    def test_rich(self):
        """Rich output should use the console handler with compact lines."""
        logger = get_logger("test.rich", config=LogConfig(use_rich=True))
        handler = logger.handlers[0]
        assert isinstance(handler, RichConsoleHandler)
        assert isinstance(handler.formatter, CompactFormatter)

    def test_plain(self):
        """Plain output should use the standard formatter."""
        logger = get_logger("test.plain", config=LogConfig(use_rich=False))
        handler = logger.handlers[0]
        assert isinstance(handler, StreamHandlerWithFlush)
        assert type(handler.formatter) is StandardFormatter

    def test_rich_handler_emits(self):
        """The rich handler should print level and message."""
        console = Console(record=True, width=200)
        handler = RichConsoleHandler(console=console)
        handler.setFormatter(CompactFormatter())
        handler.emit(
            logging.LogRecord("x", logging.WARNING, "/f.py", 1, "Login rejected [401]", (), None)
        )
        output = console.export_text()
        assert "Login rejected [401]" in output
        assert "WARNING" in output


class TestResetLogging:
    """Tests for reset_logging."""

    def test_rebuilds_handlers(self):
        """After a reset the logger should be configured again."""
        logger = get_logger("test.reset")
        reset_logging()
        assert logger.handlers == []

        get_logger("test.reset")
        assert len(logger.handlers) == 1
