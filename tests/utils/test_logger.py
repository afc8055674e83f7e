"""
Tests for logging utilities.

This module tests logging setup and formatter functionality.
"""

import logging
from unittest.mock import patch

import pytest

from artifact_transport.utils import WrappingFormatter, setup_logging


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Keep logging changes local to each test."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    for name in ("httpx", "httpcore"):
        logging.getLogger(name).setLevel(logging.NOTSET)


def make_record(message: str) -> logging.LogRecord:
    return logging.LogRecord("test", logging.INFO, __file__, 1, message, None, None)


class TestSetupLogging:
    """Test setup_logging verbosity levels."""

    @pytest.mark.parametrize(
        "verbosity,level",
        [(0, logging.WARNING), (1, logging.INFO), (2, logging.DEBUG), (3, logging.DEBUG)],
    )
    def test_levels(self, verbosity, level):
        """Test each verbosity maps to a level."""
        with patch("logging.basicConfig") as mock_basic_config:
            setup_logging(verbosity=verbosity)
        assert mock_basic_config.call_args.kwargs["level"] == level

    def test_with_wrapping(self):
        """Test the wrapping handler replaces existing handlers."""
        setup_logging(verbosity=2, use_wrapping=True)

        root_logger = logging.getLogger()
        assert root_logger.level == logging.DEBUG
        assert len(root_logger.handlers) == 1
        assert isinstance(root_logger.handlers[0].formatter, WrappingFormatter)

    def test_http_loggers_quiet_by_default(self):
        """Test httpx request logs are hidden below -ddd."""
        setup_logging(verbosity=2, use_wrapping=True)
        assert logging.getLogger("httpx").level == logging.WARNING
        assert logging.getLogger("httpcore").level == logging.WARNING

    def test_http_loggers_enabled(self):
        """Test -ddd enables httpx request logs."""
        setup_logging(verbosity=3, use_wrapping=True)
        assert logging.getLogger("httpx").level == logging.DEBUG


class TestWrappingFormatter:
    """Test WrappingFormatter."""

    def test_short_message(self):
        """Test short records are left on one line."""
        formatter = WrappingFormatter(width=50)
        assert formatter.format(make_record("Short message")) == "Short message"

    def test_long_message(self):
        """Test long records wrap at the width."""
        formatter = WrappingFormatter(width=50)
        message = "Downloaded org/example/lib/1.0/lib-1.0.jar to /tmp/artifacts/lib-1.0.jar after a while"

        formatted = formatter.format(make_record(message))

        assert "\n" in formatted
        assert all(len(line) <= 50 for line in formatted.splitlines())
