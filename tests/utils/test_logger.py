"""Tests for Logger."""

import logging
from semver_kiwi.utils.logger import Logger


class TestLogger:
    """Test Logger."""

    def test_logger_creation(self):
        """Should create logger instance."""
        logger = Logger("test", level="INFO")
        assert logger is not None

    def test_logger_levels(self):
        """Should support different log levels."""
        logger_debug = Logger("test", level="DEBUG")
        assert logger_debug.logger.level == logging.DEBUG

        logger_error = Logger("test", level="ERROR")
        assert logger_error.logger.level == logging.ERROR

    def test_unknown_level_falls_back_to_warning(self):
        """Should default to WARNING for an unknown level name."""
        logger = Logger("test-unknown", level="chatty")
        assert logger.logger.level == logging.WARNING

    def test_single_handler(self):
        """Should not stack handlers when created twice with one name."""
        Logger("test-handlers")
        Logger("test-handlers")
        assert len(logging.getLogger("test-handlers").handlers) == 1

    def test_logger_methods(self):
        """Should have logging methods."""
        logger = Logger("test")

        logger.debug("Debug message")
        assert logger.isEnabledFor(logging.ERROR)
        assert not logger.isEnabledFor(logging.DEBUG)

    def test_level_from_config(self, mock_config):
        """Should take its level from the configured log level."""
        logger = Logger("test-config", level=mock_config.log_level)
        assert logger.logger.level == logging.DEBUG
