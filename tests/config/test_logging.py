"""Tests for logging configuration."""

from __future__ import annotations

import logging
from pathlib import Path

from ptbtok.config import LoggingConfig, configure_logging


class TestLoggingConfig:
    """Test LoggingConfig."""

    def test_defaults(self) -> None:
        """Test default logging settings."""
        config = LoggingConfig()

        assert config.level == "WARNING"
        assert config.console is True
        assert config.file is None


class TestConfigureLogging:
    """Test configure_logging."""

    def test_console_handler(self) -> None:
        """Test that a console handler is installed at the given level."""
        logger = configure_logging(LoggingConfig(level="DEBUG"))

        assert logger.name == "ptbtok"
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0], logging.StreamHandler)

    def test_file_handler(self, tmp_path: Path) -> None:
        """Test logging to a file."""
        log_file = tmp_path / "ptbtok.log"
        logger = configure_logging(
            LoggingConfig(level="INFO", console=False, file=log_file)
        )

        logging.getLogger("ptbtok.tokenization").info("written to file")
        for handler in logger.handlers:
            handler.flush()

        assert len(logger.handlers) == 1
        assert "written to file" in log_file.read_text(encoding="utf-8")

    def test_reconfigure_replaces_handlers(self) -> None:
        """Test that calling again does not stack handlers."""
        configure_logging(LoggingConfig())
        logger = configure_logging(LoggingConfig(level="ERROR"))

        assert len(logger.handlers) == 1
        assert logger.level == logging.ERROR

    def test_no_handlers(self) -> None:
        """Test that console and file can both be disabled."""
        logger = configure_logging(LoggingConfig(console=False))

        assert logger.handlers == []
