"""Logging configuration for the ptbtok package."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field

PACKAGE_LOGGER = "ptbtok"


class LoggingConfig(BaseModel):
    """Where and how much the tokenizer logs.

    The tokenizer itself logs little: ignored option names and
    construction at DEBUG, untokenizable characters at WARNING.

    Examples
    --------
    >>> LoggingConfig(level="DEBUG", console=False).level
    'DEBUG'
    """

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="WARNING", description="Threshold for the ptbtok logger"
    )
    format: str = Field(
        default="%(levelname)s %(name)s: %(message)s",
        description="logging.Formatter format string",
    )
    file: Path | None = Field(default=None, description="Also log to this file")
    console: bool = Field(default=True, description="Log to standard error")


def configure_logging(config: LoggingConfig) -> logging.Logger:
    """Attach handlers described by ``config`` to the package logger.

    Handlers installed by a previous call are replaced, so the function can
    be called again with a different configuration.

    Parameters
    ----------
    config : LoggingConfig
        Logging configuration to apply.

    Returns
    -------
    logging.Logger
        The configured ``ptbtok`` logger.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    logger.setLevel(config.level)
    formatter = logging.Formatter(config.format)

    if config.console:
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)
    if config.file is not None:
        file_handler = logging.FileHandler(config.file, encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger
