"""Root pytest configuration for ptbtok package tests."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from io import StringIO
from pathlib import Path

import pytest

from ptbtok.config import TokenizerOptions


@pytest.fixture(scope="session")
def tests_dir() -> Path:
    """Get tests directory path.

    Returns
    -------
    Path
        Path to tests directory
    """
    return Path(__file__).parent


@pytest.fixture(autouse=True)
def reset_package_logger() -> Iterator[None]:
    """Restore the package logger after each test.

    Yields
    ------
    None
        Control returns to the test.
    """
    logger = logging.getLogger("ptbtok")
    handlers = list(logger.handlers)
    level = logger.level
    yield
    for handler in list(logger.handlers):
        if handler not in handlers:
            logger.removeHandler(handler)
            handler.close()
    logger.setLevel(level)


@pytest.fixture
def default_options() -> TokenizerOptions:
    """Provide the default tokenizer options.

    Returns
    -------
    TokenizerOptions
        Options with every field at its default.
    """
    return TokenizerOptions()


@pytest.fixture
def invertible_options() -> TokenizerOptions:
    """Provide options that record whitespace and original text.

    Returns
    -------
    TokenizerOptions
        Invertible options.
    """
    return TokenizerOptions(invertible=True)


class TrickleReader:
    """Text stream returning at most ``step`` characters per read."""

    def __init__(self, text: str, step: int = 7) -> None:
        self._stream = StringIO(text)
        self._step = step
        self.calls = 0

    def read(self, size: int = -1, /) -> str:
        self.calls += 1
        if size < 0:
            size = self._step
        return self._stream.read(min(size, self._step))


@pytest.fixture
def trickle_reader() -> Callable[..., TrickleReader]:
    """Provide a factory for slow, chunked text streams.

    Returns
    -------
    Callable[..., TrickleReader]
        Builds a reader over the given text.
    """
    return TrickleReader
