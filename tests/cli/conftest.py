"""Test fixtures for CLI tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide Click CLI test runner.

    Returns
    -------
    CliRunner
        Click test runner.
    """
    return CliRunner()


@pytest.fixture
def text_file(tmp_path: Path) -> Path:
    """Create a small text file to tokenize.

    Parameters
    ----------
    tmp_path : Path
        Pytest temporary directory.

    Returns
    -------
    Path
        Path to the text file.
    """
    path = tmp_path / "story.txt"
    path.write_text("I can't go.\nThe colour is (mostly) grey.\n", encoding="utf-8")
    return path


@pytest.fixture
def mock_config_file(tmp_path: Path) -> Path:
    """Create a ptbtok.yaml configuration file.

    Parameters
    ----------
    tmp_path : Path
        Pytest temporary directory.

    Returns
    -------
    Path
        Path to the configuration file.
    """
    path = tmp_path / "ptbtok.yaml"
    path.write_text(
        "tokenizer:\n"
        "  invertible: true\n"
        "  americanize: false\n"
        "logging:\n"
        "  level: WARNING\n",
        encoding="utf-8",
    )
    return path
