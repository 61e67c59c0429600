"""Command-line interface for ptbtok."""

from __future__ import annotations

from ptbtok.cli.main import cli

__all__ = ["cli"]
