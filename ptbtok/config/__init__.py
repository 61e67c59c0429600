"""Configuration system for the ptbtok package.

Examples
--------
>>> from ptbtok.config import parse_options, load_config
>>> parse_options("invertible").invertible
True
>>> load_config().logging.level
'WARNING'
"""

from __future__ import annotations

from ptbtok.config.config import PtbtokConfig
from ptbtok.config.loader import load_config, load_yaml_file, merge_configs
from ptbtok.config.logging import LoggingConfig, configure_logging
from ptbtok.config.options import (
    EllipsisStyle,
    QuoteStyle,
    TokenizerOptions,
    UntokenizablePolicy,
    merge_options,
    parse_options,
)

__all__ = [
    "EllipsisStyle",
    "LoggingConfig",
    "PtbtokConfig",
    "QuoteStyle",
    "TokenizerOptions",
    "UntokenizablePolicy",
    "configure_logging",
    "load_config",
    "load_yaml_file",
    "merge_configs",
    "merge_options",
    "parse_options",
]
