"""Main configuration model for the ptbtok package."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from ptbtok.config.logging import LoggingConfig
from ptbtok.config.options import TokenizerOptions


class PtbtokConfig(BaseModel):
    """Everything a ptbtok configuration file can set.

    The ``tokenizer`` section holds ``TokenizerOptions``; the ``logging``
    section holds ``LoggingConfig``.

    Examples
    --------
    >>> config = PtbtokConfig()
    >>> config.tokenizer.invertible
    False
    >>> config.logging.level
    'WARNING'
    """

    tokenizer: TokenizerOptions = Field(
        default_factory=TokenizerOptions, description="Tokenizer options"
    )
    logging: LoggingConfig = Field(
        default_factory=LoggingConfig, description="Logging configuration"
    )

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to dictionary.

        Returns
        -------
        dict[str, Any]
            Configuration as a dictionary, with paths rendered as strings.
        """
        return self.model_dump(mode="json")
