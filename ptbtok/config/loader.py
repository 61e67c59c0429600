"""Read ptbtok configuration from YAML.

A configuration file has two optional top-level sections::

    tokenizer:
      invertible: true
      quotes: unicode
    logging:
      level: INFO

The ``tokenizer`` section may also be written as a single option string,
e.g. ``tokenizer: "invertible,ptb3Escaping=false"``.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from ptbtok.config.config import PtbtokConfig
from ptbtok.config.logging import LoggingConfig
from ptbtok.config.options import parse_options

SECTIONS = ("tokenizer", "logging")


def merge_configs(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Merge ``override`` into a copy of ``base``.

    Nested mappings are merged key by key; any other value in ``override``
    replaces the one in ``base``. Neither argument is modified.

    Examples
    --------
    >>> merge_configs({"tokenizer": {"invertible": True}}, {"tokenizer": {}})
    {'tokenizer': {'invertible': True}}
    """
    merged = dict(base)
    for key, value in override.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            merged[key] = merge_configs(current, value)
        else:
            merged[key] = value
    return merged


def load_yaml_file(path: Path | str) -> dict[str, Any]:
    """Parse a YAML configuration file.

    Parameters
    ----------
    path : Path | str
        File to read.

    Returns
    -------
    dict[str, Any]
        The parsed mapping; an empty file gives an empty dictionary.

    Raises
    ------
    FileNotFoundError
        If ``path`` does not exist.
    yaml.YAMLError
        If the file is not valid YAML or its top level is not a mapping.
    """
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"No configuration file at {path}")

    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise yaml.YAMLError(f"Cannot parse {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise yaml.YAMLError(f"Expected a mapping at the top of {path}")
    return data


def _nest_overrides(overrides: dict[str, Any]) -> dict[str, Any]:
    """Turn ``section__field`` keyword names into nested dictionaries."""
    nested: dict[str, Any] = {}
    for key, value in overrides.items():
        *sections, field = key.split("__")
        target = nested
        for section in sections:
            target = target.setdefault(section, {})
        target[field] = value
    return nested


def _tokenizer_section(section: Any) -> dict[str, Any]:
    # option strings keep only the settings they name explicitly
    if isinstance(section, str):
        return parse_options(section).model_dump(exclude_defaults=True)
    return dict(section or {})


def load_config(
    config_path: Path | str | None = None,
    **overrides: Any,
) -> PtbtokConfig:
    """Build a ``PtbtokConfig`` from defaults, a file and keyword overrides.

    Later sources win: field defaults, then the YAML file, then
    ``overrides``. Override names use ``section__field`` form, for example
    ``tokenizer__quotes="ascii"`` or ``logging__level="DEBUG"``.

    Parameters
    ----------
    config_path : Path | str | None
        Optional YAML file.
    **overrides : Any
        Values that take precedence over the file.

    Returns
    -------
    PtbtokConfig
        The resolved configuration.

    Raises
    ------
    FileNotFoundError
        If ``config_path`` does not exist.
    yaml.YAMLError
        If the file is malformed.
    OptionsError
        If a tokenizer option has an unusable value.
    ValidationError
        If the logging section is invalid.
    """
    data: dict[str, Any] = {section: {} for section in SECTIONS}
    if config_path is not None:
        from_file = load_yaml_file(config_path)
        from_file["tokenizer"] = _tokenizer_section(from_file.get("tokenizer"))
        data = merge_configs(data, from_file)
    data = merge_configs(data, _nest_overrides(overrides))

    return PtbtokConfig(
        tokenizer=parse_options(data["tokenizer"]),
        logging=LoggingConfig(**(data["logging"] or {})),
    )
