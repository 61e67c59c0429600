"""Tests for configuration loading."""

from __future__ import annotations

from pathlib import Path

import pytest
import yaml
from pydantic import ValidationError

from ptbtok.config import PtbtokConfig, load_config, load_yaml_file, merge_configs
from ptbtok.errors import OptionsError


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    """Create a configuration file with both sections.

    Parameters
    ----------
    tmp_path : Path
        Pytest temporary directory.

    Returns
    -------
    Path
        Path to the YAML file.
    """
    path = tmp_path / "ptbtok.yaml"
    path.write_text(
        "tokenizer:\n"
        "  invertible: true\n"
        "  quotes: unicode\n"
        "logging:\n"
        "  level: INFO\n",
        encoding="utf-8",
    )
    return path


class TestMergeConfigs:
    """Test merge_configs."""

    def test_nested_merge(self) -> None:
        """Test merging nested dictionaries."""
        base = {"tokenizer": {"invertible": True}, "logging": {"level": "INFO"}}
        override = {"tokenizer": {"quotes": "ascii"}}

        assert merge_configs(base, override) == {
            "tokenizer": {"invertible": True, "quotes": "ascii"},
            "logging": {"level": "INFO"},
        }

    def test_override_wins(self) -> None:
        """Test that override values replace base values."""
        assert merge_configs({"a": 1}, {"a": 2}) == {"a": 2}

    def test_base_not_modified(self) -> None:
        """Test that the base dictionary is not changed."""
        base = {"a": {"b": 1}}
        merge_configs(base, {"a": {"c": 2}})

        assert base == {"a": {"b": 1}}


class TestLoadYamlFile:
    """Test load_yaml_file."""

    def test_load(self, config_file: Path) -> None:
        """Test loading a YAML file."""
        data = load_yaml_file(config_file)

        assert data["tokenizer"]["quotes"] == "unicode"

    def test_load_from_string_path(self, config_file: Path) -> None:
        """Test loading from a string path."""
        assert load_yaml_file(str(config_file))["logging"]["level"] == "INFO"

    def test_empty_file(self, tmp_path: Path) -> None:
        """Test that an empty file loads as an empty dictionary."""
        path = tmp_path / "empty.yaml"
        path.write_text("", encoding="utf-8")

        assert load_yaml_file(path) == {}

    def test_missing_file(self, tmp_path: Path) -> None:
        """Test that a missing file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            load_yaml_file(tmp_path / "missing.yaml")

    def test_malformed_file(self, tmp_path: Path) -> None:
        """Test that malformed YAML raises YAMLError."""
        path = tmp_path / "bad.yaml"
        path.write_text("tokenizer: [unclosed\n", encoding="utf-8")

        with pytest.raises(yaml.YAMLError):
            load_yaml_file(path)


class TestLoadConfig:
    """Test load_config."""

    def test_defaults(self) -> None:
        """Test loading without a file."""
        config = load_config()

        assert config == PtbtokConfig()

    def test_from_file(self, config_file: Path) -> None:
        """Test loading both sections from a file."""
        config = load_config(config_file)

        assert config.tokenizer.invertible is True
        assert config.tokenizer.quotes == "unicode"
        assert config.tokenizer.americanize is True
        assert config.logging.level == "INFO"

    def test_overrides(self, config_file: Path) -> None:
        """Test that keyword overrides win over the file."""
        config = load_config(
            config_file, tokenizer__quotes="ascii", logging__level="DEBUG"
        )

        assert config.tokenizer.quotes == "ascii"
        assert config.tokenizer.invertible is True
        assert config.logging.level == "DEBUG"

    def test_camel_case_keys(self, tmp_path: Path) -> None:
        """Test option aliases in the tokenizer section."""
        path = tmp_path / "ptbtok.yaml"
        path.write_text(
            "tokenizer:\n  strictTreebank3: true\n  tokenizeNLs: yes\n",
            encoding="utf-8",
        )

        config = load_config(path)

        assert config.tokenizer.strict_treebank3 is True
        assert config.tokenizer.tokenize_newlines is True

    def test_option_string_section(self, tmp_path: Path) -> None:
        """Test a tokenizer section written as an option string."""
        path = tmp_path / "ptbtok.yaml"
        path.write_text(
            'tokenizer: "invertible,ptb3Escaping=false"\n', encoding="utf-8"
        )

        config = load_config(path, tokenizer__normalize_parentheses=True)

        assert config.tokenizer.invertible is True
        assert config.tokenizer.quotes == "original"
        assert config.tokenizer.normalize_parentheses is True

    def test_bad_tokenizer_value(self, tmp_path: Path) -> None:
        """Test that a bad option value raises OptionsError."""
        path = tmp_path / "ptbtok.yaml"
        path.write_text("tokenizer:\n  quotes: fancy\n", encoding="utf-8")

        with pytest.raises(OptionsError):
            load_config(path)

    def test_bad_logging_value(self, tmp_path: Path) -> None:
        """Test that a bad logging level raises ValidationError."""
        path = tmp_path / "ptbtok.yaml"
        path.write_text("logging:\n  level: LOUD\n", encoding="utf-8")

        with pytest.raises(ValidationError):
            load_config(path)

    def test_missing_file(self, tmp_path: Path) -> None:
        """Test that a missing file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "missing.yaml")

    def test_to_dict(self, config_file: Path) -> None:
        """Test converting a configuration to a dictionary."""
        data = load_config(config_file).to_dict()

        assert data["tokenizer"]["invertible"] is True
        assert data["logging"]["file"] is None
