"""Tests for tokenizer options and option-string parsing."""

from __future__ import annotations

import logging

import pytest
from pydantic import ValidationError

from ptbtok.config import TokenizerOptions, merge_options, parse_options
from ptbtok.errors import OptionsError


class TestTokenizerOptions:
    """Test TokenizerOptions."""

    def test_defaults(self) -> None:
        """Test default option values."""
        options = TokenizerOptions()

        assert options.invertible is False
        assert options.tokenize_newlines is False
        assert options.strict_treebank3 is False
        assert options.americanize is True
        assert options.normalize_parentheses is True
        assert options.normalize_currency is False
        assert options.normalize_fractions is False
        assert options.escape_forward_slash_asterisk is False
        assert options.quotes == "latex"
        assert options.ellipses == "ptb3"
        assert options.untokenizable == "firstKeep"

    def test_alias_and_field_name(self) -> None:
        """Test construction by field name and by alias."""
        by_name = TokenizerOptions(tokenize_newlines=True)
        by_alias = TokenizerOptions(tokenizeNLs=True)  # type: ignore[call-arg]

        assert by_name == by_alias

    def test_frozen(self) -> None:
        """Test that options are immutable."""
        options = TokenizerOptions()

        with pytest.raises(ValidationError):
            options.invertible = True  # type: ignore[misc]

    def test_invalid_literal(self) -> None:
        """Test that direct construction validates enum values."""
        with pytest.raises(ValidationError):
            TokenizerOptions(quotes="fancy")  # type: ignore[arg-type]

    def test_to_option_string(self) -> None:
        """Test rendering non-default options."""
        options = TokenizerOptions(
            invertible=True, americanize=False, quotes="ascii"
        )

        assert options.to_option_string() == (
            "invertible=true,americanize=false,quotes=ascii"
        )

    def test_to_option_string_defaults(self) -> None:
        """Test that default options render as an empty string."""
        assert TokenizerOptions().to_option_string() == ""

    def test_option_string_round_trip(self) -> None:
        """Test that a rendered option string parses back."""
        options = TokenizerOptions(strict_treebank3=True, ellipses="unicode")

        assert parse_options(options.to_option_string()) == options


class TestParseOptions:
    """Test parse_options."""

    def test_none(self) -> None:
        """Test that None gives the defaults."""
        assert parse_options(None) == TokenizerOptions()

    def test_options_object_passed_through(self) -> None:
        """Test that an options object is returned unchanged."""
        options = TokenizerOptions(invertible=True)

        assert parse_options(options) is options

    def test_bare_name_is_true(self) -> None:
        """Test that a name without a value switches the option on."""
        assert parse_options("invertible").invertible is True

    @pytest.mark.parametrize("value", ["true", "TRUE", "1", "yes", "on"])
    def test_true_values(self, value: str) -> None:
        """Test accepted spellings of true."""
        assert parse_options(f"strictTreebank3={value}").strict_treebank3 is True

    @pytest.mark.parametrize("value", ["false", "0", "no", "Off"])
    def test_false_values(self, value: str) -> None:
        """Test accepted spellings of false."""
        assert parse_options(f"americanize={value}").americanize is False

    def test_field_names_accepted(self) -> None:
        """Test snake_case names in option strings."""
        assert parse_options("strict_treebank3").strict_treebank3 is True

    def test_mapping(self) -> None:
        """Test parsing a mapping."""
        options = parse_options({"invertible": True, "quotes": "unicode"})

        assert options.invertible is True
        assert options.quotes == "unicode"

    def test_whitespace_and_empty_items(self) -> None:
        """Test that spaces and empty items are tolerated."""
        options = parse_options(" invertible , ,quotes = ascii ")

        assert options.invertible is True
        assert options.quotes == "ascii"

    def test_unknown_name_ignored(self, caplog: pytest.LogCaptureFixture) -> None:
        """Test that unknown names are ignored and logged."""
        with caplog.at_level(logging.DEBUG, logger="ptbtok"):
            options = parse_options("noSuchOption=3")

        assert options == TokenizerOptions()
        assert "noSuchOption" in caplog.text

    def test_bad_boolean(self) -> None:
        """Test that a non-boolean value for a switch is rejected."""
        with pytest.raises(OptionsError) as exc_info:
            parse_options("invertible=maybe")

        assert exc_info.value.option == "invertible"
        assert exc_info.value.value == "maybe"
        assert "option 'invertible'" in str(exc_info.value)

    def test_bad_enum_value(self) -> None:
        """Test that an unknown enum value is rejected."""
        with pytest.raises(OptionsError) as exc_info:
            parse_options("ellipses=dots")

        assert exc_info.value.option == "ellipses"
        assert "ptb3" in str(exc_info.value)

    def test_errors_are_value_errors(self) -> None:
        """Test that option errors can be caught as ValueError."""
        with pytest.raises(ValueError):
            parse_options("quotes=fancy")


class TestLegacySwitches:
    """Test the boolean switches that select enum values."""

    def test_quote_switches(self) -> None:
        """Test selecting a quote style by switch."""
        assert parse_options("unicodeQuotes").quotes == "unicode"
        assert parse_options("asciiQuotes=true").quotes == "ascii"

    def test_switching_off_selected_style(self) -> None:
        """Test that switching off the active style keeps quotes as written."""
        assert parse_options("latexQuotes=false").quotes == "original"

    def test_switching_off_other_style(self) -> None:
        """Test that switching off an inactive style changes nothing."""
        assert parse_options("unicodeQuotes=false").quotes == "latex"

    def test_ellipsis_switches(self) -> None:
        """Test selecting an ellipsis style by switch."""
        assert parse_options("unicodeEllipsis").ellipses == "unicode"
        assert parse_options("ptb3Ellipsis=false").ellipses == "original"

    def test_ptb3_escaping_off(self) -> None:
        """Test that ptb3Escaping=false turns off every normalization."""
        options = parse_options("ptb3Escaping=false")

        assert options.normalize_parentheses is False
        assert options.normalize_other_brackets is False
        assert options.normalize_ampersand_entity is False
        assert options.ptb3_dashes is False
        assert options.quotes == "original"
        assert options.ellipses == "original"

    def test_ptb3_escaping_with_override(self) -> None:
        """Test that explicit settings win over ptb3Escaping."""
        options = parse_options("normalizeParentheses=true,ptb3Escaping=false")

        assert options.normalize_parentheses is True
        assert options.normalize_other_brackets is False

    def test_ptb3_escaping_on(self) -> None:
        """Test that ptb3Escaping=true keeps the defaults."""
        assert parse_options("ptb3Escaping=true") == TokenizerOptions()


class TestMergeOptions:
    """Test merge_options."""

    def test_only_explicit_settings_override(self) -> None:
        """Test that unset options keep the base values."""
        base = TokenizerOptions(invertible=True, quotes="ascii")

        merged = merge_options(base, "strictTreebank3")

        assert merged.invertible is True
        assert merged.quotes == "ascii"
        assert merged.strict_treebank3 is True

    def test_explicit_default_overrides(self) -> None:
        """Test that an explicit default value still overrides the base."""
        base = TokenizerOptions(invertible=True)

        assert merge_options(base, "invertible=false").invertible is False

    def test_none(self) -> None:
        """Test that no override keeps the base."""
        base = TokenizerOptions(americanize=False)

        assert merge_options(base, None) == base
