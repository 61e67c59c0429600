"""Tests for British to American spelling normalization."""

from __future__ import annotations

import pytest

from ptbtok.tokenization.americanize import EXCEPTIONS, MAPPING, americanize


class TestAmericanize:
    """Test americanize."""

    @pytest.mark.parametrize(
        ("word", "expected"),
        [
            ("colour", "color"),
            ("colourful", "colorful"),
            ("honoured", "honored"),
            ("labelled", "labeled"),
            ("centre", "center"),
            ("programmes", "programs"),
            ("haemoglobin", "hemoglobin"),
            ("anaemia", "anemia"),
        ],
    )
    def test_british_spellings(self, word: str, expected: str) -> None:
        """Test rewriting British spellings."""
        assert americanize(word) == expected

    def test_capitalized(self) -> None:
        """Test that capitalization is preserved."""
        assert americanize("Colour") == "Color"
        assert americanize("Theatre") == "Theater"

    def test_all_caps_unchanged(self) -> None:
        """Test that all-caps words are left alone."""
        assert americanize("COLOUR") == "COLOUR"

    @pytest.mark.parametrize("word", ["hour", "four", "your", "detour", "Flour"])
    def test_exceptions(self, word: str) -> None:
        """Test that -our words which are not British spellings are kept."""
        assert americanize(word) == word

    @pytest.mark.parametrize(
        "word",
        ["devoured", "devouring", "detoured", "contouring", "Contoured", "sours"],
    )
    def test_inflected_exceptions(self, word: str) -> None:
        """Test that inflections of -our exception words are kept."""
        assert americanize(word) == word

    def test_inflected_british_spelling(self) -> None:
        """Test that inflections of British -our words are still rewritten."""
        assert americanize("flavouring") == "flavoring"

    def test_american_unchanged(self) -> None:
        """Test that American spellings pass through."""
        assert americanize("color") == "color"

    def test_short_words_unchanged(self) -> None:
        """Test that very short words are not rewritten."""
        assert americanize("our") == "our"

    def test_tables_are_read_only(self) -> None:
        """Test that the lookup tables cannot be modified."""
        with pytest.raises(TypeError):
            MAPPING["colour"] = "color"  # type: ignore[index]
        assert isinstance(EXCEPTIONS, frozenset)
