"""Tests for token models and factories."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from ptbtok.tokenization.tokens import (
    DisplayToken,
    Token,
    TokenizedText,
    display_token_factory,
    token_factory,
    word_factory,
)


class TestToken:
    """Test Token."""

    def test_str_is_text(self) -> None:
        """Test that str() gives the canonical text."""
        token = Token(text="-LRB-", original_text="(", char_begin=0, char_end=1)

        assert str(token) == "-LRB-"

    def test_frozen(self) -> None:
        """Test that tokens are immutable."""
        token = Token(text="a", char_begin=0, char_end=1)

        with pytest.raises(ValidationError):
            token.text = "b"  # type: ignore[misc]

    def test_extra_fields_rejected(self) -> None:
        """Test that unknown fields are rejected."""
        with pytest.raises(ValidationError):
            Token(
                text="a", char_begin=0, char_end=1, tag="DT"  # type: ignore[call-arg]
            )

    def test_json_dump(self) -> None:
        """Test serializing a token."""
        token = Token(
            text="colorful",
            original_text="colourful",
            before=" ",
            after="",
            char_begin=5,
            char_end=14,
        )

        assert token.model_dump() == {
            "text": "colorful",
            "original_text": "colourful",
            "before": " ",
            "after": "",
            "char_begin": 5,
            "char_end": 14,
        }


class TestFactories:
    """Test the token factories."""

    def test_token_factory(self) -> None:
        """Test building a Token."""
        token = token_factory("n't", "n't", "", " ", 2, 5)

        assert token == Token(
            text="n't",
            original_text="n't",
            before="",
            after=" ",
            char_begin=2,
            char_end=5,
        )

    def test_token_factory_without_whitespace(self) -> None:
        """Test that annotations may be missing."""
        token = token_factory("a", None, None, None, 0, 1)

        assert token.original_text is None
        assert token.before is None

    def test_word_factory(self) -> None:
        """Test that the word factory returns plain text."""
        assert word_factory("-LRB-", "(", "", "", 0, 1) == "-LRB-"

    def test_display_factory_space_after(self) -> None:
        """Test that space_after follows the whitespace after a token."""
        spaced = display_token_factory("a", "a", "", " ", 0, 1)
        joined = display_token_factory("ca", "ca", "", "", 0, 2)

        assert spaced.space_after is True
        assert joined.space_after is False
        assert (joined.start_char, joined.end_char) == (0, 2)

    def test_display_factory_without_whitespace(self) -> None:
        """Test that a missing after defaults to a following space."""
        token = display_token_factory("a", None, None, None, 0, 1)

        assert token.space_after is True


class TestTokenizedText:
    """Test TokenizedText."""

    def test_properties(self) -> None:
        """Test token_texts and space_after_flags."""
        result = TokenizedText(
            tokens=[
                DisplayToken(text="I", space_after=True, start_char=0, end_char=1),
                DisplayToken(text="ca", space_after=False, start_char=2, end_char=4),
                DisplayToken(text="n't", space_after=False, start_char=4, end_char=7),
            ],
            original_text="I can't",
        )

        assert result.token_texts == ["I", "ca", "n't"]
        assert result.space_after_flags == [True, False, False]
        assert result.source_spans == ["I", "ca", "n't"]

    def test_source_spans_keep_original_spelling(self) -> None:
        """Test that source spans come from the input, not the token text."""
        result = TokenizedText(
            tokens=[
                DisplayToken(text="-LRB-", space_after=False, start_char=0, end_char=1),
                DisplayToken(text="color", space_after=False, start_char=1, end_char=7),
            ],
            original_text="(colour",
        )

        assert result.source_spans == ["(", "colour"]

    def test_render(self) -> None:
        """Test rendering with recorded spacing."""
        result = TokenizedText(
            tokens=[
                DisplayToken(text="Hi", space_after=False, start_char=0, end_char=2),
                DisplayToken(text="!", space_after=True, start_char=2, end_char=3),
            ],
            original_text="Hi! ",
        )

        assert result.render() == "Hi!"

    def test_empty(self) -> None:
        """Test an empty result."""
        result = TokenizedText(tokens=[], original_text="")

        assert result.token_texts == []
        assert result.render() == ""
