"""Token models and the factories that build them.

The tokenizer never constructs output objects itself; it calls a
``TokenFactory`` with the canonical text, the original text, the
surrounding whitespace and the character offsets of every token. Three
factories are provided: ``token_factory`` (full ``Token`` records),
``word_factory`` (plain strings) and ``display_token_factory``
(``DisplayToken`` objects for rendering).
"""

from __future__ import annotations

from typing import Protocol, TypeVar

from pydantic import BaseModel, ConfigDict

T_co = TypeVar("T_co", covariant=True)


class Token(BaseModel):
    """A token with its source annotations.

    Attributes
    ----------
    text : str
        Canonical token text.
    original_text : str | None
        Exact source text of the token; None unless invertible.
    before : str | None
        Whitespace between the previous token and this one; None unless
        invertible.
    after : str | None
        Whitespace between this token and the next one; None unless
        invertible.
    char_begin : int
        Offset of the first source character.
    char_end : int
        Offset one past the last source character.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    text: str
    original_text: str | None = None
    before: str | None = None
    after: str | None = None
    char_begin: int
    char_end: int

    def __str__(self) -> str:
        return self.text


class DisplayToken(BaseModel):
    """A token prepared for rendering on one line of text.

    ``start_char`` and ``end_char`` index the text passed to
    ``tokenize_for_display``; ``space_after`` records whether that text had
    whitespace right after the token.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    text: str
    space_after: bool = True
    start_char: int
    end_char: int


class TokenizedText(BaseModel):
    """Display tokens together with the text they were cut from."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    tokens: list[DisplayToken]
    original_text: str

    @property
    def token_texts(self) -> list[str]:
        """Canonical text of every token, in order."""
        return [token.text for token in self.tokens]

    @property
    def space_after_flags(self) -> list[bool]:
        """``space_after`` of every token, in order."""
        return [token.space_after for token in self.tokens]

    @property
    def source_spans(self) -> list[str]:
        """The slice of ``original_text`` each token was read from."""
        return [
            self.original_text[token.start_char : token.end_char]
            for token in self.tokens
        ]

    def render(self) -> str:
        """Join canonical token texts, with a space only where one was.

        Runs of whitespace collapse to a single space and trailing
        whitespace is dropped, so the tokens of ``Hi  (there) `` render as
        ``Hi -LRB-there-RRB-``.
        """
        rendered = "".join(
            token.text + (" " if token.space_after else "") for token in self.tokens
        )
        return rendered.rstrip()


class TokenFactory(Protocol[T_co]):
    """Callable building one output token."""

    def __call__(
        self,
        text: str,
        original_text: str | None,
        before: str | None,
        after: str | None,
        char_begin: int,
        char_end: int,
    ) -> T_co:
        """Build a token from its canonical text and annotations."""
        ...


def token_factory(
    text: str,
    original_text: str | None,
    before: str | None,
    after: str | None,
    char_begin: int,
    char_end: int,
) -> Token:
    """Build a ``Token``."""
    return Token(
        text=text,
        original_text=original_text,
        before=before,
        after=after,
        char_begin=char_begin,
        char_end=char_end,
    )


def word_factory(
    text: str,
    original_text: str | None,
    before: str | None,
    after: str | None,
    char_begin: int,
    char_end: int,
) -> str:
    """Return the canonical text only."""
    return text


def display_token_factory(
    text: str,
    original_text: str | None,
    before: str | None,
    after: str | None,
    char_begin: int,
    char_end: int,
) -> DisplayToken:
    """Build a ``DisplayToken``.

    ``space_after`` comes from the whitespace after the token; without
    whitespace information every token is assumed to be followed by a
    space.
    """
    return DisplayToken(
        text=text,
        space_after=True if after is None else after != "",
        start_char=char_begin,
        end_char=char_end,
    )
