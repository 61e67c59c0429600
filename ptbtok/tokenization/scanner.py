"""Incremental scanner turning a character stream into lexemes.

The scanner reads its source in chunks, keeps a bounded window of text in
memory and applies ``match_rule`` at the current position. Whitespace,
newlines (unless newline tokens are requested) and deleted untokenizable
characters are gathered into the gap that follows each lexeme, so the
concatenation of the leading gap and every lexeme with its gap is exactly
the input.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Protocol

from ptbtok.config.options import TokenizerOptions
from ptbtok.errors import TokenStreamExhaustedError
from ptbtok.tokenization.rules import RuleKind, RuleMatch, match_rule

logger = logging.getLogger(__name__)

CHUNK_SIZE = 8192
# text kept ahead of the position before a rule is tried
WINDOW = 1024
# slack required after a match before it is trusted
LOOKAHEAD = 64


class TextReader(Protocol):
    """Anything with a file-like ``read``."""

    def read(self, size: int = -1, /) -> str:
        """Return up to ``size`` characters, or an empty string at the end."""
        ...


@dataclass(frozen=True, slots=True)
class Lexeme:
    """A matched span of input and the gap that follows it.

    Attributes
    ----------
    kind : RuleKind
        Kind of the rule that produced the lexeme.
    text : str
        Consumed source text.
    begin : int
        Offset of the first character in the input.
    end : int
        Offset one past the last consumed character.
    split : int | None
        Offset inside ``text`` where the lexeme divides into two tokens.
    suffix : str
        Text added to the canonical form without being consumed.
    preceding : str
        Character immediately before ``begin``; empty at the start of input.
    after : str
        Skipped text between this lexeme and the next one.
    """

    kind: RuleKind
    text: str
    begin: int
    end: int
    split: int | None = None
    suffix: str = ""
    preceding: str = ""
    after: str = ""


class Scanner:
    """Produce lexemes from a string or a text reader.

    Parameters
    ----------
    source : str | TextReader
        Input text, or an object with a ``read(size)`` method.
    options : TokenizerOptions
        Tokenizer options; the newline and untokenizable settings are
        applied here.

    Attributes
    ----------
    leading : str
        Skipped text before the first lexeme.
    """

    def __init__(self, source: str | TextReader, options: TokenizerOptions) -> None:
        self._options = options
        self._reader: TextReader | None
        if isinstance(source, str):
            self._reader = None
            self._buffer = source
            self._eof = True
        else:
            self._reader = source
            self._buffer = ""
            self._eof = False
        self._pos = 0
        # input offset of self._buffer[0]
        self._base = 0
        self._previous = ""
        self._reported = False
        self._pending: RuleMatch | None = None
        self.leading = self._read_gap()

    def has_next(self) -> bool:
        """Return whether another lexeme is available."""
        return self._pending is not None

    def next(self) -> Lexeme:
        """Return the next lexeme together with the gap after it.

        Raises
        ------
        TokenStreamExhaustedError
            If the input has no more lexemes.
        """
        match = self._pending
        if match is None:
            raise TokenStreamExhaustedError("No more tokens in the input")
        self._pending = None
        self._compact()

        start = self._pos
        end = start + match.length
        text = self._buffer[start:end]
        preceding = self._buffer[start - 1] if start > 0 else self._previous
        begin = self._base + start
        if match.kind is RuleKind.FALLBACK:
            self._report_untokenizable(text, begin)

        self._pos = end
        after = self._read_gap()
        return Lexeme(
            kind=match.kind,
            text=text,
            begin=begin,
            end=begin + match.length,
            split=match.split,
            suffix=match.suffix,
            preceding=preceding,
            after=after,
        )

    def _fill(self, size: int) -> None:
        """Read until the buffer holds ``size`` characters or input ends."""
        while not self._eof and len(self._buffer) < size:
            assert self._reader is not None
            chunk = self._reader.read(CHUNK_SIZE)
            if not chunk:
                self._eof = True
            else:
                self._buffer += chunk

    def _compact(self) -> None:
        """Drop consumed text from a streamed buffer."""
        if self._reader is None or self._pos < CHUNK_SIZE:
            return
        self._previous = self._buffer[self._pos - 1]
        self._buffer = self._buffer[self._pos :]
        self._base += self._pos
        self._pos = 0

    def _at_end(self) -> bool:
        self._fill(self._pos + 1)
        return self._pos >= len(self._buffer)

    def _match(self) -> RuleMatch:
        """Match at the current position with enough text buffered.

        A match that ends too close to the end of a buffer that is not at
        end of input might grow with more text, so it is retried after
        reading another chunk.
        """
        wanted = self._pos + WINDOW
        while True:
            self._fill(wanted)
            match = match_rule(self._buffer, self._pos, self._options, self._eof)
            if self._eof or self._pos + match.length + LOOKAHEAD <= len(self._buffer):
                return match
            wanted = len(self._buffer) + CHUNK_SIZE

    def _skippable(self, match: RuleMatch) -> bool:
        if match.kind is RuleKind.WHITESPACE:
            return True
        if match.kind is RuleKind.NEWLINE:
            return not self._options.tokenize_newlines
        if match.kind is RuleKind.FALLBACK and self._options.untokenizable.endswith(
            "Delete"
        ):
            self._report_untokenizable(self._buffer[self._pos], self._base + self._pos)
            return True
        return False

    def _read_gap(self) -> str:
        """Consume skippable text and queue the next real match."""
        gap: list[str] = []
        while not self._at_end():
            match = self._match()
            if not self._skippable(match):
                self._pending = match
                break
            gap.append(self._buffer[self._pos : self._pos + match.length])
            self._pos += match.length
        return "".join(gap)

    def _report_untokenizable(self, char: str, offset: int) -> None:
        policy = self._options.untokenizable
        if policy.startswith("none"):
            return
        if policy.startswith("first") and self._reported:
            return
        self._reported = True
        action = "deleted" if policy.endswith("Delete") else "kept"
        logger.warning(
            "Untokenizable: %s (U+%04X, decimal: %d) at offset %d, %s",
            char,
            ord(char),
            ord(char),
            offset,
            action,
        )
