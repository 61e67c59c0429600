"""Penn Treebank tokenizer.

``PTBTokenizer`` ties the scanner, the normalizer and a token factory
together and exposes the tokens as an iterator. In invertible mode every
token records its original text and the whitespace on both sides, such
that joining ``before`` of the first token with ``original_text + after``
of every token reproduces the input exactly.

Examples
--------
>>> from ptbtok.tokenization import tokenize
>>> [t.text for t in tokenize("I can't go.")]
['I', 'ca', "n't", 'go', '.']
"""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Iterator, Mapping
from typing import Any, Generic, TypeVar, cast

from ptbtok.config.options import TokenizerOptions, parse_options
from ptbtok.errors import InputError, TokenStreamExhaustedError
from ptbtok.tokenization.normalizer import Normalizer
from ptbtok.tokenization.scanner import Scanner, TextReader
from ptbtok.tokenization.tokens import (
    TokenFactory,
    TokenizedText,
    display_token_factory,
    token_factory,
    word_factory,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

OptionsLike = TokenizerOptions | Mapping[str, Any] | str | None


class PTBTokenizer(Generic[T]):
    """Iterator over the Penn Treebank tokens of a text.

    Parameters
    ----------
    source : str | TextReader
        Input text, or an open text stream.
    factory : TokenFactory[T] | None
        Builds output tokens; defaults to ``token_factory``.
    options : TokenizerOptions | Mapping[str, Any] | str | None
        Tokenizer options in any form accepted by ``parse_options``.

    Raises
    ------
    InputError
        If ``source`` is None.
    OptionsError
        If ``options`` contains an unusable value.

    Examples
    --------
    >>> tokenizer = PTBTokenizer("Hello, world!")
    >>> [t.text for t in tokenizer]
    ['Hello', ',', 'world', '!']
    """

    def __init__(
        self,
        source: str | TextReader | None,
        factory: TokenFactory[T] | None = None,
        options: OptionsLike = None,
    ) -> None:
        if source is None:
            raise InputError("Cannot tokenize: no input source given")
        self.options = parse_options(options)
        self._factory = cast(
            TokenFactory[T], factory if factory is not None else token_factory
        )
        self._normalizer = Normalizer(self.options)
        self._scanner = Scanner(source, self.options)
        self._queue: deque[T] = deque()
        self._before = self._scanner.leading
        logger.debug(
            "Created tokenizer with options: %s",
            self.options.to_option_string() or "(defaults)",
        )

    def __iter__(self) -> Iterator[T]:
        return self

    def __next__(self) -> T:
        if not self.has_next():
            raise StopIteration
        return self._queue.popleft()

    def has_next(self) -> bool:
        """Return whether another token is available."""
        if not self._queue:
            self._advance()
        return bool(self._queue)

    def next_token(self) -> T:
        """Return the next token.

        Raises
        ------
        TokenStreamExhaustedError
            If every token has been returned.
        """
        if not self.has_next():
            raise TokenStreamExhaustedError("No more tokens in the input")
        return self._queue.popleft()

    def tokenize(self) -> list[T]:
        """Return all remaining tokens."""
        return list(self)

    def _advance(self) -> None:
        if not self._scanner.has_next():
            return
        lexeme = self._scanner.next()
        pieces = self._normalizer.normalize(lexeme)
        invertible = self.options.invertible
        last = len(pieces) - 1
        for index, piece in enumerate(pieces):
            after = lexeme.after if index == last else ""
            if invertible:
                token = self._factory(
                    piece.text,
                    piece.original,
                    self._before,
                    after,
                    piece.begin,
                    piece.end,
                )
            else:
                token = self._factory(
                    piece.text, None, None, None, piece.begin, piece.end
                )
            self._queue.append(token)
            self._before = after


def tokenize(
    text: str | TextReader,
    options: OptionsLike = None,
    factory: TokenFactory[Any] | None = None,
) -> list[Any]:
    """Tokenize ``text`` and return the token list.

    Parameters
    ----------
    text : str | TextReader
        Input text or stream.
    options : TokenizerOptions | Mapping[str, Any] | str | None
        Tokenizer options.
    factory : TokenFactory[Any] | None
        Token factory; ``Token`` objects are built when None.

    Returns
    -------
    list[Any]
        Tokens produced by ``factory``.
    """
    return PTBTokenizer(text, factory, options).tokenize()


def tokenize_words(text: str | TextReader, options: OptionsLike = None) -> list[str]:
    """Return the canonical token texts of ``text``.

    Examples
    --------
    >>> tokenize_words("Gimme a phone, I'm gonna call.")
    ['Gim', 'me', 'a', 'phone', ',', 'I', "'m", 'gon', 'na', 'call', '.']
    """
    return PTBTokenizer(text, word_factory, options).tokenize()


def tokenize_for_display(text: str, options: OptionsLike = None) -> TokenizedText:
    """Tokenize ``text`` into display tokens with spacing flags.

    Whitespace information is always recorded, whatever ``invertible`` is
    set to in ``options``.

    Parameters
    ----------
    text : str
        Input text.
    options : TokenizerOptions | Mapping[str, Any] | str | None
        Tokenizer options.

    Returns
    -------
    TokenizedText
        Display tokens and the original text.
    """
    resolved = parse_options(options).model_copy(update={"invertible": True})
    tokens = PTBTokenizer(text, display_token_factory, resolved).tokenize()
    return TokenizedText(tokens=tokens, original_text=text)
