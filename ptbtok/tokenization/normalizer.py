"""Canonical token text for scanned lexemes.

``Normalizer.normalize`` turns one lexeme into one or two ``Piece``
objects. Each piece keeps the exact source text it covers and its offsets,
and carries the canonical text chosen by the tokenizer options: escaped
brackets, LaTeX style quotes, PTB dashes and ellipses, Americanized
spellings and so on.
"""

from __future__ import annotations

import html
import re
from collections.abc import Callable
from dataclasses import dataclass

from ptbtok.config.options import QuoteStyle, TokenizerOptions
from ptbtok.tokenization import lexicon
from ptbtok.tokenization.americanize import americanize
from ptbtok.tokenization.rules import RuleKind
from ptbtok.tokenization.scanner import Lexeme

NEWLINE_TOKEN = "*NL*"

# characters dropped from words
_JOINERS = re.compile("[\u00AD\u2060]")
_ENTITY = re.compile(r"&[A-Za-z]+;|&#\d+;")
_UNESCAPED_SLASH_OR_ASTERISK = re.compile(r"(?<!\\)([/*])")

# (is_double, is_left); None marks a straight quote whose direction is guessed
_QUOTE_CLASSES: dict[str, tuple[bool, bool | None]] = {
    "'": (False, None),
    '"': (True, None),
    "`": (False, True),
    "\u0082": (False, True),
    "\u0091": (False, True),
    "\u2018": (False, True),
    "\u201A": (False, True),
    "\u201B": (False, True),
    "\u2039": (False, True),
    "\u0092": (False, False),
    "\u2019": (False, False),
    "\u203A": (False, False),
    "\u0084": (True, True),
    "\u0093": (True, True),
    "\u201C": (True, True),
    "\u201E": (True, True),
    "\u201F": (True, True),
    "\u00AB": (True, True),
    "\u0094": (True, False),
    "\u201D": (True, False),
    "\u00BB": (True, False),
}

_QUOTE_FORMS: dict[str, dict[tuple[bool, bool], str]] = {
    "latex": {
        (False, True): "`",
        (False, False): "'",
        (True, True): "``",
        (True, False): "''",
    },
    "unicode": {
        (False, True): "\u2018",
        (False, False): "\u2019",
        (True, True): "\u201C",
        (True, False): "\u201D",
    },
    "ascii": {
        (False, True): "'",
        (False, False): "'",
        (True, True): '"',
        (True, False): '"',
    },
}

_OPENERS = frozenset("([{<")


@dataclass(frozen=True, slots=True)
class Piece:
    """One output token before it is handed to a token factory.

    Attributes
    ----------
    text : str
        Canonical token text.
    original : str
        Source text the token covers.
    begin : int
        Offset of the first source character.
    end : int
        Offset one past the last source character.
    """

    text: str
    original: str
    begin: int
    end: int


def remove_joiners(text: str) -> str:
    """Remove soft hyphens and word joiners.

    A token made only of soft hyphens becomes a plain hyphen.

    Examples
    --------
    >>> remove_joiners("ship\\u00adping")
    'shipping'
    >>> remove_joiners("\\u00ad")
    '-'
    """
    if "\u00AD" not in text and "\u2060" not in text:
        return text
    stripped = _JOINERS.sub("", text)
    return stripped if stripped else "-"


def convert_quote(text: str, style: QuoteStyle, probably_left: bool) -> str:
    """Rewrite the quote characters of a token in the requested style.

    Parameters
    ----------
    text : str
        Token text made of quote characters, possibly followed by letters
        (``'s``, ``n't``).
    style : QuoteStyle
        Target style; ``original`` leaves the text unchanged.
    probably_left : bool
        Direction for a lone straight quote.

    Returns
    -------
    str
        Token text with quotes replaced.

    Examples
    --------
    >>> convert_quote('"', "latex", True)
    '``'
    >>> convert_quote("\\u2019s", "latex", False)
    "'s"
    """
    if style == "original":
        return text
    text = text.replace("&apos;", "'").replace("&quot;", '"')
    forms = _QUOTE_FORMS[style]
    if text in ("``", "''"):
        return forms[(True, text == "``")]
    lone = len(text) == 1
    converted: list[str] = []
    for char in text:
        quote_class = _QUOTE_CLASSES.get(char)
        if quote_class is None:
            converted.append(char)
            continue
        is_double, is_left = quote_class
        if is_left is None:
            is_left = probably_left if lone else False
        converted.append(forms[(is_double, is_left)])
    return "".join(converted)


def escape_slash_asterisk(text: str) -> str:
    """Put a backslash before every unescaped ``/`` and ``*``."""
    return _UNESCAPED_SLASH_OR_ASTERISK.sub(r"\\\1", text)


class Normalizer:
    """Map lexemes to canonical tokens under fixed options.

    Parameters
    ----------
    options : TokenizerOptions
        Options selecting the canonical forms.
    """

    def __init__(self, options: TokenizerOptions) -> None:
        self.options = options
        self._handlers: dict[RuleKind, Callable[[Lexeme], str]] = {
            RuleKind.WORD: self._word,
            RuleKind.SGML: self._spaced,
            RuleKind.SPMDASH: self._entity_dash,
            RuleKind.SPAMP: self._entity,
            RuleKind.TBSPEC: self._entity,
            RuleKind.THINGA: self._entity,
            RuleKind.ANGLE_BRACKET: self._entity,
            RuleKind.UNICODE_FRACTION: self._unicode_fraction,
            RuleKind.FULL_URL: self._slashed,
            RuleKind.LIKELY_URL: self._slashed,
            RuleKind.DATE: self._slashed,
            RuleKind.SLASH: self._slashed,
            RuleKind.ASTERISKS: self._slashed,
            RuleKind.FRACTION: self._fraction,
            RuleKind.CURRENCY: self._currency,
            RuleKind.PHONE: self._phone,
            RuleKind.DOUBLE_QUOTE: self._directed_quote,
            RuleKind.QUOTES: self._directed_quote,
            RuleKind.REDAUX: self._closing_quote,
            RuleKind.SREDAUX: self._closing_quote,
            RuleKind.OPEN_PAREN: self._bracket,
            RuleKind.CLOSE_PAREN: self._bracket,
            RuleKind.OPEN_BRACE: self._bracket,
            RuleKind.CLOSE_BRACE: self._bracket,
            RuleKind.OPEN_BRACKET: self._bracket,
            RuleKind.CLOSE_BRACKET: self._bracket,
            RuleKind.HYPHENS: self._hyphens,
            RuleKind.ELLIPSIS: self._ellipsis,
            RuleKind.SMILEY: self._smiley,
            RuleKind.ASIAN_SMILEY: self._smiley,
            RuleKind.NEWLINE: self._newline,
            RuleKind.BULLET: self._bullet,
        }

    def normalize(self, lexeme: Lexeme) -> list[Piece]:
        """Return the tokens for ``lexeme``.

        Parameters
        ----------
        lexeme : Lexeme
            Scanned lexeme.

        Returns
        -------
        list[Piece]
            One piece, or two for a split contraction or assimilation.
            Split pieces cover adjacent source spans.
        """
        if lexeme.split is not None:
            return self._split(lexeme)
        handler = self._handlers.get(lexeme.kind, self._plain)
        return [Piece(handler(lexeme), lexeme.text, lexeme.begin, lexeme.end)]

    def _split(self, lexeme: Lexeme) -> list[Piece]:
        assert lexeme.split is not None
        head = lexeme.text[: lexeme.split]
        tail = lexeme.text[lexeme.split :]
        middle = lexeme.begin + lexeme.split
        if lexeme.kind is RuleKind.CLITIC:
            head_text = self._word_text(head)
        elif lexeme.kind is RuleKind.NEGATION:
            head_text = remove_joiners(head)
        else:
            head_text = self._apostrophe_part(head)
        return [
            Piece(head_text, head, lexeme.begin, middle),
            Piece(self._apostrophe_part(tail), tail, middle, lexeme.end),
        ]

    def _apostrophe_part(self, text: str) -> str:
        return convert_quote(text, self.options.quotes, probably_left=False)

    def _word_text(self, text: str) -> str:
        text = remove_joiners(text)
        if self.options.normalize_ampersand_entity and "&" in text:
            text = html.unescape(text)
        if self.options.americanize:
            text = americanize(text)
        return text

    def _plain(self, lexeme: Lexeme) -> str:
        return remove_joiners(lexeme.text) + lexeme.suffix

    def _word(self, lexeme: Lexeme) -> str:
        return self._word_text(lexeme.text)

    def _spaced(self, lexeme: Lexeme) -> str:
        if self.options.normalize_space:
            return lexeme.text.replace(" ", "\u00A0")
        return lexeme.text

    def _entity(self, lexeme: Lexeme) -> str:
        if self.options.normalize_ampersand_entity:
            return _ENTITY.sub(lambda m: html.unescape(m.group()), lexeme.text)
        return lexeme.text

    def _entity_dash(self, lexeme: Lexeme) -> str:
        if self.options.ptb3_dashes:
            return "--"
        return self._entity(lexeme)

    def _escaped(self, text: str) -> str:
        if self.options.escape_forward_slash_asterisk:
            return escape_slash_asterisk(text)
        return text

    def _unicode_fraction(self, lexeme: Lexeme) -> str:
        if not self.options.normalize_fractions:
            return lexeme.text
        return self._escaped(lexicon.FRACTIONS[lexeme.text])

    def _slashed(self, lexeme: Lexeme) -> str:
        return self._escaped(lexeme.text)

    def _fraction(self, lexeme: Lexeme) -> str:
        return self._escaped(self._spaced(lexeme))

    def _currency(self, lexeme: Lexeme) -> str:
        if self.options.normalize_currency:
            return lexicon.CURRENCY_NORMALIZATION.get(lexeme.text, "$")
        return lexeme.text

    def _phone(self, lexeme: Lexeme) -> str:
        text = self._spaced(lexeme)
        if self.options.normalize_parentheses:
            text = text.replace("(", "-LRB-").replace(")", "-RRB-")
        return text

    def _directed_quote(self, lexeme: Lexeme) -> str:
        preceding = lexeme.preceding
        probably_left = not preceding or preceding.isspace() or preceding in _OPENERS
        return convert_quote(lexeme.text, self.options.quotes, probably_left)

    def _closing_quote(self, lexeme: Lexeme) -> str:
        return self._apostrophe_part(lexeme.text)

    def _bracket(self, lexeme: Lexeme) -> str:
        if lexeme.kind in (RuleKind.OPEN_PAREN, RuleKind.CLOSE_PAREN):
            enabled = self.options.normalize_parentheses
        else:
            enabled = self.options.normalize_other_brackets
        if enabled:
            return lexicon.BRACKET_ESCAPES[lexeme.text]
        return lexeme.text

    def _hyphens(self, lexeme: Lexeme) -> str:
        if self.options.ptb3_dashes and 3 <= len(lexeme.text) <= 4:
            return "--"
        return lexeme.text

    def _ellipsis(self, lexeme: Lexeme) -> str:
        style = self.options.ellipses
        if style == "ptb3":
            return "..."
        if style == "unicode":
            return "\u2026"
        return self._spaced(lexeme)

    def _smiley(self, lexeme: Lexeme) -> str:
        # only round brackets are escaped inside emoticons
        if self.options.normalize_parentheses:
            return lexeme.text.replace("(", "-LRB-").replace(")", "-RRB-")
        return lexeme.text

    def _newline(self, lexeme: Lexeme) -> str:
        return NEWLINE_TOKEN

    def _bullet(self, lexeme: Lexeme) -> str:
        return lexeme.text.replace("\u0095", "\u2022")
