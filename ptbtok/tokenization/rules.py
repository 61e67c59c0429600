"""Ordered lexical rule table for Penn Treebank tokenization.

Every rule is a ``(RuleKind, pattern)`` pair. ``match_rule`` tries all
enabled rules at a position, keeps the longest match and breaks ties by
table order, so a rule listed earlier wins over a later rule that consumes
the same number of characters. Trailing context is written as a lookahead
and does not count towards the length. When nothing matches, ``FALLBACK``
consumes one character, so matching never fails.

Abbreviations that may end a sentence are resolved here as well: the
returned ``RuleMatch`` then consumes the abbreviation without its period
and carries the text to append (``suffix``), leaving the period to be read
again as a separate token.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

from ptbtok.config.options import TokenizerOptions
from ptbtok.tokenization import lexicon


class RuleKind(Enum):
    """Lexical categories recognized by the rule table."""

    SGML = "sgml"
    SPMDASH = "spmdash"
    SPAMP = "spamp"
    SPPUNC = "sppunc"
    TBSPEC = "tbspec"
    SUBSUPNUM = "subsupnum"
    UNICODE_FRACTION = "unicode_fraction"
    ASSIMILATION = "assimilation"
    NEGATION = "negation"
    CLITIC = "clitic"
    WORD = "word"
    APOWORD = "apoword"
    FULL_URL = "full_url"
    LIKELY_URL = "likely_url"
    EMAIL = "email"
    TWITTER = "twitter"
    DATE = "date"
    NUMBER = "number"
    FRACTION = "fraction"
    TBSPEC2 = "tbspec2"
    DOLLAR = "dollar"
    CURRENCY = "currency"
    ACRONYM_SENTENCE_FINAL = "acronym_sentence_final"
    ABBREV_NUMBER = "abbrev_number"
    ABBREV_COMPANY_LTD = "abbrev_company_ltd"
    ABBREV_LOWER = "abbrev_lower"
    ABBREV_UPPER = "abbrev_upper"
    ACRONYM = "acronym"
    FILENAME = "filename"
    WORD_PERIOD = "word_period"
    PHONE = "phone"
    DOUBLE_QUOTE = "double_quote"
    DUCK_FEET = "duck_feet"
    OPEN_PAREN = "open_paren"
    CLOSE_PAREN = "close_paren"
    OPEN_BRACE = "open_brace"
    CLOSE_BRACE = "close_brace"
    OPEN_BRACKET = "open_bracket"
    CLOSE_BRACKET = "close_bracket"
    ANGLE_BRACKET = "angle_bracket"
    HYPHENS = "hyphens"
    ELLIPSIS = "ellipsis"
    FOOTNOTE_MARKS = "footnote_marks"
    ASTERISKS = "asterisks"
    INSENTENCE_PUNCT = "insentence_punct"
    BANG_QUESTION = "bang_question"
    SENTENCE_PUNCT = "sentence_punct"
    EQUALS = "equals"
    SLASH = "slash"
    HTHING = "hthing"
    THING = "thing"
    THINGA = "thinga"
    REDAUX = "redaux"
    SREDAUX = "sredaux"
    QUOTES = "quotes"
    SMILEY = "smiley"
    ASIAN_SMILEY = "asian_smiley"
    WHITESPACE = "whitespace"
    NEWLINE = "newline"
    AMPERSAND = "ampersand"
    MISC_SYMBOL = "misc_symbol"
    BULLET = "bullet"
    FALLBACK = "fallback"


# soft hyphen, word joiner and combining marks count as letters
MARKS = (
    "\u00AD\u2060\u0300-\u036F\u0483-\u0487\u0591-\u05BD\u05BF\u05C1\u05C2"
    "\u05C4\u05C5\u05C7\u0610-\u061A\u064B-\u065F\u0670\u06D6-\u06DC"
    "\u06DF-\u06E4\u06E7\u06E8\u06EA-\u06ED\u0900-\u0903\u093A-\u094F"
    "\u0951-\u0957\u0962\u0963\u0981-\u0983\u09BC-\u09CD\u0E31\u0E34-\u0E3A"
    "\u0E47-\u0E4E"
)
LETTER = rf"(?:[^\W\d_]|[{MARKS}]|&[aeiouAEIOU](?:acute|grave|uml);)"
ALNUM = rf"(?:[^\W_]|[{MARKS}])"
SPACE_CHARS = " \t\u00A0\u2000-\u200A\u3000"
NEWLINE_CHARS = "\r\n\u2028\u2029\u000b\u000c\u0085"
SPACENL = f"[{SPACE_CHARS}{NEWLINE_CHARS}]"
HYPHEN = "[-_\u058A\u2010\u2011]"
APOS = lexicon.APOS

ACRO = (
    r"(?:Canada|Sino|Korean|EU|Japan|non)-U\.S"
    r"|U\.S\.-(?:U\.K|U\.S\.S\.R)"
    r"|[A-Za-z](?:\.[A-Za-z])+"
)
WORD = rf"{LETTER}(?:{LETTER}|\d)*"
HTHING = (
    rf"(?:{LETTER}|\d)(?:{ALNUM}|[.,])*"
    rf"(?:-(?:{ALNUM}+(?:\.{LETTER})?|(?:{ACRO})\.))+"
)
THING = (
    rf"(?:[dDoOlL]{APOS}[^\W_])?[^\W_]+"
    rf"(?:{HYPHEN}(?:[dDoOlL]{APOS}[^\W_])?[^\W_]+)*"
)
THINGA = r"[A-Z]+(?:(?:[+&]|&amp;)[A-Z]+)+"
INSENTP = "[,;:\u3001]"
QUOTE_CHARS = "`\u2018-\u201F\u0082\u0084\u0091-\u0094\u2039\u203A\u00AB\u00BB"
MISC_SYMBOLS = (
    "+%&~^|\\\\\u00A6\u00A7\u00A8\u00A9\u00AC\u00AE\u00AF\u00B0-\u00BA\u00D7"
    "\u00F7\u0387\u05BE\u05C0\u05C3\u05C6\u05F3\u05F4\u0600-\u0603\u0606-\u060A"
    "\u060C\u0614\u061B\u061E\u066A\u066D\u0703-\u070D\u07F6-\u07F8\u0964"
    "\u0965\u0E4F\u1FBD\u2016\u2017\u2020-\u2023\u2030-\u2038\u203B"
    "\u203E-\u2042\u2044\u207A-\u207F\u208A-\u208E\u2100-\u214F\u2190-\u21FF"
    "\u2200-\u2BFF\u3012\u30FB\uFF01-\uFF0F\uFF1A-\uFF20\uFF3B-\uFF40"
    "\uFF5B-\uFF65"
)


def _alternation(entries: tuple[str, ...]) -> str:
    return "|".join(entries)


STARTER = _alternation(lexicon.SENTENCE_STARTERS)
TITLE = _alternation(lexicon.ABBREV_TITLES + lexicon.ABBREV_UPPER_MISC)
EXTENSION = _alternation(lexicon.FILENAME_EXTENSIONS)


def _not_strict(options: TokenizerOptions) -> bool:
    return not options.strict_treebank3


def _strict(options: TokenizerOptions) -> bool:
    return options.strict_treebank3


def _markup(options: TokenizerOptions) -> bool:
    return options.markup_tags


def _assimilations(options: TokenizerOptions) -> bool:
    return options.split_assimilations


@dataclass(frozen=True, slots=True)
class Rule:
    """A compiled pattern tagged with its kind.

    Attributes
    ----------
    kind : RuleKind
        Category assigned to text the pattern matches.
    pattern : re.Pattern[str]
        Compiled pattern, anchored at the match position.
    when : Callable[[TokenizerOptions], bool] | None
        Predicate enabling the rule for a configuration; always enabled
        when None.
    """

    kind: RuleKind
    pattern: re.Pattern[str]
    when: Callable[[TokenizerOptions], bool] | None = None

    def enabled(self, options: TokenizerOptions) -> bool:
        """Return whether the rule applies under ``options``."""
        return self.when is None or self.when(options)


@dataclass(frozen=True, slots=True)
class RuleMatch:
    """Outcome of matching the rule table at one position.

    Attributes
    ----------
    kind : RuleKind
        Winning rule kind.
    length : int
        Number of characters consumed.
    split : int | None
        Offset, relative to the match start, where a two-part token is
        divided; None for single tokens.
    suffix : str
        Text appended to the canonical form of the token without being
        consumed (the period of a sentence-final abbreviation).
    """

    kind: RuleKind
    length: int
    split: int | None = None
    suffix: str = ""


def _rule(
    kind: RuleKind,
    pattern: str,
    when: Callable[[TokenizerOptions], bool] | None = None,
) -> Rule:
    return Rule(kind, re.compile(pattern, re.DOTALL), when)


RULES: tuple[Rule, ...] = (
    _rule(RuleKind.SGML, r"</?[A-Za-z!?][^>\r\n]*>", _markup),
    _rule(RuleKind.SPMDASH, "&(?:MD|mdash|ndash);|[\u0096\u0097\u2013\u2014\u2015]"),
    _rule(RuleKind.SPAMP, "&amp;"),
    _rule(RuleKind.SPPUNC, r"&(?:HT|TL|UR|LR|QC|QL|QR|odq|cdq|#\d+);"),
    _rule(
        RuleKind.TBSPEC,
        r"-(?:RRB|LRB|RCB|LCB|RSB|LSB)-"
        r"|(?i:C\.D\.s|pro-|anti-|S(?:&|&amp;)P-500|S(?:&|&amp;)Ls"
        rf"|Cap{APOS}n|c{APOS}est)",
    ),
    _rule(
        RuleKind.SUBSUPNUM,
        "[\u207A\u207B\u208A\u208B]?"
        "(?:[\u2070\u00B9\u00B2\u00B3\u2074-\u2079]+|[\u2080-\u2089]+)",
    ),
    _rule(RuleKind.UNICODE_FRACTION, "[\u00BC\u00BD\u00BE\u2153-\u215E]"),
    _rule(
        RuleKind.ASSIMILATION,
        rf"(?i:{_alternation(tuple(p for p, _ in lexicon.ASSIMILATIONS))})"
        r"(?![^\W\d_])",
        _assimilations,
    ),
    _rule(
        RuleKind.NEGATION,
        rf"(?P<head>[A-Za-z\u00AD]*[A-MO-Za-mo-z\u00AD])(?P<tail>{lexicon.NEGATION})"
        r"(?![A-Za-z])",
    ),
    _rule(
        RuleKind.CLITIC,
        rf"(?P<head>{WORD})(?P<tail>{lexicon.CLITICS})(?![A-Za-z])",
    ),
    _rule(RuleKind.WORD, WORD),
    _rule(RuleKind.APOWORD, _alternation(lexicon.APOSTROPHE_WORDS)),
    _rule(RuleKind.FULL_URL, r"https?://[^\s\"<>|()]+[^\s\"<>|.!?(){},\-]"),
    _rule(
        RuleKind.LIKELY_URL,
        r"(?:www\.(?:[^\s\"<>|.!?(){},]+\.)+[a-zA-Z]{2,4}"
        r"|(?:[^\s\"`'<>|.!?(){},\-_$]+\.)+(?:com|net|org|edu))(?![A-Za-z0-9])"
        r"(?:/[^\s\"<>|()]+[^\s\"<>|.!?(){},\-])?",
    ),
    _rule(
        RuleKind.EMAIL,
        r"[a-zA-Z0-9][^\s\"<>|()]*@(?:[^\s\"<>|().,;:!?']+\.)*[^\s\"<>|().,;:!?']+",
    ),
    _rule(RuleKind.TWITTER, rf"@[a-zA-Z_][a-zA-Z_0-9]*|#{WORD}"),
    _rule(RuleKind.DATE, r"\d{1,2}[\-/]\d{1,2}[\-/]\d{2,4}"),
    _rule(RuleKind.NUMBER, "[\\-+]?(?:\\d*(?:[.:,\u00AD\u066B\u066C]\\d+)+|\\d+)"),
    _rule(
        RuleKind.FRACTION,
        "(?:\\d{1,4}[\\- \u00A0])?\\d{1,4}(?:\\\\?/|\u2044)\\d{1,4}",
        _not_strict,
    ),
    _rule(
        RuleKind.FRACTION,
        "(?:\\d{1,4}-)?\\d{1,4}(?:\\\\?/|\u2044)\\d{1,4}",
        _strict,
    ),
    _rule(RuleKind.TBSPEC2, rf"{APOS}\d\d"),
    _rule(RuleKind.DOLLAR, r"[A-Z]*\$|#"),
    _rule(RuleKind.CURRENCY, f"[{lexicon.CURRENCY_SIGNS}]"),
    _rule(
        RuleKind.ACRONYM_SENTENCE_FINAL,
        rf"(?:{ACRO})\.(?={SPACENL}(?:{STARTER}){SPACENL})",
    ),
    _rule(
        RuleKind.ABBREV_NUMBER,
        rf"(?i:{_alternation(lexicon.ABBREV_BEFORE_NUMBER)})\.(?={SPACENL}?\d)",
    ),
    _rule(
        RuleKind.ABBREV_COMPANY_LTD,
        rf"(?i:pt[ey]|co)\.(?=[{SPACE_CHARS}](?i:ltd|lim))",
    ),
    _rule(RuleKind.ABBREV_LOWER, rf"(?i:{_alternation(lexicon.ABBREV_LOWER)})\."),
    _rule(
        RuleKind.ABBREV_UPPER,
        rf"(?:{ACRO}|(?i:{TITLE})|[A-Za-z])\.",
    ),
    _rule(RuleKind.ACRONYM, rf"(?:{ACRO})(?={SPACENL}|\Z)"),
    _rule(
        RuleKind.FILENAME,
        rf"[^\W_]+(?:[\-~.!_/#][^\W_]+)*\.(?:{EXTENSION})"
        rf"(?=[{SPACE_CHARS}.?!,\"'<()]|\Z)",
    ),
    _rule(RuleKind.WORD_PERIOD, rf"{WORD}\.(?={INSENTP})"),
    _rule(
        RuleKind.PHONE,
        "(?:\\(\\d{3}\\)[ \u00A0]?"
        "|(?:\\+\\+?)?(?:\\d{2,4}[\\- \u00A0])?\\d{2,4}[\\- \u00A0/])"
        "\\d{3,4}[\\- \u00A0]?\\d{3,5}"
        "|(?:(?:\\+\\+?)?\\d{2,4}\\.)?\\d{2,4}\\.\\d{3,4}\\.\\d{3,5}",
    ),
    _rule(RuleKind.DOUBLE_QUOTE, r"\"|&quot;"),
    _rule(RuleKind.DUCK_FEET, r"<<|>>"),
    _rule(RuleKind.OPEN_PAREN, r"\("),
    _rule(RuleKind.CLOSE_PAREN, r"\)"),
    _rule(RuleKind.OPEN_BRACE, r"\{"),
    _rule(RuleKind.CLOSE_BRACE, r"\}"),
    _rule(RuleKind.OPEN_BRACKET, r"\["),
    _rule(RuleKind.CLOSE_BRACKET, r"\]"),
    _rule(RuleKind.ANGLE_BRACKET, r"[<>]|&lt;|&gt;"),
    _rule(RuleKind.HYPHENS, "-+|[\u058A\u2010\u2011]"),
    _rule(RuleKind.ELLIPSIS, "\\.{3,}|(?:\\.[ \u00A0]){2,4}\\.|\u2026"),
    _rule(RuleKind.FOOTNOTE_MARKS, r"@+|#+|_+"),
    _rule(RuleKind.ASTERISKS, r"\*+|(?:\\\*){1,3}"),
    _rule(RuleKind.INSENTENCE_PUNCT, INSENTP),
    _rule(RuleKind.BANG_QUESTION, r"[?!]+"),
    _rule(
        RuleKind.SENTENCE_PUNCT,
        "[.\u00A1\u00BF\u037E\u0589\u061F\u06D4\u0700-\u0702\u07FA\u3002]",
    ),
    _rule(RuleKind.EQUALS, "="),
    _rule(RuleKind.SLASH, "/"),
    _rule(RuleKind.HTHING, rf"{HTHING}(?:\.(?={INSENTP}))?"),
    _rule(RuleKind.THING, rf"{THING}(?:\.(?={INSENTP}))?"),
    _rule(RuleKind.THINGA, rf"{THINGA}(?:\.(?={INSENTP}))?"),
    _rule(RuleKind.REDAUX, rf"{lexicon.CLITICS}(?![A-Za-z])"),
    _rule(RuleKind.SREDAUX, lexicon.NEGATION),
    _rule(RuleKind.QUOTES, rf"(?:{APOS}|&quot;|[{QUOTE_CHARS}]){{1,2}}"),
    _rule(
        RuleKind.SMILEY,
        r"[<>]?[:;=][\-o*']?[()DPdpO\\{@|\[\]](?![A-Za-z])",
    ),
    _rule(
        RuleKind.ASIAN_SMILEY,
        r"[\^x=~<>]\.[\^x=~<>]"
        r"|[\-\^x=~<>']_[\-\^x=~<>']"
        r"|\([\-\^x=~<>'][_.]?[\-\^x=~<>']\)",
    ),
    _rule(
        RuleKind.WHITESPACE,
        f"[{SPACE_CHARS}\u200B\u200E\u200F\uFEFF\x00\x7f]+|&nbsp;",
    ),
    _rule(RuleKind.NEWLINE, f"\r\n|[{NEWLINE_CHARS}]"),
    _rule(RuleKind.AMPERSAND, "&"),
    _rule(RuleKind.MISC_SYMBOL, f"[{MISC_SYMBOLS}]"),
    _rule(RuleKind.BULLET, "[\u0095\u2022]"),
)

_FALLBACK = RuleMatch(RuleKind.FALLBACK, 1)
_TRAILING_SPACE = re.compile(r"\s*\Z")


def _ends_sentence(buffer: str, end: int, at_eof: bool) -> bool:
    """Decide whether a period at ``end - 1`` closes a sentence.

    True at the end of input, or when whitespace follows that is itself
    followed by the end of input, more whitespace, an upper case letter
    or markup.
    """
    following = buffer[end : end + 2]
    if not following:
        return at_eof
    if not following[0].isspace():
        return False
    if len(following) < 2:
        return at_eof
    second = following[1]
    return second.isspace() or second.isupper() or second == "<"


def _ends_input(buffer: str, end: int, at_eof: bool) -> bool:
    """Return whether only whitespace follows ``end`` up to the end of input."""
    return at_eof and _TRAILING_SPACE.match(buffer, end) is not None


def _assimilation_split(text: str) -> int:
    """Return the split offset of an informal form such as ``gonna``."""
    for pattern, size in _ASSIMILATION_PATTERNS:
        if pattern.fullmatch(text):
            return size if size > 0 else len(text) + size
    raise ValueError(f"Not an assimilation: {text!r}")


_ASSIMILATION_PATTERNS: tuple[tuple[re.Pattern[str], int], ...] = tuple(
    (re.compile(pattern, re.IGNORECASE), size)
    for pattern, size in lexicon.ASSIMILATIONS
)


def match_rule(
    buffer: str,
    pos: int,
    options: TokenizerOptions,
    at_eof: bool = True,
) -> RuleMatch:
    """Return the winning rule match at ``pos``.

    Parameters
    ----------
    buffer : str
        Text being scanned.
    pos : int
        Position to match at; must be inside ``buffer``.
    options : TokenizerOptions
        Options enabling or disabling individual rules.
    at_eof : bool
        Whether ``buffer`` ends where the input ends. Lookahead that runs
        off a buffer which is not at end of input is treated as unknown.

    Returns
    -------
    RuleMatch
        Longest match, earliest rule on ties; ``FALLBACK`` of length one
        when no rule matches.

    Examples
    --------
    >>> from ptbtok.config.options import TokenizerOptions
    >>> match_rule("gonna go", 0, TokenizerOptions()).split
    3
    """
    best: re.Match[str] | None = None
    best_rule: Rule | None = None
    for rule in RULES:
        if not rule.enabled(options):
            continue
        match = rule.pattern.match(buffer, pos)
        if match is None or match.end() == pos:
            continue
        if best is None or match.end() > best.end():
            best = match
            best_rule = rule

    if best is None or best_rule is None:
        return _FALLBACK

    kind = best_rule.kind
    length = best.end() - pos

    if kind in (RuleKind.NEGATION, RuleKind.CLITIC):
        return RuleMatch(kind, length, split=best.start("tail") - pos)
    if kind is RuleKind.ASSIMILATION:
        return RuleMatch(kind, length, split=_assimilation_split(best.group()))

    if kind is RuleKind.ACRONYM_SENTENCE_FINAL:
        return _sentence_final(RuleKind.ACRONYM, best.group(), length, options)
    if kind is RuleKind.ABBREV_LOWER and _ends_sentence(buffer, best.end(), at_eof):
        return _sentence_final(kind, best.group(), length, options)
    if (
        kind is RuleKind.ABBREV_UPPER
        and best.group().count(".") > 1
        and _ends_input(buffer, best.end(), at_eof)
    ):
        # dotted acronyms give back their period only at the end of input
        return _sentence_final(RuleKind.ACRONYM, best.group(), length, options)

    return RuleMatch(kind, length)


def _sentence_final(
    kind: RuleKind, text: str, length: int, options: TokenizerOptions
) -> RuleMatch:
    """Give back the period of a sentence-final abbreviation.

    The abbreviation keeps its period in canonical form unless
    ``strict_treebank3`` is set; ``U.S.`` keeps it in both modes.
    """
    keep_period = not options.strict_treebank3 or text == "U.S."
    return RuleMatch(kind, length - 1, suffix="." if keep_period else "")
