"""Turn space-separated PTB tokens back into readable text.

The conversion is a fixed list of regular expression rewrites applied in
order. It is a best effort: PTB tokenization loses information, so the
result reads naturally but is not guaranteed to match the text that was
tokenized.

Examples
--------
>>> ptb_to_text("I ca n't believe they wan na keep 40 % of that .")
"I can't believe they wanna keep 40% of that."
"""

from __future__ import annotations

import re
from collections.abc import Iterable

BRACKETS: tuple[tuple[str, str], ...] = (
    ("-LRB-", "("),
    ("-RRB-", ")"),
    ("-LCB-", "{"),
    ("-RCB-", "}"),
    ("-LSB-", "["),
    ("-RSB-", "]"),
)

RULES: list[tuple[re.Pattern[str], str]] = [
    # double quotes attach to the text they enclose
    (re.compile(r"``\s*"), '"'),
    (re.compile(r"\s*''"), '"'),
    # contractions and clitics
    (re.compile(r" (n't|'(?:s|m|d|re|ve|ll))\b", re.IGNORECASE), r"\1"),
    (re.compile(r"\b(gon|wan) (na)\b", re.IGNORECASE), r"\1\2"),
    (re.compile(r"\b(gim|lem) (me)\b", re.IGNORECASE), r"\1\2"),
    (re.compile(r"\b(got) (ta)\b", re.IGNORECASE), r"\1\2"),
    # single quotes
    (re.compile(r"`\s*"), "'"),
    (re.compile(r"(\S) '(?=\s|$)"), r"\1'"),
    # closing punctuation attaches to the left
    (re.compile(r" ([.,!?;:%)\]}]|\.\.\.)"), r"\1"),
    # opening brackets and currency attach to the right
    (re.compile(r"([(\[{$]) "), r"\1"),
]

# three or more words joined by spaced hyphens
_HYPHEN_CHAIN = re.compile(r"\b\w+(?: - \w+){2,}\b")


def _join_hyphens(match: re.Match[str]) -> str:
    return match.group().replace(" - ", "-")


def ptb_to_text(text: str) -> str:
    """Convert a string of PTB tokens to plain text.

    Parameters
    ----------
    text : str
        Tokens separated by single spaces.

    Returns
    -------
    str
        Detokenized text.

    Examples
    --------
    >>> ptb_to_text("`` Luxembourg needs surface - to - air missiles . ''")
    '"Luxembourg needs surface-to-air missiles."'
    """
    for escaped, bracket in BRACKETS:
        text = text.replace(escaped, bracket)
    for pattern, replacement in RULES:
        text = pattern.sub(replacement, text)
    text = _HYPHEN_CHAIN.sub(_join_hyphens, text)
    return text.strip()


def tokens_to_text(tokens: Iterable[str]) -> str:
    """Join tokens with spaces and detokenize the result.

    Examples
    --------
    >>> tokens_to_text(["Hello", ",", "world", "!"])
    'Hello, world!'
    """
    return ptb_to_text(" ".join(tokens))
