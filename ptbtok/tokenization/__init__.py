"""Penn Treebank tokenization and detokenization.

Examples
--------
>>> from ptbtok.tokenization import tokenize_words
>>> tokenize_words("The Iron Age (ca. 1300 BC).")
['The', 'Iron', 'Age', '-LRB-', 'ca.', '1300', 'BC', '-RRB-', '.']
"""

from __future__ import annotations

from ptbtok.tokenization.americanize import americanize
from ptbtok.tokenization.detokenizer import ptb_to_text, tokens_to_text
from ptbtok.tokenization.tokenizer import (
    PTBTokenizer,
    tokenize,
    tokenize_for_display,
    tokenize_words,
)
from ptbtok.tokenization.tokens import (
    DisplayToken,
    Token,
    TokenFactory,
    TokenizedText,
    display_token_factory,
    token_factory,
    word_factory,
)

__all__ = [
    "DisplayToken",
    "PTBTokenizer",
    "Token",
    "TokenFactory",
    "TokenizedText",
    "americanize",
    "display_token_factory",
    "ptb_to_text",
    "token_factory",
    "tokenize",
    "tokenize_for_display",
    "tokenize_words",
    "tokens_to_text",
    "word_factory",
]
