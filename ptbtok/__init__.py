"""Penn Treebank style tokenization with exact source reconstruction.

Splits running text into Treebank tokens (escaped brackets, directional
quotes, split contractions) and can keep the original spelling, the
surrounding whitespace and the character offsets of every token so the
input is recoverable from the output.
"""

from __future__ import annotations

__version__ = "0.1.0"
