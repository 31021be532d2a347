"""Word n-gram tokenizer.

Tokens are sliding windows of `n` whitespace-delimited words joined by single
spaces. Keeping a few words per token preserves some local context, which makes
the fingerprint less sensitive to common single words.
"""

from __future__ import annotations
from typing import List

from ..errors import InvalidArgumentError
from .schema import DEFAULT_NGRAM_SIZE


def check_ngram_size(n: int) -> int:
    if isinstance(n, bool) or not isinstance(n, int) or n < 1:
        raise InvalidArgumentError(f"ngram size must be a positive integer, got {n!r}")
    return n


def tokenize(text: str, n: int = DEFAULT_NGRAM_SIZE) -> List[str]:
    """Split `text` into overlapping word n-grams.

    Fewer than `n` words yields no tokens.
    """
    if text is None:
        raise InvalidArgumentError("text is required")
    if not isinstance(text, str):
        raise InvalidArgumentError(f"text must be str, got {type(text).__name__}")
    check_ngram_size(n)

    words = text.split()
    return [" ".join(words[i:i + n]) for i in range(len(words) - n + 1)]
