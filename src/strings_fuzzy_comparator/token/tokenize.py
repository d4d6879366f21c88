# strings_fuzzy_comparator/token/tokenize.py
"""
tokenize.

Does: Split free text into lowercase words: keep Unicode letters, ASCII digits
      and ASCII whitespace, drop everything else, collapse whitespace runs.
Returns: tokenize() → list of words in original order (duplicates kept).
Used by: fuzzy.comparator before shared/near-duplicate word removal.
"""

from __future__ import annotations

import re

__all__ = ["tokenize"]

__docformat__ = "google"

# ASCII-only whitespace: \s under re.ASCII is [ \t\n\r\f\v]
_WHITESPACE_CHARS = frozenset(" \t\n\r\f\v")
_WHITESPACE_RUN_RE = re.compile(r"\s+", re.ASCII)
_DIGITS = frozenset("0123456789")
SEPARATOR = " "


def _keep_char(ch: str) -> bool:
    return ch.isalpha() or ch in _DIGITS or ch in _WHITESPACE_CHARS


def tokenize(text: str) -> list[str]:
    """
    Does: Lowercase, strip punctuation/symbols (no replacement), collapse
          whitespace to one space, then split on spaces.
          A leading separator gives a leading "" token, trailing empty
          tokens are dropped, and text without any separator (including "")
          gives a one-element list.
    Returns: List of words.
    Raises: TypeError if `text` is not a str.
    """
    if not isinstance(text, str):
        raise TypeError(f"tokenize() expects str, got {type(text).__name__}")

    cleaned = "".join(ch for ch in text.lower() if _keep_char(ch))
    collapsed = _WHITESPACE_RUN_RE.sub(SEPARATOR, cleaned)

    words = collapsed.split(SEPARATOR)
    if len(words) > 1:
        while words and words[-1] == "":
            words.pop()
    return words
