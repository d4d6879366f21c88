# tests/test_token.py
from __future__ import annotations

import pytest

from strings_fuzzy_comparator.token import tokenize

"""
Tests: token/tokenize.py

- lowercase + punctuation stripping without replacement
- whitespace runs collapse to a single separator
- leading/trailing separator and empty-input edge cases
"""


# ─────────────────────────────────────────────────────────────────────────────
# Basic normalization
# ─────────────────────────────────────────────────────────────────────────────

@pytest.mark.parametrize(
    "text, expected",
    [
        ("Hello,  World!", ["hello", "world"]),
        ("The Quick brown FOX", ["the", "quick", "brown", "fox"]),
        ("don't stop", ["dont", "stop"]),          # apostrophe removed, not split
        ("rose-gold", ["rosegold"]),                # hyphen removed, not split
        ("tab\tand\nnewline", ["tab", "and", "newline"]),
        ("room 101", ["room", "101"]),
        ("Ünïcödé Straße", ["ünïcödé", "straße"]),  # Unicode letters kept
        ("I ❤ python", ["i", "python"]),            # symbol dropped, spaces collapse
    ],
)
def test_tokenize_normalizes(text, expected):
    assert tokenize(text) == expected


def test_tokenize_keeps_duplicates_and_order():
    assert tokenize("b a b a") == ["b", "a", "b", "a"]


def test_tokenize_non_ascii_space_is_stripped_not_split():
    # U+00A0 is not ASCII whitespace: removed like punctuation
    assert tokenize("new\u00a0york") == ["newyork"]


# ─────────────────────────────────────────────────────────────────────────────
# Edge cases
# ─────────────────────────────────────────────────────────────────────────────

def test_tokenize_empty_string_gives_single_empty_token():
    assert tokenize("") == [""]


def test_tokenize_punctuation_only_gives_single_empty_token():
    assert tokenize("?!...") == [""]


def test_tokenize_leading_separator_gives_leading_empty_token():
    assert tokenize("  hello") == ["", "hello"]


def test_tokenize_trailing_separators_dropped():
    assert tokenize("hello   ") == ["hello"]
    assert tokenize("hello !") == ["hello"]


def test_tokenize_whitespace_only_gives_no_tokens():
    assert tokenize("   ") == []


def test_tokenize_rejects_none():
    with pytest.raises(TypeError):
        tokenize(None)  # type: ignore[arg-type]
