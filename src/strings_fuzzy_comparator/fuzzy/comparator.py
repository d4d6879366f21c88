# strings_fuzzy_comparator/fuzzy/comparator.py
from __future__ import annotations

"""
comparator.py

Does: Fuzzy equality of two texts tolerant of typos and word order:
      tokenize both, drop shared words, drop near-duplicate word pairs
      (distance ≤ ALLOWABLE_ONE_WORD_DISTANCE), then measure what is left.
Returns: compare() record, fuzzy_distance() int, is_fuzzy_equal() bool.
Used by: Deduplication / matching callers through the package facade.
"""

import logging
from typing import Optional, Sequence

from strings_fuzzy_comparator.token import SEPARATOR, tokenize
from strings_fuzzy_comparator.types import FuzzyComparison, Observer

from .edit_distance import levenshtein_distance

__all__ = [
    "ALLOWABLE_ONE_WORD_DISTANCE",
    "compare",
    "fuzzy_distance",
    "is_fuzzy_equal",
]

__docformat__ = "google"

# ── Logging ──────────────────────────────────────────────────────────────────
log = logging.getLogger(__name__)

# ── Tunables ─────────────────────────────────────────────────────────────────
ALLOWABLE_ONE_WORD_DISTANCE = 2  # max distance for two words to count as the same


# ─────────────────────────────────────────────────────────────────────────────
# Helpers
# ─────────────────────────────────────────────────────────────────────────────

def _require_text(value: object, name: str) -> str:
    if not isinstance(value, str):
        raise TypeError(f"{name} must be str, got {type(value).__name__}")
    return value


def _require_int(value: object, name: str) -> int:
    # bool is an int subclass; reject it so True/False never pass as 1/0
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be int, got {type(value).__name__}")
    return value


def _emit(observer: Optional[Observer], msg: str, *args: object) -> None:
    log.debug(msg, *args)
    if observer is not None:
        observer(msg % args if args else msg)


def _unique_words(words: Sequence[str], other: Sequence[str]) -> list[str]:
    """
    Does: Keep words (order and repeats preserved) whose value never occurs in `other`.
    """
    other_values = set(other)
    return [w for w in words if w not in other_values]


def _near_duplicates(
    unique_one: Sequence[str],
    unique_two: Sequence[str],
    word_distance: int,
) -> frozenset[str]:
    """
    Does: Compare every distinct value of one side with every distinct value
          of the other; collect both values of each pair within `word_distance`.
    Returns: Frozenset of values to drop from both sides.
    """
    matched: set[str] = set()
    for word_one in set(unique_one):
        for word_two in set(unique_two):
            if levenshtein_distance(word_one, word_two) <= word_distance:
                matched.add(word_one)
                matched.add(word_two)
    return frozenset(matched)


# ─────────────────────────────────────────────────────────────────────────────
# Public API
# ─────────────────────────────────────────────────────────────────────────────

def compare(
    string_one: str,
    string_two: str,
    *,
    word_distance: Optional[int] = None,
    observer: Optional[Observer] = None,
) -> FuzzyComparison:
    """Run the full comparison pipeline and keep every intermediate step.

    Shared words are removed first, so word order and common vocabulary never
    count. Each distinct leftover word is then compared with each distinct
    leftover word of the other text; pairs within ``word_distance`` are
    treated as typos of one another and removed (all occurrences). The
    survivors are joined with single spaces and their Levenshtein distance is
    the result.

    Args:
        string_one: First text.
        string_two: Second text.
        word_distance: Max per-word distance for near-duplicate pruning;
            None reads ALLOWABLE_ONE_WORD_DISTANCE at call time.
        observer: Optional callable receiving diagnostic lines.

    Returns:
        FuzzyComparison with tokens, survivors, pruned values and distance.

    Raises:
        TypeError: If a text is not a str or ``word_distance`` is not an int.
    """
    _require_text(string_one, "string_one")
    _require_text(string_two, "string_two")
    if word_distance is None:
        word_distance = ALLOWABLE_ONE_WORD_DISTANCE
    _require_int(word_distance, "word_distance")

    words_one = tokenize(string_one)
    words_two = tokenize(string_two)

    unique_one = _unique_words(words_one, words_two)
    unique_two = _unique_words(words_two, words_one)

    _emit(observer, "String 1: %r; Words: %s; Unique words 1: %s", string_one, words_one, unique_one)
    _emit(observer, "String 2: %r; Words: %s; Unique words 2: %s", string_two, words_two, unique_two)

    pruned = _near_duplicates(unique_one, unique_two, word_distance)
    if pruned:
        unique_one = [w for w in unique_one if w not in pruned]
        unique_two = [w for w in unique_two if w not in pruned]
        _emit(observer, "Near-duplicate words pruned (distance <= %d): %s", word_distance, sorted(pruned))

    residual_one = SEPARATOR.join(unique_one)
    residual_two = SEPARATOR.join(unique_two)
    distance = levenshtein_distance(residual_one, residual_two)

    _emit(observer, "Residual 1: %r; Residual 2: %r", residual_one, residual_two)
    _emit(observer, "Levenshtein distance: %d", distance)

    return FuzzyComparison(
        words_one=tuple(words_one),
        words_two=tuple(words_two),
        unique_words_one=tuple(unique_one),
        unique_words_two=tuple(unique_two),
        pruned=pruned,
        residual_one=residual_one,
        residual_two=residual_two,
        distance=distance,
    )


def fuzzy_distance(string_one: str, string_two: str) -> int:
    """
    Does: Residual Levenshtein distance after shared and near-duplicate words are removed.
    Returns: Non-negative int.
    """
    return compare(string_one, string_two).distance


def is_fuzzy_equal(
    string_one: str,
    string_two: str,
    allowable_distance: int,
    *,
    observer: Optional[Observer] = None,
) -> bool:
    """
    Does: Fuzzy equality: True iff the residual distance is ≤ `allowable_distance`
          (inclusive). A negative `allowable_distance` is accepted and never matches.
    Returns: Boolean.
    Raises: TypeError on non-str texts or non-int thresholds.
    """
    _require_int(allowable_distance, "allowable_distance")
    result = compare(string_one, string_two, observer=observer)
    return result.is_within(allowable_distance)
