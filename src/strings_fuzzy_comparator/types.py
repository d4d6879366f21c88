# strings_fuzzy_comparator/types.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

"""
types.py.

Does: Define the comparison result record and the diagnostic observer
type shared by the fuzzy comparator and its callers.
"""

# Receives one formatted diagnostic line per intermediate step.
Observer = Callable[[str], None]


@dataclass(frozen=True)
class FuzzyComparison:
    """Intermediate and final state of one fuzzy comparison.

    Attributes:
        words_one: Tokens of the first text, in order.
        words_two: Tokens of the second text, in order.
        unique_words_one: Tokens of the first text left after removing shared
            words and near-duplicate words.
        unique_words_two: Same for the second text.
        pruned: Word values removed as near-duplicates.
        residual_one: ``unique_words_one`` joined by single spaces.
        residual_two: ``unique_words_two`` joined by single spaces.
        distance: Levenshtein distance between the two residual strings.
    """

    words_one: tuple[str, ...]
    words_two: tuple[str, ...]
    unique_words_one: tuple[str, ...]
    unique_words_two: tuple[str, ...]
    pruned: frozenset[str]
    residual_one: str
    residual_two: str
    distance: int

    def is_within(self, allowable_distance: int) -> bool:
        """Return True if the residual distance is at most ``allowable_distance``."""
        return self.distance <= allowable_distance


__all__ = ["FuzzyComparison", "Observer"]

__docformat__ = "google"
