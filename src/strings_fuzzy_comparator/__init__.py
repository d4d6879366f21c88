"""
strings_fuzzy_comparator
========================

Does: Root package initializer for the fuzzy string comparator.
Returns: Re-exports tokenize, levenshtein_distance and the fuzzy comparison API.
Used by: All callers importing from `strings_fuzzy_comparator`.
"""

from .fuzzy import (
    ALLOWABLE_ONE_WORD_DISTANCE,
    compare,
    fuzzy_distance,
    is_fuzzy_equal,
    levenshtein_distance,
)
from .token import tokenize
from .types import FuzzyComparison

__all__: list[str] = [
    "ALLOWABLE_ONE_WORD_DISTANCE",
    "FuzzyComparison",
    "compare",
    "fuzzy_distance",
    "is_fuzzy_equal",
    "levenshtein_distance",
    "tokenize",
]
__docformat__ = "google"
