# strings_fuzzy_comparator/fuzzy/__init__.py
"""
fuzzy.

Does: Facade exposing the edit-distance metric and the word-level fuzzy
comparator built on top of it.

Returns: Public API for Levenshtein distance and fuzzy text equality.
Used by: Package root and callers doing deduplication or matching.
"""

from __future__ import annotations

# ── Comparator ───────────────────────────────────────────────────────────────
from .comparator import (
    ALLOWABLE_ONE_WORD_DISTANCE,
    compare,
    fuzzy_distance,
    is_fuzzy_equal,
)

# ── Edit distance ────────────────────────────────────────────────────────────
from .edit_distance import (
    levenshtein_distance,
)

__all__ = [
    # Comparator
    "ALLOWABLE_ONE_WORD_DISTANCE",
    "compare",
    "fuzzy_distance",
    "is_fuzzy_equal",
    # Edit distance
    "levenshtein_distance",
]

__docformat__ = "google"
