# strings_fuzzy_comparator/fuzzy/edit_distance.py
from __future__ import annotations

"""
edit_distance.py

Does: Classic Levenshtein distance (unit-cost insert/delete/substitute) over a
      full (len(a)+1) x (len(b)+1) dynamic-programming table.
Returns: Non-negative int.
Used by: fuzzy.comparator for word-pair pruning and the residual check.
"""

__all__ = ["levenshtein_distance"]

__docformat__ = "google"


def levenshtein_distance(a: str, b: str) -> int:
    """
    Does: Minimum number of single-character edits turning `a` into `b`.
          Characters compare by raw equality; callers lowercase beforehand.
    Returns: Distance as int (len of the other string when one side is empty).
    """
    rows, cols = len(a) + 1, len(b) + 1
    table = [[0] * cols for _ in range(rows)]

    for i in range(1, rows):
        table[i][0] = i
    for j in range(1, cols):
        table[0][j] = j

    for i in range(1, rows):
        for j in range(1, cols):
            if a[i - 1] == b[j - 1]:
                table[i][j] = table[i - 1][j - 1]
            else:
                table[i][j] = 1 + min(
                    table[i - 1][j],      # deletion
                    table[i][j - 1],      # insertion
                    table[i - 1][j - 1],  # substitution
                )

    return table[rows - 1][cols - 1]
