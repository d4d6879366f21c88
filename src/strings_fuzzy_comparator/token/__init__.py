# strings_fuzzy_comparator/token/__init__.py
"""
token.
=====

Does: Provide word tokenization for fuzzy comparison.
Exports: tokenize
Used by: fuzzy.comparator.
"""

from __future__ import annotations

from .tokenize import SEPARATOR, tokenize

__all__ = [
    "tokenize",
    "SEPARATOR",
]
