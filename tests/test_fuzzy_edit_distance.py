# tests/test_fuzzy_edit_distance.py
from __future__ import annotations

import random
import string

import pytest
from rapidfuzz.distance import Levenshtein

from strings_fuzzy_comparator.fuzzy import levenshtein_distance


@pytest.mark.parametrize(
    "a, b, expected",
    [
        ("kitten", "sitting", 3),
        ("", "abc", 3),
        ("abc", "", 3),
        ("", "", 0),
        ("abc", "abc", 0),
        ("flaw", "lawn", 2),
        ("quick", "kwick", 2),
        ("hello", "goodbye", 7),
        ("Abc", "abc", 1),  # no case folding at this layer
    ],
)
def test_levenshtein_known_values(a, b, expected):
    assert levenshtein_distance(a, b) == expected


def test_levenshtein_matches_rapidfuzz_oracle():
    rng = random.Random(1234)
    alphabet = "abcde" + string.digits[:2]
    for _ in range(300):
        a = "".join(rng.choices(alphabet, k=rng.randint(0, 9)))
        b = "".join(rng.choices(alphabet, k=rng.randint(0, 9)))
        assert levenshtein_distance(a, b) == Levenshtein.distance(a, b), (a, b)


def test_levenshtein_symmetric_and_bounded():
    pairs = [("saturday", "sunday"), ("straße", "strasse"), ("a b", "b a")]
    for a, b in pairs:
        d = levenshtein_distance(a, b)
        assert d == levenshtein_distance(b, a)
        assert abs(len(a) - len(b)) <= d <= max(len(a), len(b))
