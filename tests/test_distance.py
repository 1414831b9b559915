import pytest
from rapidfuzz.distance import Levenshtein

from brand_check.brand.distance import levenshtein

WORDS = ["", "a", "nike", "nikee", "adidas", "puma", "kitten", "sitting", "nestlé", "nestle", "東京", "東京都"]


def test_known_distances():
    assert levenshtein("kitten", "sitting") == 3
    assert levenshtein("nike", "nikee") == 1
    assert levenshtein("nikex", "nike") == 1
    assert levenshtein("flaw", "lawn") == 2


def test_empty_inputs():
    assert levenshtein("", "") == 0
    assert levenshtein("", "nike") == 4
    assert levenshtein("nike", "") == 4


def test_case_sensitive():
    assert levenshtein("Nike", "nike") == 1


def test_counts_code_points():
    assert levenshtein("nestlé", "nestle") == 1
    assert levenshtein("東京", "東京都") == 1


@pytest.mark.parametrize("a", WORDS)
def test_identity(a):
    assert levenshtein(a, a) == 0


@pytest.mark.parametrize("a", WORDS)
@pytest.mark.parametrize("b", WORDS)
def test_symmetry_and_reference(a, b):
    assert levenshtein(a, b) == levenshtein(b, a)
    assert levenshtein(a, b) == Levenshtein.distance(a, b)


def test_triangle_inequality():
    for a in WORDS:
        for b in WORDS:
            for c in WORDS:
                assert levenshtein(a, c) <= levenshtein(a, b) + levenshtein(b, c)
