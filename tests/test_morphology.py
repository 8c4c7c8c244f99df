"""Tests for nahuatl affix stripping."""

from tlahtolli.core.morphology import candidate_roots


def test_prefix_then_suffix_then_both():
    assert candidate_roots("nocalli") == ["calli", "nocal", "cal"]


def test_longer_prefix():
    assert candidate_roots("amotlalli") == ["tlalli", "amotlal", "tlal"]


def test_plural_suffix():
    assert candidate_roots("chichis") == ["chichi"]


def test_multiple_suffixes_in_order():
    # ends with both "tli" and "li"
    assert candidate_roots("nantli") == ["nan", "nant"]


def test_lowercases():
    assert candidate_roots("NOCALLI") == ["calli", "nocal", "cal"]


def test_no_affixes():
    assert candidate_roots("atl") == ["a"]
    assert candidate_roots("xyz") == []
    assert candidate_roots("") == []


def test_duplicates_kept():
    assert candidate_roots("inin") == ["nin", "in", "in", "n", ""]


def test_overlapping_affixes_give_empty():
    # prefix "in" and suffix "in" cover the same two characters
    assert candidate_roots("in") == ["n", "", "", "", ""]
    for root in candidate_roots("ti"):
        assert root == ""
