"""Tests for edit distance and nearest-term matching."""

import pytest

from tlahtolli.core.fuzzy import FuzzyMatch, edit_distance, find_closest, threshold


@pytest.mark.parametrize("a, b, expected", [
    ("kitten", "sitting", 3),
    ("flaw", "lawn", 2),
    ("", "abc", 3),
    ("atl", "atl", 0),
    ("chichi", "chichis", 1),
])
def test_edit_distance(a, b, expected):
    assert edit_distance(a, b) == expected


def test_edit_distance_symmetric():
    pairs = [("xochitl", "xochitll"), ("miztli", "metztli"), ("", "tletl")]
    for a, b in pairs:
        assert edit_distance(a, b) == edit_distance(b, a)


def test_edit_distance_identity():
    for word in ["", "a", "tlazohtlaliztli"]:
        assert edit_distance(word, word) == 0


def test_threshold():
    assert threshold("") == 2
    assert threshold("atl") == 2
    assert threshold("abcdefghij") == 4
    assert threshold("tlazohtlaliztli") == 6


def test_accept_at_threshold():
    # 10 chars → threshold 4; four substitutions
    match = find_closest("wxyzefghij", ["abcdefghij"])
    assert match == FuzzyMatch("abcdefghij", 4)


def test_reject_past_threshold():
    assert find_closest("vwxyzfghij", ["abcdefghij"]) is None


def test_short_word_minimum_threshold():
    assert find_closest("xyl", ["atl"]) == FuzzyMatch("atl", 2)
    assert find_closest("xyz", ["atl"]) is None


def test_closest_wins():
    match = find_closest("xochitll", ["calli", "xochitl", "tletl"])
    assert match.term == "xochitl"
    assert match.distance == 1


def test_tie_keeps_first():
    assert find_closest("cesa", ["casa", "cosa"]).term == "casa"
    assert find_closest("cesa", ["cosa", "casa"]).term == "cosa"


def test_empty_vocabulary():
    assert find_closest("atl", []) is None
