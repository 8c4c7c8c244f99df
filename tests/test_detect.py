"""Tests for source-language detection."""

import pytest

from tlahtolli.core.detect import detect_language, score_language
from tlahtolli.core.lexicon import Language, build_lexicon


@pytest.fixture(scope="module")
def lexicon():
    return build_lexicon()


def test_nahuatl_dictionary_hit(lexicon):
    assert detect_language("tlazocamati", lexicon) is Language.NAHUATL
    assert detect_language("TLACATL", lexicon) is Language.NAHUATL


def test_spanish_dictionary_hit(lexicon):
    assert detect_language("gracias", lexicon) is Language.SPANISH
    assert detect_language("Casa", lexicon) is Language.SPANISH


def test_whole_phrase_hit(lexicon):
    assert detect_language("cualli tonalli", lexicon) is Language.NAHUATL
    assert detect_language("buenos dias", lexicon) is Language.SPANISH


def test_heuristic_spanish(lexicon):
    assert detect_language("la verdad", lexicon) is Language.SPANISH


def test_heuristic_nahuatl(lexicon):
    assert detect_language("nocihuatzin", lexicon) is Language.NAHUATL


def test_tie_goes_to_nahuatl(lexicon):
    assert score_language("xyzabc") == {Language.NAHUATL: 1, Language.SPANISH: 1}
    assert detect_language("xyzabc", lexicon) is Language.NAHUATL
    assert detect_language("", lexicon) is Language.NAHUATL


def test_scores():
    scores = score_language("nocihuatzin")
    # tz, hua, z, plus ending "in"
    assert scores[Language.NAHUATL] == 5
    assert scores[Language.SPANISH] == 0


def test_patterns_count_once():
    assert score_language("tltltl")[Language.NAHUATL] == 3  # "tl" once + ending "tl"


def test_final_vowel_bonus():
    assert score_language("casa")[Language.SPANISH] == 0.5
    assert score_language("chihua")[Language.SPANISH] == 0
