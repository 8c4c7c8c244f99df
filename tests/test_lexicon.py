"""Tests for the trie-backed bilingual lexicon."""

import pytest

from tlahtolli.core.lexicon import Language, Lexicon, LexiconIndex, build_lexicon
from tlahtolli.core.vocabulary import SEED_ENTRIES, Vocabulary


@pytest.fixture
def lexicon():
    return build_lexicon()


@pytest.fixture
def index():
    idx = LexiconIndex()
    idx.insert("cualli", "bueno")
    idx.insert("calli", "casa")
    return idx


def test_search_exact(index):
    assert index.search("cualli") == "bueno"
    assert index.search("calli") == "casa"


def test_search_case_insensitive(index):
    assert index.search("CUALLI") == "bueno"
    index.insert("Tonatiuh", "sol")
    assert index.search("tonatiuh") == "sol"


def test_search_prefix_not_found(index):
    assert index.search("cual") is None
    assert index.search("c") is None
    assert index.search("") is None


def test_search_longer_not_found(index):
    assert index.search("cuallis") is None


def test_insert_overwrites(index):
    index.insert("calli", "hogar")
    assert index.search("calli") == "hogar"
    assert len(index) == 2


def test_contains(index):
    assert "calli" in index
    assert "cal" not in index


def test_every_nahuatl_entry_resolves(lexicon):
    for word, translation in SEED_ENTRIES:
        assert lexicon.search(word, Language.NAHUATL) == translation


def test_every_spanish_entry_resolves(lexicon):
    # later duplicates win: "perro" maps to the last nahuatl synonym
    expected = {}
    for word, translation in SEED_ENTRIES:
        expected[translation] = word

    for translation, word in expected.items():
        assert lexicon.search(translation, Language.SPANISH) == word


def test_synonyms_resolve_independently(lexicon):
    assert lexicon.search("chichi", Language.NAHUATL) == "perro"
    assert lexicon.search("itzcuintli", Language.NAHUATL) == "perro"
    assert lexicon.search("perro", Language.SPANISH) == "itzcuintli"


def test_phrase_entry(lexicon):
    assert lexicon.search("cualli tonalli", Language.NAHUATL) == "buenos dias"
    assert lexicon.search("cualli", Language.NAHUATL) is None


def test_index_sizes(lexicon):
    assert len(lexicon.index(Language.NAHUATL)) == 24
    assert len(lexicon.index(Language.SPANISH)) == 23


def test_vocabulary_keeps_seed_order(lexicon):
    na = lexicon.vocabulary(Language.NAHUATL)
    es = lexicon.vocabulary(Language.SPANISH)

    assert na[0] == "pialli"
    assert na[-1] == "tlacatl"
    assert len(na) == len(SEED_ENTRIES)
    # duplicates kept
    assert es.count("perro") == 2


def test_index_accepts_language_code(lexicon):
    assert lexicon.index("na") is lexicon.index(Language.NAHUATL)


def test_custom_vocabulary():
    vocab = Vocabulary.build([("ce", "uno"), ("ome", "dos")], {})
    lex = Lexicon(vocab)

    assert lex.search("ome", Language.NAHUATL) == "dos"
    assert lex.search("uno", Language.SPANISH) == "ce"
    assert lex.search("calli", Language.NAHUATL) is None


def test_language_other():
    assert Language.NAHUATL.other is Language.SPANISH
    assert Language.SPANISH.other is Language.NAHUATL
