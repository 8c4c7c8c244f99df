"""
Bidirectional lexicon backed by prefix tries.

One trie per source language, both populated from the same entry list:
"calli" → "casa" in the nahuatl index, "casa" → "calli" in the spanish one.

Lookups are case-folded and exact. A proper prefix of an entry does not
resolve ("cual" misses when only "cualli" was inserted).
"""

from enum import Enum

from tlahtolli.core.vocabulary import Vocabulary, DEFAULT_VOCABULARY


class Language(str, Enum):
    NAHUATL = "na"
    SPANISH = "es"

    @property
    def other(self) -> "Language":
        return Language.SPANISH if self is Language.NAHUATL else Language.NAHUATL


class TrieNode:
    __slots__ = ("children", "translation")

    def __init__(self):
        self.children: dict[str, TrieNode] = {}
        self.translation: str | None = None  # set only on terminal nodes


class LexiconIndex:
    """Exact word/phrase lookup for one translation direction."""

    def __init__(self):
        self.root = TrieNode()
        self._size = 0

    def insert(self, word: str, translation: str) -> None:
        node = self.root
        for ch in word.lower():
            child = node.children.get(ch)
            if child is None:
                child = node.children[ch] = TrieNode()
            node = child
        if node.translation is None:
            self._size += 1
        node.translation = translation

    def search(self, word: str) -> str | None:
        node = self._walk(word.lower())
        if node is None:
            return None
        return node.translation

    def _walk(self, s: str) -> TrieNode | None:
        node = self.root
        for ch in s:
            node = node.children.get(ch)
            if node is None:
                return None
        return node

    def __contains__(self, word: str) -> bool:
        return self.search(word) is not None

    def __len__(self) -> int:
        return self._size


class Lexicon:
    """
    Both directions of the dictionary plus each side's vocabulary list.

    The vocabulary lists keep seed order (duplicates included) because the
    fuzzy matcher breaks ties by scanning order.
    """

    def __init__(self, vocabulary: Vocabulary):
        self._indices = {
            Language.NAHUATL: LexiconIndex(),
            Language.SPANISH: LexiconIndex(),
        }
        self._terms: dict[Language, tuple[str, ...]] = {}

        na_terms, es_terms = [], []
        for entry in vocabulary.entries:
            self._indices[Language.NAHUATL].insert(entry.source_word, entry.target_word)
            self._indices[Language.SPANISH].insert(entry.target_word, entry.source_word)
            na_terms.append(entry.source_word)
            es_terms.append(entry.target_word)

        self._terms[Language.NAHUATL] = tuple(na_terms)
        self._terms[Language.SPANISH] = tuple(es_terms)

    def index(self, lang: Language) -> LexiconIndex:
        return self._indices[Language(lang)]

    def vocabulary(self, lang: Language) -> tuple[str, ...]:
        return self._terms[Language(lang)]

    def search(self, word: str, lang: Language) -> str | None:
        return self.index(lang).search(word)


def build_lexicon(vocabulary: Vocabulary = DEFAULT_VOCABULARY) -> Lexicon:
    """Build both indices. Must complete before any concurrent lookup."""
    return Lexicon(vocabulary)
