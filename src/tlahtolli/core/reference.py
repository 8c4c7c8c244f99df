"""
Word-detail reference: definitions, etymology, examples.

Independent of the translation lexicon. A word may translate without a
detail entry and vice versa.
"""

import re
from typing import Mapping

from tlahtolli.core.vocabulary import Vocabulary, WordDetail, DEFAULT_VOCABULARY

PUNCTUATION = re.compile(r"[?,.!¡¿]")
MAX_RESULTS = 10


class LexicalReference:
    def __init__(self, details: Mapping[str, WordDetail]):
        self.details = details

    def lookup(self, word: str) -> WordDetail | None:
        """Exact headword lookup, retrying once without a plural "s"."""
        clean = PUNCTUATION.sub("", word.lower())

        detail = self.details.get(clean)
        if detail is not None:
            return detail

        if clean.endswith("s"):
            return self.details.get(clean[:-1])

        return None

    def search(self, query: str, limit: int = MAX_RESULTS) -> list[WordDetail]:
        """
        Case-insensitive substring search over headword, meaning and
        synonyms. Each entry appears at most once, in store order.
        """
        q = query.lower().strip()
        if not q:
            return []

        results = []
        for detail in self.details.values():
            if self._matches(detail, q):
                results.append(detail)

        return results[:limit]

    @staticmethod
    def _matches(detail: WordDetail, q: str) -> bool:
        if q in detail.word.lower():
            return True
        if q in detail.meaning.lower():
            return True
        return any(q in s.lower() for s in detail.synonyms)

    def __len__(self) -> int:
        return len(self.details)


def build_reference(vocabulary: Vocabulary = DEFAULT_VOCABULARY) -> LexicalReference:
    return LexicalReference(vocabulary.details)
