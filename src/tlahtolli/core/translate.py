"""
Translation pipeline.

Each token runs through an ordered list of strategies and the first that
resolves wins:

    exact  → 1.0   direct dictionary hit
    root   → 0.85  affix-stripped form hits (nahuatl source only)
    fuzzy  → 0.6   nearest term by edit distance, marked with "?"
    none   → 0.0   original kept in brackets

Overall confidence is the mean per-token score; the reported match type is
the most frequent one, ties going to the earlier type above.
"""

import logging
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Protocol

from tlahtolli.core.detect import detect_language
from tlahtolli.core.fuzzy import find_closest
from tlahtolli.core.lexicon import Language, Lexicon, build_lexicon
from tlahtolli.core.morphology import candidate_roots
from tlahtolli.core.reference import LexicalReference, build_reference
from tlahtolli.core.vocabulary import WordDetail

logger = logging.getLogger(__name__)

TOKEN_SEPARATORS = re.compile(r"[\s,.;?¿!¡]+")


class Direction(str, Enum):
    AUTO = "auto"
    NA_ES = "na-es"
    ES_NA = "es-na"


class MatchType(str, Enum):
    # declaration order is the tie-break order
    EXACT = "exact"
    ROOT = "root"
    FUZZY = "fuzzy"
    NONE = "none"


@dataclass(frozen=True)
class WordMatch:
    token: str
    text: str
    confidence: float
    match_type: MatchType

    def to_dict(self) -> dict:
        return {
            "token": self.token,
            "text": self.text,
            "confidence": self.confidence,
            "match_type": self.match_type.value,
        }


@dataclass(frozen=True)
class TranslationResult:
    original_text: str
    translated_text: str
    detected_language: Language
    target_language: Language
    confidence: float
    match_type: MatchType
    words: tuple[WordMatch, ...] = field(default=())

    def to_dict(self) -> dict:
        return {
            "original_text": self.original_text,
            "translated_text": self.translated_text,
            "detected_language": self.detected_language.value,
            "target_language": self.target_language.value,
            "confidence": self.confidence,
            "match_type": self.match_type.value,
            "words": [w.to_dict() for w in self.words],
        }


class HistorySink(Protocol):
    def record_translation(
        self,
        session_id: str | None,
        original: str,
        translated: str,
        source_lang: str,
        target_lang: str,
        confidence: float,
    ): ...


# === Strategies ===

class ExactStrategy:
    match_type = MatchType.EXACT
    confidence = 1.0

    def __init__(self, lexicon: Lexicon, source: Language):
        self.index = lexicon.index(source)

    def attempt(self, token: str, word: str) -> WordMatch | None:
        translation = self.index.search(word)
        if translation is None:
            return None
        return WordMatch(token, translation, self.confidence, self.match_type)


class RootStrategy:
    match_type = MatchType.ROOT
    confidence = 0.85

    def __init__(self, lexicon: Lexicon, source: Language):
        self.index = lexicon.index(source)

    def attempt(self, token: str, word: str) -> WordMatch | None:
        for root in candidate_roots(word):
            translation = self.index.search(root)
            if translation is not None:
                logger.debug("root %r -> %r", word, root)
                return WordMatch(token, translation, self.confidence, self.match_type)
        return None


class FuzzyStrategy:
    match_type = MatchType.FUZZY
    confidence = 0.6
    marker = "?"

    def __init__(self, lexicon: Lexicon, source: Language):
        self.index = lexicon.index(source)
        self.vocabulary = lexicon.vocabulary(source)

    def attempt(self, token: str, word: str) -> WordMatch | None:
        match = find_closest(word, self.vocabulary)
        if match is None:
            return None
        translation = self.index.search(match.term)
        if translation is None:
            return None
        logger.debug("fuzzy %r -> %r (distance %d)", word, match.term, match.distance)
        return WordMatch(token, translation + self.marker, self.confidence, self.match_type)


def unresolved(token: str) -> WordMatch:
    return WordMatch(token, f"[{token}]", 0.0, MatchType.NONE)


def tokenize(text: str) -> list[str]:
    """Split on whitespace and punctuation, dropping empty pieces."""
    return [t for t in TOKEN_SEPARATORS.split(text) if t]


def dominant_match_type(words) -> MatchType:
    counts = {t: 0 for t in MatchType}
    for w in words:
        counts[w.match_type] += 1

    dominant = MatchType.NONE
    best = -1
    for match_type, count in counts.items():
        if count > best:
            dominant, best = match_type, count
    return dominant


# === Translator ===

class Translator:
    """
    Entry point for translation and word lookups.

    Lexicon and reference are built before construction and only read
    afterwards, so one instance can serve concurrent requests.
    """

    def __init__(
        self,
        lexicon: Lexicon,
        reference: LexicalReference,
        sink: HistorySink | None = None,
    ):
        self.lexicon = lexicon
        self.reference = reference
        self.sink = sink
        self._strategies = {
            Language.NAHUATL: (
                ExactStrategy(lexicon, Language.NAHUATL),
                RootStrategy(lexicon, Language.NAHUATL),
                FuzzyStrategy(lexicon, Language.NAHUATL),
            ),
            Language.SPANISH: (
                ExactStrategy(lexicon, Language.SPANISH),
                FuzzyStrategy(lexicon, Language.SPANISH),
            ),
        }

    def source_language(self, text: str, direction: Direction) -> Language:
        direction = Direction(direction)
        if direction is Direction.AUTO:
            return detect_language(text, self.lexicon)
        if direction is Direction.NA_ES:
            return Language.NAHUATL
        return Language.SPANISH

    def translate_word(self, token: str, source: Language) -> WordMatch:
        word = token.lower()
        for strategy in self._strategies[source]:
            match = strategy.attempt(token, word)
            if match is not None:
                return match
        return unresolved(token)

    def translate(
        self,
        text: str,
        direction: Direction = Direction.AUTO,
        session_id: str | None = None,
    ) -> TranslationResult:
        source = self.source_language(text, direction)
        target = source.other

        words = tuple(self.translate_word(token, source) for token in tokenize(text))

        joined = " ".join(w.text for w in words)
        confidence = sum(w.confidence for w in words) / len(words) if words else 0.0

        result = TranslationResult(
            original_text=text,
            translated_text=joined[:1].upper() + joined[1:],
            detected_language=source,
            target_language=target,
            confidence=confidence,
            match_type=dominant_match_type(words),
            words=words,
        )

        self._record(session_id, text, joined, source, target, confidence)

        return result

    def _record(self, session_id, original, translated, source, target, confidence):
        if self.sink is None:
            return
        try:
            self.sink.record_translation(
                session_id, original, translated, source.value, target.value, confidence
            )
        except Exception as e:
            logger.warning("Failed to record translation: %s", e)

    def lookup_word(self, token: str) -> WordDetail | None:
        return self.reference.lookup(token)

    def search_dictionary(self, query: str) -> list[WordDetail]:
        return self.reference.search(query)


def build_translator(sink: HistorySink | None = None) -> Translator:
    """Translator over the bundled vocabulary."""
    return Translator(build_lexicon(), build_reference(), sink)
