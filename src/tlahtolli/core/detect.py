"""
Heuristic source-language detection.

Whole-text dictionary hits win outright. Otherwise each language scores
one point per characteristic pattern present, with Nahuatl word endings
worth two, and Spanish gets half a point for a final vowel.
"""

import re

from tlahtolli.core.lexicon import Language, Lexicon

NAHUATL_PATTERNS = [re.compile(p) for p in ("tl", "tz", "hua", "qui", "ll", "z")]
NAHUATL_ENDINGS = [re.compile(r"(tl|tli|li|in|uh)$")]

# b, d, f, r are rare or absent in classical nahuatl
SPANISH_PATTERNS = [re.compile(p) for p in ("ción", "dad", "ñ", "que", "b", "d", "f", "r")]

VOWEL_ENDING = re.compile(r"[aeiou]$")


def score_language(text: str) -> dict[Language, float]:
    t = text.lower()

    na_score = 0.0
    es_score = 0.0

    for p in NAHUATL_PATTERNS:
        if p.search(t):
            na_score += 1
    for p in NAHUATL_ENDINGS:
        if p.search(t):
            na_score += 2

    for p in SPANISH_PATTERNS:
        if p.search(t):
            es_score += 1
    if VOWEL_ENDING.search(t) and not t.endswith("hua"):
        es_score += 0.5

    return {Language.NAHUATL: na_score, Language.SPANISH: es_score}


def detect_language(text: str, lexicon: Lexicon) -> Language:
    """Always answers; ties go to Nahuatl."""
    t = text.lower()

    if lexicon.search(t, Language.NAHUATL) is not None:
        return Language.NAHUATL
    if lexicon.search(t, Language.SPANISH) is not None:
        return Language.SPANISH

    scores = score_language(t)
    if scores[Language.NAHUATL] >= scores[Language.SPANISH]:
        return Language.NAHUATL
    return Language.SPANISH
