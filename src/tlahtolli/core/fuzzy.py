"""
Edit-distance fallback matching.

Finds the nearest vocabulary term to a misspelled or unknown word. Only the
source-language term is returned; the caller resolves its translation.
"""

from dataclasses import dataclass
from typing import Iterable


@dataclass(frozen=True)
class FuzzyMatch:
    term: str
    distance: int


def edit_distance(a: str, b: str) -> int:
    """Levenshtein distance with unit costs, full DP table."""
    matrix = [[0] * (len(a) + 1) for _ in range(len(b) + 1)]

    for i in range(len(a) + 1):
        matrix[0][i] = i
    for j in range(len(b) + 1):
        matrix[j][0] = j

    for j in range(1, len(b) + 1):
        for i in range(1, len(a) + 1):
            cost = 0 if a[i - 1] == b[j - 1] else 1
            matrix[j][i] = min(
                matrix[j][i - 1] + 1,
                matrix[j - 1][i] + 1,
                matrix[j - 1][i - 1] + cost,
            )

    return matrix[len(b)][len(a)]


def threshold(word: str) -> int:
    """Largest accepted distance for a query of this length."""
    return max(2, len(word) * 2 // 5)  # floor(0.4 * len)


def find_closest(word: str, vocabulary: Iterable[str]) -> FuzzyMatch | None:
    """
    Nearest term by edit distance, or None if it is too far.

    Ties keep the first term seen, so vocabulary order matters.
    """
    best = None
    best_distance = None

    for term in vocabulary:
        dist = edit_distance(word, term)
        if best_distance is None or dist < best_distance:
            best, best_distance = term, dist

    if best is None or best_distance > threshold(word):
        return None
    return FuzzyMatch(best, best_distance)
