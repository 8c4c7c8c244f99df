"""
Rule-based affix stripping for Nahuatl.

Produces candidate roots for a surface form; the translator tries them in
order against the lexicon and keeps the first hit.
"""

# possessive / subject
PREFIXES = ("no", "mo", "i", "to", "amo", "in", "ni", "ti", "qui")

# absolutive, diminutive, reverential; trailing "s" covers hispanized plurals
SUFFIXES = ("tli", "tl", "li", "in", "tzin", "ton", "s")


def candidate_roots(token: str) -> list[str]:
    """
    Candidate roots in evaluation order:
      1. each matching prefix removed
      2. each matching suffix removed
      3. each matching (prefix, suffix) pair removed together

    Duplicates are kept. When a prefix and suffix overlap the combined
    candidate is the empty string.

    >>> candidate_roots("nocalli")[:2]
    ['calli', 'nocal']
    """
    w = token.lower()
    prefixes = [p for p in PREFIXES if w.startswith(p)]
    suffixes = [s for s in SUFFIXES if w.endswith(s)]

    stems = [w[len(p):] for p in prefixes]
    stems.extend(w[:len(w) - len(s)] for s in suffixes)

    for p in prefixes:
        for s in suffixes:
            end = len(w) - len(s)
            stems.append(w[len(p):end] if end > len(p) else "")

    return stems
