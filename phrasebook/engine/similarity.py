"""Edit-distance similarity between canonical strings."""

from __future__ import annotations

from collections.abc import Iterable

from rapidfuzz.distance import Levenshtein

from phrasebook.config import DEFAULT_CONFIG

DEFAULT_SIMILARITY_THRESHOLD = DEFAULT_CONFIG.match_threshold


def levenshtein_distance(text1: str, text2: str) -> int:
    """Unit-cost insert/delete/substitute edit distance."""
    return Levenshtein.distance(text1, text2)


def similarity(text1: str, text2: str) -> float:
    """Return a symmetric similarity score in [0, 1].

    Computed as ``1 - distance / max(len(text1), len(text2))``. Two empty
    strings are identical (1.0); one empty string scores 0.0.
    """
    len1 = len(text1)
    len2 = len(text2)

    if len1 == 0 and len2 == 0:
        return 1.0
    if len1 == 0 or len2 == 0:
        return 0.0

    return 1 - levenshtein_distance(text1, text2) / max(len1, len2)


def is_similar(
    text1: str,
    text2: str,
    threshold: float = DEFAULT_SIMILARITY_THRESHOLD,
) -> bool:
    return similarity(text1, text2) >= threshold


def find_most_similar(target: str, candidates: Iterable[str]) -> str | None:
    """Return the candidate most similar to ``target``.

    Ties go to the earliest candidate. Returns None when there are no
    candidates.
    """
    best: str | None = None
    best_score = -1.0

    for candidate in candidates:
        score = similarity(target, candidate)
        if score > best_score:
            best_score = score
            best = candidate

    return best
