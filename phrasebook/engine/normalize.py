"""Canonicalize free text before comparison.

Every comparison in the engine runs on the canonical form produced by
normalize(): lowercase, trimmed, without common punctuation, and with
whitespace runs collapsed to one space.
"""

from __future__ import annotations

import re

# Punctuation stripped before comparison. Apostrophes are kept: they are
# letters (glottal stops) in Klingon.
PUNCTUATION_PATTERN = re.compile(r"[.,!?;:]")
WHITESPACE_PATTERN = re.compile(r"\s+")


def normalize(text: str) -> str:
    """Return the canonical form of ``text``.

    Example:
        >>> normalize("  Hello,   World! ")
        'hello world'
    """
    text = text.lower().strip()
    text = PUNCTUATION_PATTERN.sub("", text)
    # Removing edge punctuation can expose whitespace: strip again
    return WHITESPACE_PATTERN.sub(" ", text).strip()


def is_exact_match(text1: str, text2: str) -> bool:
    """True if both texts share the same canonical form."""
    return normalize(text1) == normalize(text2)


def contains_text(text: str, search_term: str) -> bool:
    """True if either canonical form contains the other.

    Containment is checked both ways because the caller does not know
    which side is the longer string.
    """
    normalized_text = normalize(text)
    normalized_term = normalize(search_term)
    return normalized_term in normalized_text or normalized_text in normalized_term


def is_empty_text(text: str) -> bool:
    """True for empty, whitespace-only or punctuation-only text."""
    return normalize(text) == ""
