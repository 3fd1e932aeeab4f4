"""
Matching engine for dictionary-backed translation.

Components, leaf-first:
- normalize: canonical form of free text (case, punctuation, whitespace)
- similarity: normalized Levenshtein similarity in [0, 1]
- matcher: three-tier ranking (exact -> partial -> fuzzy) of dictionary entries
- processor: ranked matches -> TranslationResult with confidence and suggestions

Example:
    >>> from phrasebook.engine import find_matches, process
    >>> from phrasebook.languages import Language
    >>> matches = find_matches("helo", entries, Language.ENGLISH)
    >>> process("helo", matches, Language.ENGLISH, Language.KLINGON).output
    'nuqneH'
"""

from phrasebook.engine.matcher import (
    find_matches,
    get_by_category,
    list_categories,
    match_score,
    rank_candidates,
    search_dictionary,
)
from phrasebook.engine.normalize import (
    contains_text,
    is_empty_text,
    is_exact_match,
    normalize,
)
from phrasebook.engine.processor import (
    confidence_label,
    empty_result,
    is_successful,
    process,
    unknown_result,
)
from phrasebook.engine.similarity import (
    find_most_similar,
    is_similar,
    levenshtein_distance,
    similarity,
)

__all__ = [
    # Normalizer
    "normalize",
    "is_exact_match",
    "contains_text",
    "is_empty_text",
    # Similarity
    "levenshtein_distance",
    "similarity",
    "is_similar",
    "find_most_similar",
    # Matcher
    "match_score",
    "rank_candidates",
    "find_matches",
    "search_dictionary",
    "get_by_category",
    "list_categories",
    # Result processing
    "process",
    "empty_result",
    "unknown_result",
    "is_successful",
    "confidence_label",
]
