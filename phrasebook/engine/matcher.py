"""Rank dictionary entries against free-text input.

This module provides:
1. match_score() - the three-tier score for one input/field pair
2. rank_candidates() - scored, filtered and ranked MatchCandidates
3. find_matches() - the ranked entries themselves
4. search_dictionary(), get_by_category(), list_categories() - unranked lookup

Matching tiers, evaluated in order:
- exact: canonical forms are equal -> config.exact_match_score (1.0)
- partial: one canonical form contains the other -> config.partial_match_score (0.9)
- fuzzy: edit-distance similarity of the canonical forms
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Literal

from phrasebook.config import DEFAULT_CONFIG, EngineConfig
from phrasebook.engine.normalize import contains_text, is_exact_match, normalize
from phrasebook.engine.similarity import similarity
from phrasebook.languages import Language
from phrasebook.models import DictionaryEntry, MatchCandidate

logger = logging.getLogger(__name__)


def match_score(
    normalized_input: str,
    field_text: str,
    config: EngineConfig | None = None,
) -> tuple[float, Literal["exact", "partial", "fuzzy"]]:
    """Score one dictionary field against already-normalized input.

    Returns:
        Tuple of (score, tier) where tier is "exact", "partial" or "fuzzy".
    """
    config = config or DEFAULT_CONFIG
    if is_exact_match(normalized_input, field_text):
        return config.exact_match_score, "exact"

    if contains_text(normalized_input, field_text):
        return config.partial_match_score, "partial"

    return similarity(normalized_input, normalize(field_text)), "fuzzy"


def rank_candidates(
    text: str,
    dictionary: Iterable[DictionaryEntry],
    source_field: Language,
    config: EngineConfig | None = None,
) -> list[MatchCandidate]:
    """Score every entry and return those above the match threshold.

    Entries whose ``source_field`` text is missing (or normalizes to empty)
    are skipped. Results are sorted by descending similarity; ties keep
    dictionary order.

    Args:
        text: Raw input text
        dictionary: Entries to search, in their canonical order
        source_field: Which language field of each entry to compare against
        config: Engine configuration (uses defaults if None)

    Returns:
        Ranked list of MatchCandidate
    """
    config = config or DEFAULT_CONFIG

    normalized_input = normalize(text)
    if not normalized_input:
        return []

    candidates: list[MatchCandidate] = []
    for entry in dictionary:
        field_text = entry.text_for(source_field)
        if not field_text or not normalize(field_text):
            continue

        score, tier = match_score(normalized_input, field_text, config)
        if score > config.match_threshold:
            candidates.append(MatchCandidate(entry=entry, similarity=score, tier=tier))

    # sorted() is stable, also with reverse=True
    ranked = sorted(candidates, key=lambda c: c.similarity, reverse=True)
    logger.debug(
        "Ranked %d candidates for %r against %s field",
        len(ranked),
        normalized_input,
        source_field.value,
    )
    return ranked


def find_matches(
    text: str,
    dictionary: Iterable[DictionaryEntry],
    source_field: Language,
    config: EngineConfig | None = None,
) -> list[DictionaryEntry]:
    """Return dictionary entries matching ``text``, best first.

    Example:
        >>> find_matches("hello", entries, Language.ENGLISH)
        [DictionaryEntry(id='greet-hello', english='Hello', klingon='nuqneH', ...)]
    """
    return [c.entry for c in rank_candidates(text, dictionary, source_field, config)]


def search_dictionary(
    query: str,
    dictionary: Iterable[DictionaryEntry],
) -> list[DictionaryEntry]:
    """Unranked substring search over English, Klingon and category."""
    normalized_query = normalize(query)
    if not normalized_query:
        return []

    results = []
    for entry in dictionary:
        english = normalize(entry.english)
        klingon = normalize(entry.klingon)
        category = normalize(entry.category) if entry.category else ""

        if (
            normalized_query in english
            or normalized_query in klingon
            or normalized_query in category
        ):
            results.append(entry)

    return results


def get_by_category(
    category: str,
    dictionary: Iterable[DictionaryEntry],
) -> list[DictionaryEntry]:
    # Exact comparison, no normalization
    return [entry for entry in dictionary if entry.category == category]


def list_categories(dictionary: Iterable[DictionaryEntry]) -> list[str]:
    """Return the distinct non-empty categories, sorted."""
    return sorted({entry.category for entry in dictionary if entry.category})
