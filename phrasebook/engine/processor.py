"""Turn a ranked match list into a TranslationResult.

The processor evaluates three cases in order:
1. Empty input        -> output "", confidence 0
2. No matches         -> output "[input]", confidence 0
3. At least one match -> best entry's text in the other language

Confidence for case 3 is always recomputed from raw edit-distance
similarity between the input and the best entry's source text, whatever
tier the matcher used to select it. A containment match selected at 0.9
can therefore report a much lower confidence.
"""

from __future__ import annotations

from collections.abc import Sequence

from phrasebook.config import DEFAULT_CONFIG, EngineConfig
from phrasebook.engine.normalize import is_empty_text, normalize
from phrasebook.engine.similarity import similarity
from phrasebook.languages import Language
from phrasebook.models import DictionaryEntry, TranslationResult

DEFAULT_SUCCESS_THRESHOLD = DEFAULT_CONFIG.success_threshold

# (lower bound, label), highest first
CONFIDENCE_LABELS: tuple[tuple[float, str], ...] = (
    (0.9, "Excellent"),
    (0.7, "Good"),
    (0.5, "Fair"),
    (0.3, "Poor"),
)
NO_MATCH_LABEL = "No match"


def empty_result(text: str) -> TranslationResult:
    return TranslationResult(input=text, output="", confidence=0.0, suggestions=())


def unknown_result(text: str) -> TranslationResult:
    """Result for input with no dictionary match: the input in brackets."""
    return TranslationResult(input=text, output=f"[{text}]", confidence=0.0, suggestions=())


def process(
    text: str,
    matches: Sequence[DictionaryEntry],
    source_lang: Language,
    target_lang: Language,
    config: EngineConfig | None = None,
) -> TranslationResult:
    """
    Build a TranslationResult from ranked matches.

    Args:
        text: The raw input text
        matches: Entries ranked best-first by the matcher
        source_lang: Language of ``text``; its field was searched
        target_lang: Requested output language. The output field is always
            the opposite of ``source_lang``, since the pair is binary.
        config: Engine configuration (uses defaults if None)

    Returns:
        TranslationResult with up to ``config.max_suggestions`` runner-ups
    """
    config = config or DEFAULT_CONFIG

    if is_empty_text(text):
        return empty_result(text)

    if not matches:
        return unknown_result(text)

    best = matches[0]
    output_lang = source_lang.opposite
    output = best.text_for(output_lang) or ""

    confidence = 0.0
    if output:
        confidence = similarity(normalize(text), normalize(best.text_for(source_lang)))

    pronunciation = best.pronunciation if output_lang.is_constructed else None

    return TranslationResult(
        input=text,
        output=output,
        confidence=confidence,
        pronunciation=pronunciation,
        suggestions=tuple(matches[1 : 1 + config.max_suggestions]),
    )


def is_successful(result: TranslationResult, threshold: float = DEFAULT_SUCCESS_THRESHOLD) -> bool:
    """True for a real translation with confidence at or above ``threshold``.

    Empty and bracketed outputs never count as successful.
    """
    return (
        result.confidence >= threshold
        and result.output != ""
        and not result.output.startswith("[")
    )


def confidence_label(confidence: float) -> str:
    """Human-facing band for a confidence value."""
    for lower_bound, label in CONFIDENCE_LABELS:
        if confidence >= lower_bound:
            return label
    return NO_MATCH_LABEL
