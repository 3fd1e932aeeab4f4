"""
Translation orchestrator.

This module provides the main `translate()` function, which wires together:
- Language resolution (string identifiers -> Language)
- Matcher (ranked dictionary entries)
- Result processor (TranslationResult)

and the `Translator` facade, which binds a dictionary and configuration
once for repeated calls.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from phrasebook.config import DEFAULT_CONFIG, EngineConfig
from phrasebook.engine.matcher import (
    find_matches,
    get_by_category,
    list_categories,
    search_dictionary,
)
from phrasebook.engine.normalize import is_empty_text
from phrasebook.engine.processor import empty_result, is_successful, process
from phrasebook.languages import Language, parse_language
from phrasebook.models import DictionaryEntry, TranslationResult

logger = logging.getLogger(__name__)


def translate(
    text: str,
    from_language: str | Language,
    to_language: str | Language,
    dictionary: Iterable[DictionaryEntry],
    config: EngineConfig | None = None,
) -> TranslationResult:
    """
    Translate text between English and Klingon using a dictionary.

    Never raises for user input: empty text and unsupported languages both
    return the empty result (output "", confidence 0), and text with no
    dictionary match returns the bracketed input.

    Args:
        text: Raw input text
        from_language: "english"/"klingon" (or "en"/"tlh", or a Language)
        to_language: "english"/"klingon" (or "en"/"tlh", or a Language)
        dictionary: Ordered, read-only dictionary entries
        config: Engine configuration (uses defaults if None)

    Returns:
        TranslationResult

    Example:
        >>> result = translate("Hello!", "english", "klingon", entries)
        >>> result.output
        'nuqneH'
    """
    config = config or DEFAULT_CONFIG

    if is_empty_text(text):
        logger.debug("Empty input text")
        return empty_result(text)

    source_lang = parse_language(from_language)
    target_lang = parse_language(to_language)
    if source_lang is None or target_lang is None:
        logger.debug("Unsupported language pair: %r -> %r", from_language, to_language)
        return empty_result(text)

    matches = find_matches(text, dictionary, source_lang, config)
    return process(text, matches, source_lang, target_lang, config)


class Translator:
    """
    Dictionary-backed translator bound to one dictionary and config.

    The dictionary is copied into a tuple on construction and is never
    modified afterwards, so one Translator can be shared across threads.

    Example:
        >>> translator = Translator(load_dictionary("klingon.yaml"))
        >>> result = translator.translate("Hello!", "english", "klingon")
        >>> translator.is_successful(result)
        True
    """

    def __init__(
        self,
        dictionary: Iterable[DictionaryEntry],
        config: EngineConfig | None = None,
    ) -> None:
        self.dictionary: Sequence[DictionaryEntry] = tuple(dictionary)
        self.config = config or DEFAULT_CONFIG

    def __len__(self) -> int:
        return len(self.dictionary)

    def translate(
        self,
        text: str,
        from_language: str | Language,
        to_language: str | Language,
    ) -> TranslationResult:
        return translate(text, from_language, to_language, self.dictionary, self.config)

    def search(self, query: str) -> list[DictionaryEntry]:
        """Unranked substring search across both languages and categories."""
        return search_dictionary(query, self.dictionary)

    def by_category(self, category: str) -> list[DictionaryEntry]:
        return get_by_category(category, self.dictionary)

    def categories(self) -> list[str]:
        return list_categories(self.dictionary)

    def is_successful(self, result: TranslationResult) -> bool:
        """Check a result against the configured success threshold."""
        return is_successful(result, self.config.success_threshold)
