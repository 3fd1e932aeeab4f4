"""
phrasebook: Dictionary-backed English <-> Klingon phrase translation.

This library translates short phrases by matching them against a curated
dictionary rather than a statistical model. Matching is deterministic and
explainable: exact matches, then containment, then edit-distance similarity.
Every call returns a TranslationResult, never an exception.

Example:
    >>> import phrasebook
    >>> entries = phrasebook.load_dictionary("klingon.yaml")
    >>> result = phrasebook.translate("Hello!", "english", "klingon", entries)
    >>> result.output, result.confidence
    ('nuqneH', 1.0)
    >>> phrasebook.confidence_label(result.confidence)
    'Excellent'
"""

from phrasebook.config import DEFAULT_CONFIG, EngineConfig
from phrasebook.dictionary import dump_dictionary, entry_from_dict, load_dictionary
from phrasebook.engine import (
    confidence_label,
    find_matches,
    find_most_similar,
    get_by_category,
    is_similar,
    is_successful,
    list_categories,
    normalize,
    process,
    search_dictionary,
    similarity,
)
from phrasebook.exceptions import (
    ConfigurationError,
    DictionaryError,
    PhrasebookError,
)
from phrasebook.languages import (
    DEFAULT_SOURCE_LANGUAGE,
    DEFAULT_TARGET_LANGUAGE,
    LANGUAGE_OPTIONS,
    Language,
    LanguageOption,
    is_language_supported,
    language_name,
    language_pair_description,
    parse_language,
)
from phrasebook.models import (
    DictionaryEntry,
    MatchCandidate,
    PartOfSpeech,
    TranslationResult,
    UsageExample,
)
from phrasebook.translate import Translator, translate

__version__ = "0.1.0"
__all__ = [
    # Main API
    "translate",
    "Translator",
    # Configuration
    "EngineConfig",
    "DEFAULT_CONFIG",
    # Dictionary loading
    "load_dictionary",
    "entry_from_dict",
    "dump_dictionary",
    # Engine
    "normalize",
    "similarity",
    "is_similar",
    "find_most_similar",
    "find_matches",
    "search_dictionary",
    "get_by_category",
    "list_categories",
    "process",
    "is_successful",
    "confidence_label",
    # Languages
    "Language",
    "LanguageOption",
    "LANGUAGE_OPTIONS",
    "DEFAULT_SOURCE_LANGUAGE",
    "DEFAULT_TARGET_LANGUAGE",
    "parse_language",
    "is_language_supported",
    "language_name",
    "language_pair_description",
    # Models
    "DictionaryEntry",
    "UsageExample",
    "PartOfSpeech",
    "MatchCandidate",
    "TranslationResult",
    # Exceptions
    "PhrasebookError",
    "ConfigurationError",
    "DictionaryError",
]
