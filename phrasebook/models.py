"""
Data models for phrasebook.

DictionaryEntry is the unit of curated content supplied by the caller;
MatchCandidate is an ephemeral ranking record; TranslationResult is the
engine's output value.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Literal

from phrasebook.languages import Language


class PartOfSpeech(Enum):
    """Closed set of grammatical categories for an entry."""

    NOUN = "noun"
    VERB = "verb"
    ADJECTIVE = "adjective"
    ADVERB = "adverb"
    PRONOUN = "pronoun"
    CONJUNCTION = "conjunction"
    EXCLAMATION = "exclamation"
    QUESTION = "question"
    NUMERAL = "numeral"
    UNKNOWN = "unknown"

    @classmethod
    def parse(cls, value: str | None) -> PartOfSpeech | None:
        """Return the member for ``value``, or None if it is not a known tag."""
        if value is None:
            return None
        try:
            return cls(value.strip().lower())
        except ValueError:
            return None


@dataclass(frozen=True)
class UsageExample:
    """An example sentence showing an entry in use."""

    english: str
    klingon: str
    pronunciation: str | None = None
    context: str | None = None  # e.g. "formal", "battle"

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"english": self.english, "klingon": self.klingon}
        if self.pronunciation is not None:
            data["phonetic"] = self.pronunciation
        if self.context is not None:
            data["context"] = self.context
        return data


@dataclass(frozen=True)
class DictionaryEntry:
    """
    One curated phrase pair with optional metadata.

    Entries are supplied externally and are never mutated by the engine.
    The ``english`` and ``klingon`` fields may be empty for incomplete
    entries; the matcher skips an entry whose searched field is empty.

    Example:
        >>> entry = DictionaryEntry(id="greet-1", english="Hello", klingon="nuqneH")
        >>> entry.text_for(Language.KLINGON)
        'nuqneH'
    """

    id: str
    english: str
    klingon: str
    pronunciation: str | None = None  # Guide for the Klingon text
    part_of_speech: PartOfSpeech | None = None
    category: str | None = None
    examples: tuple[UsageExample, ...] = ()

    def text_for(self, language: Language) -> str:
        """Return this entry's text in ``language``."""
        if language is Language.KLINGON:
            return self.klingon
        return self.english

    def to_dict(self) -> dict[str, Any]:
        """
        Convert to dictionary for YAML/JSON serialization.

        Optional fields are omitted when absent.
        """
        data: dict[str, Any] = {
            "id": self.id,
            "english": self.english,
            "klingon": self.klingon,
        }
        if self.pronunciation is not None:
            data["phonetic"] = self.pronunciation
        if self.part_of_speech is not None:
            data["part_of_speech"] = self.part_of_speech.value
        if self.category is not None:
            data["category"] = self.category
        if self.examples:
            data["examples"] = [example.to_dict() for example in self.examples]
        return data


@dataclass(frozen=True)
class MatchCandidate:
    """A dictionary entry paired with the score the matcher assigned it."""

    entry: DictionaryEntry
    similarity: float  # 0.0-1.0
    tier: Literal["exact", "partial", "fuzzy"]


@dataclass(frozen=True)
class TranslationResult:
    """
    The outcome of a translation request.

    ``output`` takes one of three shapes:
    - ``""`` for empty input or an unsupported language pair
    - ``"[input]"`` when no dictionary entry matched
    - the translated text otherwise

    Example:
        >>> result = phrasebook.translate("Hello!", "english", "klingon", entries)
        >>> result.output, result.confidence
        ('nuqneH', 1.0)
    """

    input: str
    output: str
    confidence: float = 0.0
    pronunciation: str | None = None
    suggestions: tuple[DictionaryEntry, ...] = ()

    @property
    def is_empty(self) -> bool:
        """True for the empty-input / unsupported-language shape."""
        return self.output == ""

    @property
    def is_untranslated(self) -> bool:
        """True when the input came back wrapped in brackets."""
        return self.output == f"[{self.input}]"

    def to_dict(self) -> dict[str, Any]:
        """
        Convert to dictionary for JSON serialization.

        Returns:
            Dictionary representation of the result
        """
        return {
            "input": self.input,
            "output": self.output,
            "pronunciation": self.pronunciation,
            "confidence": self.confidence,
            "suggestions": [entry.to_dict() for entry in self.suggestions],
        }
