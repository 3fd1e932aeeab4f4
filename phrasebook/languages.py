"""Supported languages and language-pair lookup.

The translator works between exactly two languages: English (the natural
language) and Klingon (the constructed one). Language identifiers arriving
from callers are plain strings; they are resolved once into a Language
member and the typed value is passed down to the matcher and processor.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Literal


@dataclass(frozen=True)
class LanguageOption:
    """Display metadata for a supported language.

    Attributes:
        code: Short language code ("en", "tlh").
        name: Human-readable name.
        native_name: Name of the language in itself.
        direction: Script direction.
    """

    code: str
    name: str
    native_name: str
    direction: Literal["ltr", "rtl"] = "ltr"


ENGLISH_OPTION = LanguageOption(
    code="en",
    name="English",
    native_name="English",
)

KLINGON_OPTION = LanguageOption(
    code="tlh",
    name="Klingon (tlhIngan Hol)",
    native_name="tlhIngan Hol",
)


class Language(Enum):
    """The two translation directions' endpoints."""

    ENGLISH = "english"
    KLINGON = "klingon"

    @property
    def option(self) -> LanguageOption:
        return _OPTIONS[self]

    @property
    def code(self) -> str:
        return self.option.code

    @property
    def opposite(self) -> Language:
        """The other language of the pair."""
        return Language.KLINGON if self is Language.ENGLISH else Language.ENGLISH

    @property
    def is_constructed(self) -> bool:
        """Pronunciation guides exist only for the constructed language."""
        return self is Language.KLINGON


_OPTIONS: dict[Language, LanguageOption] = {
    Language.ENGLISH: ENGLISH_OPTION,
    Language.KLINGON: KLINGON_OPTION,
}

LANGUAGE_OPTIONS: tuple[LanguageOption, ...] = (ENGLISH_OPTION, KLINGON_OPTION)

DEFAULT_SOURCE_LANGUAGE = Language.ENGLISH
DEFAULT_TARGET_LANGUAGE = Language.KLINGON

# Accepted identifiers (lowercased) -> Language
_ALIASES: dict[str, Language] = {
    "english": Language.ENGLISH,
    "en": Language.ENGLISH,
    "klingon": Language.KLINGON,
    "tlh": Language.KLINGON,
}


def parse_language(value: str | Language | None) -> Language | None:
    """Resolve a language identifier.

    Accepts a Language member, a language name ("english", "klingon") or a
    code ("en", "tlh"), case-insensitively. Returns None for anything else.
    """
    if isinstance(value, Language):
        return value
    if not isinstance(value, str):
        return None
    return _ALIASES.get(value.strip().lower())


def is_language_supported(value: str | Language | None) -> bool:
    return parse_language(value) is not None


def language_name(value: str | Language) -> str:
    """Return the display name for a language, or the raw value if unknown."""
    language = parse_language(value)
    if language is None:
        return str(value)
    return language.option.name


def language_pair_description(source: str | Language, target: str | Language) -> str:
    """Describe a translation direction, e.g. "English → Klingon (tlhIngan Hol)"."""
    return f"{language_name(source)} → {language_name(target)}"
