"""Load dictionary entries from YAML.

This module is the dictionary supplier: it reads curated phrase pairs from
disk once, and the engine then treats the resulting list as read-only.

Expected document shape::

    entries:
      - id: greet-hello
        english: Hello
        klingon: nuqneH
        phonetic: NOOK-neck          # optional
        part_of_speech: exclamation  # optional
        category: greetings          # optional
        examples:                    # optional
          - english: Hello, friend
            klingon: nuqneH, jup
            context: informal
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from phrasebook.exceptions import DictionaryError
from phrasebook.models import DictionaryEntry, PartOfSpeech, UsageExample

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("id", "english", "klingon")


def load_dictionary(path: str | Path, strict: bool = True) -> list[DictionaryEntry]:
    """Load dictionary entries from a YAML file, preserving file order.

    Args:
        path: Path to the dictionary YAML file
        strict: If True, a malformed entry raises DictionaryError.
            If False, malformed entries are skipped with a warning.

    Returns:
        List of DictionaryEntry in file order

    Raises:
        FileNotFoundError: If the file doesn't exist
        DictionaryError: If the YAML is malformed or lacks an ``entries`` list
    """
    path = Path(path)
    with open(path, encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise DictionaryError(f"Invalid YAML in {path}: {e}") from e

    if not isinstance(data, dict) or not isinstance(data.get("entries"), list):
        raise DictionaryError(f"{path} must contain a top-level 'entries' list")

    entries: list[DictionaryEntry] = []
    for index, raw in enumerate(data["entries"]):
        try:
            entries.append(entry_from_dict(raw))
        except DictionaryError as e:
            if strict:
                raise DictionaryError(f"{path}: entry {index}: {e}") from e
            logger.warning("Skipping entry %d in %s: %s", index, path, e)

    logger.info("Loaded %d dictionary entries from %s", len(entries), path)
    return entries


def entry_from_dict(data: Any) -> DictionaryEntry:
    """Build a DictionaryEntry from a mapping.

    Accepts both ``phonetic``/``pronunciation`` and
    ``part_of_speech``/``partOfSpeech`` spellings. An unrecognized part of
    speech becomes PartOfSpeech.UNKNOWN.

    Text fields must be YAML strings: an unquoted ``yes`` or ``12`` is
    rejected rather than read as "True" or "12".

    Raises:
        DictionaryError: If ``data`` is not a mapping, lacks a required field,
            or has a field of the wrong type
    """
    if not isinstance(data, dict):
        raise DictionaryError(f"Expected a mapping, got {type(data).__name__}")

    missing = [name for name in REQUIRED_FIELDS if data.get(name) is None]
    if missing:
        raise DictionaryError(f"Missing required field(s): {', '.join(missing)}")

    entry_id = data["id"]
    # bool is an int subclass; YAML "yes" must not become id True
    if isinstance(entry_id, bool) or not isinstance(entry_id, (str, int)):
        raise DictionaryError(
            f"Field 'id' must be a string or integer, got {type(entry_id).__name__}"
        )

    pos_value = _optional_str(data, "part_of_speech", "partOfSpeech")
    part_of_speech = None
    if pos_value is not None:
        part_of_speech = PartOfSpeech.parse(pos_value) or PartOfSpeech.UNKNOWN

    raw_examples = data.get("examples")
    if raw_examples is None:
        raw_examples = []
    if not isinstance(raw_examples, list):
        raise DictionaryError(
            f"Field 'examples' must be a list, got {type(raw_examples).__name__}"
        )

    return DictionaryEntry(
        id=str(entry_id),
        english=_required_str(data, "english"),
        klingon=_required_str(data, "klingon"),
        pronunciation=_optional_str(data, "phonetic", "pronunciation"),
        part_of_speech=part_of_speech,
        category=_optional_str(data, "category"),
        examples=tuple(_example_from_dict(ex) for ex in raw_examples),
    )


def dump_dictionary(entries: list[DictionaryEntry]) -> str:
    """Serialize entries to YAML text readable by load_dictionary()."""
    return yaml.safe_dump(
        {"entries": [entry.to_dict() for entry in entries]},
        allow_unicode=True,
        sort_keys=False,
    )


def _example_from_dict(data: Any) -> UsageExample:
    if not isinstance(data, dict) or data.get("english") is None or data.get("klingon") is None:
        raise DictionaryError("Examples need 'english' and 'klingon' text")

    return UsageExample(
        english=_required_str(data, "english"),
        klingon=_required_str(data, "klingon"),
        pronunciation=_optional_str(data, "phonetic", "pronunciation"),
        context=_optional_str(data, "context"),
    )


def _required_str(data: dict[str, Any], name: str) -> str:
    value = data[name]
    if not isinstance(value, str):
        raise DictionaryError(
            f"Field '{name}' must be a string, got {type(value).__name__} {value!r} "
            "(quote it in YAML)"
        )
    return value


def _optional_str(data: dict[str, Any], *names: str) -> str | None:
    """Return the first present field among ``names``, which must be a string."""
    for name in names:
        value = data.get(name)
        if value is None:
            continue
        if not isinstance(value, str):
            raise DictionaryError(
                f"Field '{name}' must be a string, got {type(value).__name__} {value!r}"
            )
        return value
    return None
