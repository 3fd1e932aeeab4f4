"""Tests for phrasebook.dictionary module."""

from pathlib import Path

import pytest
import yaml

from phrasebook.dictionary import dump_dictionary, entry_from_dict, load_dictionary
from phrasebook.exceptions import DictionaryError
from phrasebook.models import PartOfSpeech

FIXTURES_DIR = Path(__file__).parent.parent / "fixtures" / "dictionary"


class TestLoadDictionary:
    """Tests for load_dictionary function."""

    def test_load_sample(self):
        """Test loading the sample dictionary preserves file order."""
        entries = load_dictionary(FIXTURES_DIR / "klingon_sample.yaml")

        assert len(entries) == 7

    def test_strict_rejects_non_list_examples(self):
        with pytest.raises(DictionaryError, match="entry 1: Field 'examples' must be a list"):
            load_dictionary(FIXTURES_DIR / "bad_types.yaml")

    def test_lenient_skips_wrongly_typed_entries(self, caplog):
        """Bad field types are skipped like any other malformed entry."""
        entries = load_dictionary(FIXTURES_DIR / "bad_types.yaml", strict=False)

        assert [e.id for e in entries] == ["ok-1"]
        assert "Skipping entry 1" in caplog.text
        assert "Skipping entry 2" in caplog.text
        assert [e.id for e in entries][:3] == ["greet-hello", "resp-yes", "resp-no"]

    def test_load_entry_fields(self):
        """Test that optional fields are correctly extracted."""
        entries = load_dictionary(FIXTURES_DIR / "klingon_sample.yaml")

        hello = entries[0]
        assert hello.english == "Hello"
        assert hello.klingon == "nuqneH"
        assert hello.pronunciation == "NOOK-neck"
        assert hello.part_of_speech is PartOfSpeech.EXCLAMATION
        assert hello.category == "greetings"
        assert len(hello.examples) == 1
        assert hello.examples[0].context == "informal"
        assert hello.examples[0].pronunciation is None

    def test_quoted_yes_no_stay_strings(self):
        entries = load_dictionary(FIXTURES_DIR / "klingon_sample.yaml")
        assert entries[1].english == "Yes"
        assert entries[2].english == "No"

    def test_absent_optional_fields(self):
        entries = load_dictionary(FIXTURES_DIR / "klingon_sample.yaml")
        bathroom = next(e for e in entries if e.id == "q-bathroom")
        assert bathroom.pronunciation is None
        assert bathroom.examples == ()

    def test_file_not_found(self):
        """Test error handling for missing file."""
        with pytest.raises(FileNotFoundError):
            load_dictionary(Path("/nonexistent/path.yaml"))

    def test_malformed_yaml(self):
        with pytest.raises(DictionaryError, match="Invalid YAML"):
            load_dictionary(FIXTURES_DIR / "malformed.yaml")

    def test_missing_entries_list(self):
        with pytest.raises(DictionaryError, match="entries"):
            load_dictionary(FIXTURES_DIR / "no_entries.yaml")

    def test_strict_rejects_bad_entry(self):
        with pytest.raises(DictionaryError, match="entry 1"):
            load_dictionary(FIXTURES_DIR / "lenient.yaml")

    def test_lenient_skips_bad_entries(self, caplog):
        entries = load_dictionary(FIXTURES_DIR / "lenient.yaml", strict=False)

        assert [e.id for e in entries] == ["ok-1", "ok-2"]
        assert entries[1].part_of_speech is PartOfSpeech.UNKNOWN
        assert "Skipping entry 1" in caplog.text

    def test_accepts_string_path(self):
        entries = load_dictionary(str(FIXTURES_DIR / "klingon_sample.yaml"))
        assert len(entries) == 7


class TestEntryFromDict:
    """Tests for entry_from_dict function."""

    def test_camel_case_aliases(self):
        entry = entry_from_dict(
            {
                "id": "x",
                "english": "warrior",
                "klingon": "SuvwI'",
                "pronunciation": "SOOV-wee",
                "partOfSpeech": "noun",
            }
        )
        assert entry.pronunciation == "SOOV-wee"
        assert entry.part_of_speech is PartOfSpeech.NOUN

    def test_missing_required(self):
        with pytest.raises(DictionaryError, match="klingon"):
            entry_from_dict({"id": "x", "english": "warrior"})

    def test_not_a_mapping(self):
        with pytest.raises(DictionaryError, match="mapping"):
            entry_from_dict(["id", "english"])

    def test_bad_example(self):
        with pytest.raises(DictionaryError, match="Examples"):
            entry_from_dict(
                {"id": "x", "english": "a", "klingon": "b", "examples": [{"english": "a"}]}
            )

    def test_examples_must_be_list(self):
        with pytest.raises(DictionaryError, match="examples"):
            entry_from_dict({"id": "a", "english": "x", "klingon": "y", "examples": 5})

    def test_unquoted_yes_rejected(self):
        """YAML 1.1 reads an unquoted yes as a boolean, not the phrase."""
        data = yaml.safe_load("id: resp-yes\nenglish: yes\nklingon: \"HIja'\"\n")
        assert data["english"] is True

        with pytest.raises(DictionaryError, match="'english' must be a string"):
            entry_from_dict(data)

    def test_numeric_text_rejected(self):
        with pytest.raises(DictionaryError, match="'klingon' must be a string"):
            entry_from_dict({"id": "n", "english": "one", "klingon": 1})

    def test_integer_id_accepted(self):
        entry = entry_from_dict({"id": 7, "english": "seven", "klingon": "Soch"})
        assert entry.id == "7"

    def test_boolean_id_rejected(self):
        with pytest.raises(DictionaryError, match="'id'"):
            entry_from_dict({"id": True, "english": "a", "klingon": "b"})

    def test_optional_field_type_checked(self):
        with pytest.raises(DictionaryError, match="'category'"):
            entry_from_dict({"id": "a", "english": "a", "klingon": "b", "category": 3})


class TestDumpDictionary:
    """Tests for dump_dictionary function."""

    def test_dump_reloads(self, tmp_path):
        """Dumped YAML loads back to equal entries."""
        entries = load_dictionary(FIXTURES_DIR / "klingon_sample.yaml")

        path = tmp_path / "dump.yaml"
        path.write_text(dump_dictionary(entries), encoding="utf-8")

        assert load_dictionary(path) == entries
