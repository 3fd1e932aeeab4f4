"""Tests for phrasebook.engine.similarity module."""

import itertools

import pytest

from phrasebook.engine.similarity import (
    find_most_similar,
    is_similar,
    levenshtein_distance,
    similarity,
)

WORDS = ["", "a", "hello", "helo", "nuqneh", "qapla'", "kitten", "sitting", "ünïcödé", "日本語"]


class TestLevenshteinDistance:
    """Tests for levenshtein_distance()."""

    def test_classic_example(self):
        assert levenshtein_distance("kitten", "sitting") == 3

    def test_identical(self):
        assert levenshtein_distance("nuqneh", "nuqneh") == 0

    def test_against_empty(self):
        assert levenshtein_distance("", "abc") == 3

    def test_non_ascii(self):
        """Distance counts characters, not bytes."""
        assert levenshtein_distance("café", "cafe") == 1


class TestSimilarity:
    """Tests for similarity()."""

    def test_both_empty(self):
        assert similarity("", "") == 1.0

    def test_one_empty(self):
        assert similarity("", "hello") == 0.0
        assert similarity("hello", "") == 0.0

    def test_single_edit(self):
        """One deletion over five characters."""
        assert similarity("helo", "hello") == pytest.approx(0.8)

    def test_completely_different(self):
        assert similarity("abc", "xyz") == 0.0

    def test_exactly_point_six(self):
        """Two substitutions over five characters land exactly on 0.6."""
        assert similarity("abcde", "abcxy") == 0.6

    @pytest.mark.parametrize("word", [w for w in WORDS if w])
    def test_reflexive(self, word):
        assert similarity(word, word) == 1.0

    @pytest.mark.parametrize("a,b", list(itertools.combinations(WORDS, 2)))
    def test_symmetric(self, a, b):
        assert similarity(a, b) == similarity(b, a)

    @pytest.mark.parametrize("a,b", list(itertools.combinations(WORDS, 2)))
    def test_range(self, a, b):
        assert 0.0 <= similarity(a, b) <= 1.0


class TestIsSimilar:
    """Tests for is_similar()."""

    def test_default_threshold_inclusive(self):
        """The default 0.6 threshold is inclusive."""
        assert is_similar("abcde", "abcxy") is True

    def test_below_threshold(self):
        assert is_similar("abc", "xyz") is False

    def test_custom_threshold(self):
        assert is_similar("helo", "hello", threshold=0.9) is False
        assert is_similar("helo", "hello", threshold=0.8) is True


class TestFindMostSimilar:
    """Tests for find_most_similar()."""

    def test_empty_candidates(self):
        assert find_most_similar("hello", []) is None

    def test_picks_best(self):
        assert find_most_similar("helo", ["goodbye", "hello", "yes"]) == "hello"

    def test_tie_prefers_first(self):
        """Equal scores resolve to the first candidate seen."""
        assert find_most_similar("ab", ["ax", "xb"]) == "ax"

    def test_all_zero_returns_first(self):
        """A non-empty candidate list always yields a candidate."""
        assert find_most_similar("abc", ["xyz", "uvw"]) == "xyz"

    def test_accepts_iterables(self):
        assert find_most_similar("hello", iter(["hullo", "hello"])) == "hello"
