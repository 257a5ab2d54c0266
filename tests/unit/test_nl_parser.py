"""
Unit tests for the natural language query interpreter
=====================================================
"""

import re

import pytest

from string_analyzer.errors import UnparsedQueryError
from string_analyzer.nl_parser import RULES, parse_natural_language_query


class TestRuleCatalog:
    """Single phrases map to the expected filters."""

    @pytest.mark.parametrize("query, expected", [
        ("all single word palindromic strings", {"word_count": 1, "is_palindrome": True}),
        ("strings longer than 5 characters", {"min_length": 6}),
        ("strings shorter than 4 characters", {"max_length": 3}),
        ("strings of exactly 3 characters", {"min_length": 3, "max_length": 3}),
        ("strings between 5 and 10 characters", {"min_length": 5, "max_length": 10}),
        ("strings containing the letter z", {"contains_character": "z"}),
        ("strings that contain the first vowel", {"contains_character": "a"}),
        ("two word strings", {"word_count": 2}),
        ("one-word palindromes", {"word_count": 1, "is_palindrome": True}),
        ("strings with 4 words", {"word_count": 4}),
        ("strings containing z", {"contains_character": "z"}),
        ("strings that contain 7", {"contains_character": "7"}),
        ("strings of three words", {"word_count": 3}),
        ("strings with a word count of 4", {"word_count": 4}),
        ("non-palindromic strings", {"is_palindrome": False}),
        ("strings that are not a palindrome", {"is_palindrome": False}),
    ])
    def test_phrase(self, query, expected):
        assert parse_natural_language_query(query) == expected

    def test_case_insensitive(self):
        assert parse_natural_language_query("STRINGS LONGER THAN 10 CHARACTERS") == {"min_length": 11}

    def test_letter_is_lower_cased(self):
        assert parse_natural_language_query("Containing the letter Q") == {"contains_character": "q"}

    def test_exactly_n_words_is_word_count(self):
        assert parse_natural_language_query("exactly 2 words") == {"word_count": 2}

    def test_longer_than_n_words_is_not_word_count(self):
        assert "word_count" not in parse_natural_language_query("longer than 5 words")

    def test_between_n_words_is_not_word_count(self):
        """Only the length range is read from "between X and Y words"."""
        filters = parse_natural_language_query("between 5 and 10 words")
        assert filters == {"min_length": 5, "max_length": 10}


class TestRuleOrdering:
    """Later rules overwrite earlier ones on the same key."""

    def test_between_overrides_longer_than(self):
        filters = parse_natural_language_query("longer than 3 and between 5 and 10 characters")
        assert filters == {"min_length": 5, "max_length": 10}

    def test_first_vowel_overrides_letter(self):
        filters = parse_natural_language_query("containing the letter z or the first vowel, contains the first vowel")
        assert filters["contains_character"] == "a"

    def test_letter_rule_overrides_bare_character(self):
        assert parse_natural_language_query("containing a letter z") == {"contains_character": "z"}


class TestConflictsAndFailures:
    """Conflicts are returned untouched; no match raises."""

    def test_between_reversed_not_swapped(self):
        assert parse_natural_language_query("between 10 and 5 characters") == {"min_length": 10, "max_length": 5}

    def test_longer_and_shorter_conflict_kept(self):
        filters = parse_natural_language_query("longer than 10 and shorter than 5")
        assert filters == {"min_length": 11, "max_length": 4}

    def test_unparsed(self):
        with pytest.raises(UnparsedQueryError) as exc_info:
            parse_natural_language_query("purple monkey dishwasher")
        assert exc_info.value.status_code == 400
        assert "hint" in exc_info.value.to_dict()

    def test_empty_query_unparsed(self):
        with pytest.raises(UnparsedQueryError):
            parse_natural_language_query("")


class TestCustomRules:
    """The catalog is plain data and can be swapped."""

    def test_extra_rule_appended(self):
        rules = RULES + [(re.compile(r"\bempty\b"), lambda m: {"max_length": 0})]
        assert parse_natural_language_query("empty strings", rules=rules) == {"max_length": 0}

    def test_default_catalog_ignores_unknown_phrase(self):
        with pytest.raises(UnparsedQueryError):
            parse_natural_language_query("empty strings")
