"""
Unit tests for the filter evaluator
===================================
"""

import pytest

from string_analyzer.errors import FilterConflictError
from string_analyzer.filters import apply_filters, build_filters, check_filter_conflicts
from string_analyzer.models import StringRecord


@pytest.fixture
def records():
    return [StringRecord.from_value(v) for v in ["hi", "hello!", "racecar", "Never odd or even", "Zebra"]]


def values(records):
    return [r.value for r in records]


class TestApplyFilters:
    """AND across filters, input order kept."""

    def test_no_filters_returns_everything(self, records):
        assert values(apply_filters({}, records)) == values(records)

    def test_min_length(self, records):
        assert values(apply_filters({"min_length": 6}, records)) == ["hello!", "racecar", "Never odd or even"]

    def test_length_bounds_inclusive(self, records):
        assert values(apply_filters({"min_length": 5, "max_length": 6}, records)) == ["hello!", "Zebra"]

    def test_palindrome_false(self, records):
        assert values(apply_filters({"is_palindrome": False}, records)) == ["hi", "hello!", "Never odd or even", "Zebra"]

    def test_combined(self, records):
        result = apply_filters({"is_palindrome": True, "word_count": 1}, records)
        assert values(result) == ["racecar"]

    def test_contains_character_case_sensitive(self, records):
        assert values(apply_filters({"contains_character": "Z"}, records)) == ["Zebra"]
        assert values(apply_filters({"contains_character": "z"}, records)) == []

    def test_no_match_is_empty_list(self, records):
        assert apply_filters({"word_count": 7}, records) == []


class TestBuildFilters:
    """Only supplied, recognized keys survive."""

    def test_drops_none_and_unknown(self):
        filters = build_filters(is_palindrome=False, min_length=None, word_count=0, colour="red")
        assert filters == {"is_palindrome": False, "word_count": 0}


class TestCheckFilterConflicts:
    """min > max is reported, never swapped."""

    def test_conflict(self):
        with pytest.raises(FilterConflictError) as exc_info:
            check_filter_conflicts({"min_length": 10, "max_length": 5})
        assert exc_info.value.status_code == 422

    def test_equal_bounds_ok(self):
        check_filter_conflicts({"min_length": 5, "max_length": 5})

    def test_negative_max(self):
        with pytest.raises(FilterConflictError):
            check_filter_conflicts({"max_length": -1})

    def test_single_bound_ok(self):
        check_filter_conflicts({"min_length": 100})
