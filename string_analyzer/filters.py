from typing import Any, Dict, Iterable, List

from string_analyzer.errors import FilterConflictError
from string_analyzer.models import StringRecord

FILTER_KEYS = (
    "is_palindrome",
    "min_length",
    "max_length",
    "word_count",
    "contains_character",
)


def build_filters(**params: Any) -> Dict[str, Any]:
    """Keep only the recognized filters that were actually supplied"""
    return {key: params[key] for key in FILTER_KEYS if params.get(key) is not None}


def check_filter_conflicts(filters: Dict[str, Any]) -> None:
    """
    Raise FilterConflictError when the filters can never match anything.

    The set is left untouched; conflicting bounds are reported, never swapped.
    """
    min_length = filters.get("min_length")
    max_length = filters.get("max_length")

    if max_length is not None and max_length < 0:
        raise FilterConflictError(
            "Query parsed but resulted in conflicting filters: max_length cannot be negative",
            {"filters": filters},
        )
    if min_length is not None and max_length is not None and min_length > max_length:
        raise FilterConflictError(
            "Query parsed but resulted in conflicting filters: "
            "min_length cannot be greater than max_length",
            {"filters": filters},
        )


def matches(record: StringRecord, filters: Dict[str, Any]) -> bool:
    """True if the record satisfies every filter present (absent = unconstrained)"""
    props = record.properties

    if "is_palindrome" in filters and props.is_palindrome != filters["is_palindrome"]:
        return False

    if "min_length" in filters and props.length < filters["min_length"]:
        return False

    if "max_length" in filters and props.length > filters["max_length"]:
        return False

    if "word_count" in filters and props.word_count != filters["word_count"]:
        return False

    # Case-sensitive containment
    if "contains_character" in filters and filters["contains_character"] not in record.value:
        return False

    return True


def apply_filters(filters: Dict[str, Any], records: Iterable[StringRecord]) -> List[StringRecord]:
    """Get the records matching all filters, in their original order"""
    return [record for record in records if matches(record, filters)]
