from fastapi import APIRouter, Depends, Query, Request, Response, status
from typing import Optional
import logging

from string_analyzer.errors import DuplicateStringError, MissingFieldError, StringNotFoundError
from string_analyzer.filters import apply_filters, build_filters, check_filter_conflicts
from string_analyzer.models import StringRecord
from string_analyzer.nl_parser import parse_natural_language_query
from string_analyzer.schemas import (
    InterpretedQuery,
    NaturalLanguageResponse,
    StringCreate,
    StringListResponse,
)
from string_analyzer.store import StringStore

router = APIRouter()
logger = logging.getLogger(__name__)


def get_store(request: Request) -> StringStore:
    """Dependency providing the store created at startup."""
    return request.app.state.store


@router.post("/strings", response_model=StringRecord, status_code=status.HTTP_201_CREATED)
def create_string(string_data: StringCreate, store: StringStore = Depends(get_store)):
    """
    Analyze and store a string.
    Returns 409 if string already exists.
    """
    record, created = store.insert_if_absent(string_data.value)
    if not created:
        raise DuplicateStringError()
    return record


@router.get("/strings", response_model=StringListResponse)
def get_all_strings(
    is_palindrome: Optional[bool] = Query(None),
    min_length: Optional[int] = Query(None, ge=0),
    max_length: Optional[int] = Query(None, ge=0),
    word_count: Optional[int] = Query(None, ge=0),
    contains_character: Optional[str] = Query(None, min_length=1, max_length=1),
    store: StringStore = Depends(get_store),
):
    """
    Get all strings with optional filtering.
    """
    filters = build_filters(
        is_palindrome=is_palindrome,
        min_length=min_length,
        max_length=max_length,
        word_count=word_count,
        contains_character=contains_character,
    )
    check_filter_conflicts(filters)

    strings = apply_filters(filters, store.enumerate())
    return StringListResponse(data=strings, count=len(strings), filters_applied=filters)


@router.get("/strings/filter-by-natural-language", response_model=NaturalLanguageResponse)
def filter_by_natural_language(
    query: str = Query(..., description="Natural language query"),
    store: StringStore = Depends(get_store),
):
    """
    Filter strings using natural language queries.
    Example: "all single word palindromic strings"
    """
    if not query.strip():
        raise MissingFieldError("Query parameter 'query' is required")

    filters = parse_natural_language_query(query)
    check_filter_conflicts(filters)

    strings = apply_filters(filters, store.enumerate())
    return NaturalLanguageResponse(
        data=strings,
        count=len(strings),
        interpreted_query=InterpretedQuery(original=query, parsed_filters=filters),
    )


@router.get("/strings/{string_value:path}", response_model=StringRecord)
def get_string(string_value: str, store: StringStore = Depends(get_store)):
    """
    Get analysis for a specific string.
    Returns 404 if string doesn't exist.
    """
    record = store.find_by_value(string_value)
    if record is None:
        raise StringNotFoundError()
    return record


@router.delete("/strings/{string_value:path}", status_code=status.HTTP_204_NO_CONTENT)
def delete_string(string_value: str, store: StringStore = Depends(get_store)):
    """
    Delete a string from the system.
    Returns 404 if string doesn't exist.
    """
    record = store.remove_by_value(string_value)
    if record is None:
        raise StringNotFoundError()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
