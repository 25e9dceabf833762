from fastapi import APIRouter, Depends, Query, Request, Response, status
from typing import Optional
import json
import logging

from string_analyzer import schemas
from string_analyzer.exceptions import MissingFieldError, ValidationError, WrongTypeError
from string_analyzer.filters import FilterSet
from string_analyzer.models import StringRecord
from string_analyzer.nl_parser import interpret_query
from string_analyzer.store import StringStore, get_store
from string_analyzer.validators import validate_create_payload

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/strings", response_model=StringRecord, status_code=status.HTTP_201_CREATED)
async def create_string(request: Request, store: StringStore = Depends(get_store)):
    """
    Analyze and store a string.
    Returns 400 for a missing value, 422 for a non-string value, 409 if it already exists.
    """
    try:
        payload = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        raise MissingFieldError("Invalid request body or missing 'value' field")

    value = validate_create_payload(payload)
    return store.create(value)


@router.get("/strings", response_model=schemas.StringListResponse)
def get_all_strings(
    is_palindrome: Optional[bool] = Query(None, description="Filter by palindrome status"),
    min_length: Optional[int] = Query(None, ge=0, description="Minimum string length"),
    max_length: Optional[int] = Query(None, ge=0, description="Maximum string length"),
    word_count: Optional[int] = Query(None, ge=0, description="Exact word count"),
    contains_character: Optional[str] = Query(None, min_length=1, description="Substring that must be present"),
    store: StringStore = Depends(get_store)
):
    """
    Get all strings with optional filtering.
    """
    if min_length is not None and max_length is not None and min_length > max_length:
        raise ValidationError("min_length cannot be greater than max_length")

    filters = FilterSet(
        is_palindrome=is_palindrome,
        min_length=min_length,
        max_length=max_length,
        word_count=word_count,
        contains_character=contains_character
    )
    strings = store.filter(filters)

    return schemas.StringListResponse(
        data=strings,
        count=len(strings),
        filters_applied=filters.applied()
    )


@router.get("/strings/filter-by-natural-language", response_model=schemas.NaturalLanguageResponse)
def filter_by_natural_language(request: Request, store: StringStore = Depends(get_store)):
    """
    Filter strings using natural language queries.
    Example: "all single word palindromic strings"
    """
    values = request.query_params.getlist("query")
    if len(values) > 1:
        raise WrongTypeError("Query must be a single string")
    if not values or not values[0].strip():
        raise MissingFieldError("Missing 'query' parameter")

    query = values[0]
    filters = interpret_query(query)
    strings = store.filter(filters)

    return schemas.NaturalLanguageResponse(
        filtered=strings,
        count=len(strings),
        interpreted_query=schemas.InterpretedQuery(
            original=query,
            parsed_filters=filters.applied()
        )
    )


@router.get("/strings/{string_value:path}", response_model=StringRecord)
def get_string(string_value: str, store: StringStore = Depends(get_store)):
    """
    Get analysis for a specific string.
    Returns 404 if string doesn't exist.
    """
    return store.get_by_value(string_value)


@router.delete("/strings/{string_value:path}", status_code=status.HTTP_204_NO_CONTENT)
def delete_string(string_value: str, store: StringStore = Depends(get_store)):
    """
    Delete a string from the system.
    Returns 404 if string doesn't exist.
    """
    store.delete(string_value)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
