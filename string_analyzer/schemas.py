from pydantic import BaseModel
from typing import Any, Dict, List

from string_analyzer.models import StringRecord


class StringListResponse(BaseModel):
    data: List[StringRecord]
    count: int
    filters_applied: Dict[str, Any]


class InterpretedQuery(BaseModel):
    original: str
    parsed_filters: Dict[str, Any]


class NaturalLanguageResponse(BaseModel):
    filtered: List[StringRecord]
    count: int
    interpreted_query: InterpretedQuery


class ErrorResponse(BaseModel):
    success: bool = False
    error: str
