from pydantic import BaseModel, Field, field_validator
from typing import Any, Dict, List

from string_analyzer.models import StringRecord


class StringCreate(BaseModel):
    value: str = Field(..., description="String to analyze")

    @field_validator("value")
    @classmethod
    def value_must_be_encodable(cls, value: str) -> str:
        # Lone surrogates survive JSON decoding but cannot be stored or echoed back
        try:
            value.encode("utf-8")
        except UnicodeEncodeError:
            raise ValueError("value must be valid Unicode text (lone surrogates are not allowed)")
        return value


class StringListResponse(BaseModel):
    data: List[StringRecord]
    count: int
    filters_applied: Dict[str, Any] = Field(default_factory=dict)


class InterpretedQuery(BaseModel):
    original: str
    parsed_filters: Dict[str, Any]


class NaturalLanguageResponse(BaseModel):
    data: List[StringRecord]
    count: int
    interpreted_query: InterpretedQuery
