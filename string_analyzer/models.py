from datetime import datetime, timezone
from typing import Dict

from pydantic import BaseModel

from string_analyzer.utils import analyze_string


class StringProperties(BaseModel):
    length: int
    is_palindrome: bool
    unique_characters: int
    word_count: int
    sha256_hash: str
    character_frequency_map: Dict[str, int]

    class Config:
        frozen = True


class StringRecord(BaseModel):
    id: str  # SHA-256 hash of value
    value: str
    properties: StringProperties
    created_at: datetime

    class Config:
        frozen = True

    @classmethod
    def from_value(cls, value: str) -> "StringRecord":
        """Analyze a value once and wrap it as a new record stamped now (UTC)."""
        properties = StringProperties(**analyze_string(value))
        return cls(
            id=properties.sha256_hash,
            value=value,
            properties=properties,
            created_at=datetime.now(timezone.utc),
        )
