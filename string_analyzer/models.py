from pydantic import BaseModel, ConfigDict, Field
from typing import Dict
from datetime import datetime, timezone

from string_analyzer.utils import analyze_string


class StringProperties(BaseModel):
    model_config = ConfigDict(frozen=True)

    length: int
    is_palindrome: bool
    unique_characters: int  # count of non-alphanumeric, non-whitespace characters
    word_count: int
    sha256_hash: str
    character_frequency_map: Dict[str, int]


class StringRecord(BaseModel):
    """One stored analysis; immutable once created"""
    model_config = ConfigDict(frozen=True)

    id: str  # SHA-256 hex of value
    value: str
    properties: StringProperties
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def from_value(cls, value: str) -> "StringRecord":
        properties = StringProperties(**analyze_string(value))
        return cls(id=properties.sha256_hash, value=value, properties=properties)
