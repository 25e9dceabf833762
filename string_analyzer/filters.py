from pydantic import BaseModel
from typing import Any, Dict, Iterable, List, Optional

from string_analyzer.models import StringRecord


class FilterSet(BaseModel):
    """
    Conjunction of optional predicates over stored records.
    A field left as None is not applied.
    """
    is_palindrome: Optional[bool] = None
    min_length: Optional[int] = None
    max_length: Optional[int] = None
    word_count: Optional[int] = None
    contains_character: Optional[str] = None

    def applied(self) -> Dict[str, Any]:
        """Echo of the filters that are actually set"""
        return self.model_dump(exclude_none=True)

    def matches(self, record: StringRecord) -> bool:
        props = record.properties

        if self.is_palindrome is not None and props.is_palindrome != self.is_palindrome:
            return False

        if self.min_length is not None and props.length < self.min_length:
            return False

        if self.max_length is not None and props.length > self.max_length:
            return False

        if self.word_count is not None and props.word_count != self.word_count:
            return False

        # Case-sensitive substring test against the original value
        if self.contains_character is not None and self.contains_character not in record.value:
            return False

        return True


def apply_filters(records: Iterable[StringRecord], filters: FilterSet) -> List[StringRecord]:
    """Keep records that satisfy every set predicate, preserving order"""
    return [record for record in records if filters.matches(record)]
