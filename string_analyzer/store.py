import logging
import threading
from typing import Callable, List, Optional

from fastapi import Request

from string_analyzer.exceptions import ConflictError, InternalError, NotFoundError
from string_analyzer.filters import FilterSet, apply_filters
from string_analyzer.models import StringRecord

logger = logging.getLogger(__name__)


class StringStore:
    """
    In-memory, insertion-ordered collection of analysis records.

    Lookups are linear scans keyed on the exact string value. A lock guards
    the list because FastAPI runs sync endpoints on a worker threadpool.
    """

    def __init__(self):
        self._records: List[StringRecord] = []
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._records)

    def _find(self, value: str) -> Optional[StringRecord]:
        for record in self._records:
            if record.value == value:
                return record
        return None

    def create(self, value: str) -> StringRecord:
        """Analyze and store a string; ConflictError if the value is already stored"""
        with self._lock:
            if self._find(value) is not None:
                raise ConflictError("String already exists in the system")

            try:
                record = StringRecord.from_value(value)
            except Exception as e:
                logger.exception(f"Error creating string analysis: {e}")
                raise InternalError("Error creating string analysis") from e
            self._records.append(record)

        logger.info(f"Stored string analysis {record.id}")
        return record

    def get_by_value(self, value: str) -> StringRecord:
        with self._lock:
            record = self._find(value)
        if record is None:
            raise NotFoundError("String does not exist in the system")
        return record

    def delete(self, value: str) -> None:
        with self._lock:
            record = self._find(value)
            if record is None:
                raise NotFoundError("String does not exist in the system")
            self._records.remove(record)

        logger.info(f"Deleted string analysis {record.id}")

    def list(self, predicate: Optional[Callable[[StringRecord], bool]] = None) -> List[StringRecord]:
        """Full scan in insertion order; no predicate returns everything"""
        with self._lock:
            snapshot = list(self._records)
        if predicate is None:
            return snapshot
        return [record for record in snapshot if predicate(record)]

    def filter(self, filters: FilterSet) -> List[StringRecord]:
        return apply_filters(self.list(), filters)


def get_store(request: Request) -> StringStore:
    """Dependency to provide the application's record store."""
    return request.app.state.store
