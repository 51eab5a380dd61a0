"""
In-memory record store, one per entity type. Records are plain dicts kept in insertion order.
Callers hold `lock` across any lookup-then-mutate sequence.
"""
import threading
from typing import Any, Iterable

from grubdash.ids import loosely_equal

Record = dict[str, Any]


class MemoryStore:
    def __init__(self, records: Iterable[Record] | None = None):
        self._records: list[Record] = list(records or [])
        self.lock = threading.RLock()

    def all(self) -> list[Record]:
        return list(self._records)

    def find(self, record_id) -> Record | None:
        """First record whose id loosely equals record_id."""
        for record in self._records:
            if loosely_equal(record.get("id"), record_id):
                return record
        return None

    def insert(self, record: Record) -> Record:
        self._records.append(record)
        return record

    def index_of(self, record: Record) -> int:
        """Position of this exact record object, or -1."""
        for index, candidate in enumerate(self._records):
            if candidate is record:
                return index
        return -1

    def remove(self, index: int) -> Record:
        return self._records.pop(index)

    def __len__(self) -> int:
        return len(self._records)
