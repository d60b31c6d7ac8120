"""In-memory store of board records keyed by name."""

from __future__ import annotations

import threading

from core.models import PersonRecord
from core.services.sort_service import SortService


class RecordStore:
    """Sorted, name-deduplicated collection of `PersonRecord`.

    `upsert` is the only mutation. It is atomic with respect to other upserts
    and reads, so it may be called from several file-read completions in any
    order. When two records share a name, the last one applied wins.
    """

    def __init__(self, sorter: SortService | None = None) -> None:
        self._sorter = sorter or SortService()
        self._records: list[PersonRecord] = []
        self._lock = threading.Lock()

    def upsert(self, record: PersonRecord) -> None:
        """Replace any record with the same name, then re-sort."""
        with self._lock:
            kept = [r for r in self._records if r.name != record.name]
            kept.append(record)
            self._records = self._sorter.sort_by_name(kept)

    def all(self) -> list[PersonRecord]:
        """Return the records in name order."""
        with self._lock:
            return list(self._records)

    def errored(self) -> list[PersonRecord]:
        """Return the records carrying an error message, in name order."""
        return [r for r in self.all() if r.error_message]

    def get(self, name: str) -> PersonRecord | None:
        """Return the record named `name`, or None."""
        for r in self.all():
            if r.name == name:
                return r
        return None

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.get(name) is not None

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)
