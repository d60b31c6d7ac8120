"""Lightweight view model wrapper around `PersonRecord`."""

from __future__ import annotations

from dataclasses import dataclass

from core.models import PersonRecord


@dataclass
class PersonVM:
    """Expose convenient properties for board cards."""

    record: PersonRecord

    @property
    def caption(self) -> str:
        """Name and city on one line, city omitted when unknown."""
        if self.record.city:
            return f"{self.record.name} ({self.record.city})"
        return self.record.name

    @property
    def year(self) -> str:
        return self.record.year

    @property
    def is_error(self) -> bool:
        """True if the card should be highlighted."""
        return self.record.has_error

    @property
    def tooltip(self) -> str:
        """Error message when present, else empty."""
        return self.record.error_message
