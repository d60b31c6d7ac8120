"""Sorting service for `PersonRecord` collections.

Names are compared with a `QCollator` bound to an explicit locale, so the
order does not depend on the process `LC_COLLATE` (which Qt resets when the
application starts). Case and accents only break ties: "de GAULLE" sorts
between "BERNARD" and "ÉLIE", and "ÉLIE" before "ZOLA".
"""

from __future__ import annotations

from collections.abc import Iterable
from functools import cmp_to_key

from PySide6.QtCore import QCollator, QLocale

from core.models import PersonRecord

DEFAULT_COLLATION_LOCALE = "fr_FR"


def make_collator(locale_name: str = DEFAULT_COLLATION_LOCALE) -> QCollator:
    """Return a collator for `locale_name` ("fr_FR", "en_US", ...)."""
    collator = QCollator(QLocale(locale_name))
    collator.setNumericMode(False)
    return collator


class SortService:
    """Provides sorting utilities for record lists."""

    def __init__(self, locale_name: str = DEFAULT_COLLATION_LOCALE) -> None:
        self._locale_name = locale_name
        self._collator = make_collator(locale_name)
        self._key = cmp_to_key(self.compare)

    @property
    def locale_name(self) -> str:
        return self._locale_name

    def compare(self, a: str, b: str) -> int:
        """Negative, zero or positive as `a` sorts before, with or after `b`."""
        return self._collator.compare(a, b)

    def sort_names(self, names: Iterable[str]) -> list[str]:
        return sorted(names, key=self._key)

    def sort_by_name(self, records: Iterable[PersonRecord]) -> list[PersonRecord]:
        """Return a new list of `records` sorted ascending by name.

        The sort is stable: records whose names compare equal keep their
        relative order.
        """
        return sorted(records, key=lambda r: self._key(r.name))

    def is_sorted(self, records: list[PersonRecord]) -> bool:
        """True if `records` is non-decreasing by name under the collation."""
        return all(self.compare(a.name, b.name) <= 0 for a, b in zip(records, records[1:]))
