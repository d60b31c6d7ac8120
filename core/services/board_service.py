"""Board layout helpers: grid validation and pagination."""

from __future__ import annotations

from collections.abc import Sequence

from core.models import MAX_GRID_SIZE, MIN_GRID_SIZE, PaperSize, PersonRecord


def validate_grid_size(size: int) -> int:
    """Return `size` as int, raising ValueError when out of range."""
    value = int(size)
    if not MIN_GRID_SIZE <= value <= MAX_GRID_SIZE:
        raise ValueError(
            f"Grid size must be between {MIN_GRID_SIZE} and {MAX_GRID_SIZE}: {size}"
        )
    return value


def parse_paper_size(value: str | PaperSize) -> PaperSize:
    """Return the `PaperSize` for `value` ("A4", "a5", ...)."""
    if isinstance(value, PaperSize):
        return value
    try:
        return PaperSize(str(value).strip().upper())
    except ValueError:
        allowed = ", ".join(p.value for p in PaperSize)
        raise ValueError(f"Unsupported paper size {value!r} (expected one of {allowed})") from None


def cards_per_page(grid_size: int) -> int:
    """Number of cards on one printed page."""
    return grid_size * grid_size


def paginate(records: Sequence[PersonRecord], grid_size: int) -> list[list[PersonRecord]]:
    """Split `records` into pages of `grid_size` x `grid_size` cards.

    Order is preserved. An empty input yields no pages.
    """
    per_page = cards_per_page(validate_grid_size(grid_size))
    return [list(records[i : i + per_page]) for i in range(0, len(records), per_page)]


def card_size_mm(paper_size: PaperSize, grid_size: int) -> tuple[float, float]:
    """Width and height of one card when the page is split evenly."""
    width, height = paper_size.dimensions_mm
    n = validate_grid_size(grid_size)
    return width / n, height / n
