"""Core domain models for board records and board configuration."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

NAMING_CONVENTION_ERROR = (
    "Le nom du fichier ne correspond pas à la convention de nommage "
    "(NOM Prénom VILLE Année de 1ère inscription AAAA)"
)

MIN_GRID_SIZE = 1
MAX_GRID_SIZE = 6


@dataclass
class PersonRecord:
    """A single person parsed from an image filename."""

    name: str
    city: str
    year: str
    # Opaque image reference (data URL), passed through unchanged
    image: str | None = None
    error_message: str = ""

    @property
    def has_error(self) -> bool:
        """True when the filename did not follow the naming convention."""
        return bool(self.error_message)


class PaperSize(str, Enum):
    """Supported paper formats, with dimensions in millimetres."""

    A4 = "A4"
    A5 = "A5"
    A6 = "A6"

    @property
    def dimensions_mm(self) -> tuple[int, int]:
        return _PAPER_DIMENSIONS_MM[self]


_PAPER_DIMENSIONS_MM: dict[PaperSize, tuple[int, int]] = {
    PaperSize.A4: (210, 297),
    PaperSize.A5: (148, 210),
    PaperSize.A6: (105, 148),
}


@dataclass
class BoardConfig:
    """Grid and paper configuration for the printable board."""

    grid_size: int = 3
    paper_size: PaperSize = PaperSize.A4
