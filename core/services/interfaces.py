"""Core service interfaces and shared data structures.

This module defines simple dataclasses that describe the outcome of a file
ingestion batch, shared by the view-model and the UI layer.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class IngestResult:
    """Outcome of an ingestion batch.

    Attributes:
        accepted: File names that were parsed and stored.
        skipped: Paths ignored because they are not images.
        failed: Tuples of (path, reason) for files that could not be read.
    """

    accepted: list[str] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)
    failed: list[tuple[str, str]] = field(default_factory=list)

    @property
    def total(self) -> int:
        """Number of paths submitted."""
        return len(self.accepted) + len(self.skipped) + len(self.failed)


class IImageReader:
    """Interface for the component turning an image file into a reference."""

    def is_image(self, path: str) -> bool:
        """Return True if `path` should be ingested."""
        raise NotImplementedError

    def read(self, path: str) -> str:
        """Return an opaque image reference for `path`; raise OSError on failure."""
        raise NotImplementedError
