"""ViewModel owning the record store and the board configuration."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from loguru import logger

from core.models import BoardConfig, PaperSize, PersonRecord
from core.services.board_service import (
    card_size_mm,
    paginate,
    parse_paper_size,
    validate_grid_size,
)
from core.services.filename_parser import parse_filename
from core.services.interfaces import IImageReader, IngestResult
from core.services.record_store import RecordStore


class BoardVM:
    """Main application view-model.

    Mediates between the file-ingestion side (paths or already-read images)
    and the UI, which reads `records`, `errored` and `pages`.
    """

    def __init__(
        self,
        image_reader: IImageReader,
        store: RecordStore | None = None,
        config: BoardConfig | None = None,
    ) -> None:
        """Create a BoardVM.

        Args:
            image_reader: Component with `is_image(path)` and `read(path)`.
            store: Record store (defaults to an empty `RecordStore`).
            config: Initial grid/paper configuration.
        """
        self._reader = image_reader
        self._store = store or RecordStore()
        self.config = config or BoardConfig()

    # Configuration
    def set_grid_size(self, size: int) -> None:
        self.config.grid_size = validate_grid_size(size)

    def set_paper_size(self, size: str | PaperSize) -> None:
        self.config.paper_size = parse_paper_size(size)

    # Ingestion
    def process_file(self, filename: str, image: str | None) -> PersonRecord:
        """Parse `filename`, attach `image` and upsert the result."""
        record = parse_filename(filename, image)
        if record.has_error:
            logger.warning("The file {} doesn't comply with the naming convention", filename)
        self._store.upsert(record)
        return record

    def handle_files(self, paths: Iterable[str]) -> IngestResult:
        """Read and process every image in `paths`, synchronously."""
        result = IngestResult()
        for path in paths:
            if not self._reader.is_image(path):
                logger.debug("Skipping non-image file {}", path)
                result.skipped.append(path)
                continue
            try:
                image = self._reader.read(path)
            except OSError as ex:
                logger.error("Failed to read {}: {}", path, ex)
                result.failed.append((path, str(ex)))
                continue
            filename = Path(path).name
            self.process_file(filename, image)
            result.accepted.append(filename)
        logger.info(
            "Ingested {} file(s), skipped {}, failed {}",
            len(result.accepted),
            len(result.skipped),
            len(result.failed),
        )
        return result

    # Views
    @property
    def records(self) -> list[PersonRecord]:
        return self._store.all()

    @property
    def errored(self) -> list[PersonRecord]:
        return self._store.errored()

    @property
    def record_count(self) -> int:
        """Number of records currently on the board."""
        return len(self._store)

    def pages(self) -> list[list[PersonRecord]]:
        """Records split into printable pages for the current grid size."""
        return paginate(self._store.all(), self.config.grid_size)

    def page_size_mm(self) -> tuple[int, int]:
        """Width and height of the selected paper."""
        return self.config.paper_size.dimensions_mm

    def card_size_mm(self) -> tuple[float, float]:
        """Width and height of one card on the selected paper and grid."""
        return card_size_mm(self.config.paper_size, self.config.grid_size)
