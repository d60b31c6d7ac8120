from __future__ import annotations

from pathlib import Path
from typing import Any

from PySide6.QtCore import QObject, QRunnable, QThreadPool
from loguru import logger


class _FileReadTask(QRunnable):
    """QRunnable reading one image file in the background.

    Emits `receiver.fileRead(filename, image)` on success or
    `receiver.fileFailed(path, reason)` when the read fails. The receiver is
    expected to own Qt `Signal(str, str)` attributes with those names; slots
    connected to them run on the receiver's thread, so stores are updated one
    completion at a time.
    """

    def __init__(self, *, path: str, service: Any, receiver: QObject) -> None:
        super().__init__()
        self._path = path
        self._service = service
        self._receiver = receiver

    def run(self) -> None:  # type: ignore[override]
        try:
            image = self._service.read(self._path)
        except OSError as ex:
            logger.error("File read task failed for {}: {}", self._path, ex)
            self._receiver.fileFailed.emit(self._path, str(ex))  # type: ignore[attr-defined]
            return
        self._receiver.fileRead.emit(Path(self._path).name, image)  # type: ignore[attr-defined]


class FileTaskRunner:
    """Dispatches one read task per image file to the global thread pool."""

    def __init__(self, *, service: Any, receiver: QObject) -> None:
        self._service = service
        self._receiver = receiver
        self._pool = QThreadPool.globalInstance()

    def request_read(self, path: str) -> bool:
        """Queue `path` for reading. Returns False when it is not an image."""
        if not self._service.is_image(path):
            logger.debug("Skipping non-image file {}", path)
            return False
        self._pool.start(_FileReadTask(path=path, service=self._service, receiver=self._receiver))
        return True

    def request_many(self, paths: list[str]) -> int:
        """Queue every image in `paths`; return how many were queued."""
        return sum(1 for p in paths if self.request_read(p))
