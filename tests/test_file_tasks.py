from __future__ import annotations

from pathlib import Path
import threading

from PySide6.QtCore import QThreadPool

from app.views.file_tasks import FileTaskRunner, _FileReadTask
from infrastructure.image_service import ImageService


class _Recorder:
    def __init__(self) -> None:
        self.calls: list[tuple] = []
        self._lock = threading.Lock()

    def emit(self, *args) -> None:
        with self._lock:
            self.calls.append(args)


class _Receiver:
    """Stands in for the window; exposes `fileRead` / `fileFailed` like its signals."""

    def __init__(self) -> None:
        self.fileRead = _Recorder()
        self.fileFailed = _Recorder()


def test_read_task_emits_file_read(tmp_path: Path):
    photo = tmp_path / "DOE John PARIS Année de 1ère inscription 2021.png"
    photo.write_bytes(b"\x01\x02")
    receiver = _Receiver()

    _FileReadTask(path=str(photo), service=ImageService(), receiver=receiver).run()

    assert receiver.fileFailed.calls == []
    [(filename, image)] = receiver.fileRead.calls
    assert filename == photo.name
    assert image.startswith("data:image/png;base64,")


def test_read_task_emits_file_failed(tmp_path: Path):
    missing = tmp_path / "absent.jpg"
    receiver = _Receiver()

    _FileReadTask(path=str(missing), service=ImageService(), receiver=receiver).run()

    assert receiver.fileRead.calls == []
    [(path, reason)] = receiver.fileFailed.calls
    assert path == str(missing)
    assert reason


def test_runner_skips_non_images_and_reads_the_rest(tmp_path: Path):
    names = [
        "A Jean PARIS Année de 1ère inscription 2020.jpg",
        "B Paul LYON Année de 1ère inscription 2021.png",
    ]
    for name in names:
        (tmp_path / name).write_bytes(b"x")
    (tmp_path / "notes.txt").write_text("x", encoding="utf-8")
    receiver = _Receiver()
    runner = FileTaskRunner(service=ImageService(), receiver=receiver)

    queued = runner.request_many([str(p) for p in sorted(tmp_path.iterdir())])
    assert QThreadPool.globalInstance().waitForDone(5000)

    assert queued == 2
    assert sorted(call[0] for call in receiver.fileRead.calls) == sorted(names)
    assert receiver.fileFailed.calls == []
