from __future__ import annotations

from pathlib import Path
import sys

from PySide6.QtCore import QLocale
from PySide6.QtWidgets import QApplication
from loguru import logger

from app.viewmodels.board_vm import BoardVM
from app.views.main_window import MainWindow
from core.models import BoardConfig
from core.services.board_service import parse_paper_size, validate_grid_size
from core.services.record_store import RecordStore
from core.services.sort_service import DEFAULT_COLLATION_LOCALE, SortService
from infrastructure.image_service import ImageService
from infrastructure.logging import init_logging
from infrastructure.settings import JsonSettings

BASE_DIR = Path(__file__).parent


def _parse_board_config(settings: JsonSettings) -> BoardConfig:
    """Read `board.*` settings, keeping defaults for invalid values."""
    config = BoardConfig()
    try:
        config.grid_size = validate_grid_size(settings.get_int("board.grid_size", config.grid_size))
    except ValueError as ex:
        logger.warning("Ignoring board.grid_size: {}", ex)
    try:
        config.paper_size = parse_paper_size(settings.get("board.paper_size", config.paper_size))
    except ValueError as ex:
        logger.warning("Ignoring board.paper_size: {}", ex)
    return config


def _make_sorter(settings: JsonSettings) -> SortService:
    """Build the name sorter from `collation.locale` (defaults to French)."""
    name = settings.get_str("collation.locale") or DEFAULT_COLLATION_LOCALE
    if QLocale(name).language() == QLocale.Language.C:
        logger.warning("Unknown collation locale {}, using {}", name, DEFAULT_COLLATION_LOCALE)
        name = DEFAULT_COLLATION_LOCALE
    logger.info("Collation locale: {}", name)
    return SortService(name)


def main() -> int:
    settings = JsonSettings(BASE_DIR / "settings.json")
    log_level = settings.get_str("logging.level", "INFO") or "INFO"
    init_logging(settings.get_str("logging.dir"), log_level)

    app = QApplication(sys.argv)

    image_service = ImageService()
    store = RecordStore(_make_sorter(settings))
    vm = BoardVM(image_service, store=store, config=_parse_board_config(settings))

    # Paths given on the command line are loaded synchronously before showing the board
    if len(sys.argv) > 1:
        vm.handle_files(sys.argv[1:])

    win = MainWindow(vm=vm, image_service=image_service)
    win.show()

    return app.exec()


if __name__ == "__main__":
    raise SystemExit(main())
