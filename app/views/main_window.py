"""MainWindow: drop zone, board configuration and the rendered board."""

from __future__ import annotations

from typing import Any

from PySide6.QtCore import Qt, Signal
from PySide6.QtGui import QImage, QPixmap
from PySide6.QtWidgets import (
    QComboBox,
    QFileDialog,
    QFrame,
    QGridLayout,
    QHBoxLayout,
    QLabel,
    QListWidget,
    QMainWindow,
    QPushButton,
    QScrollArea,
    QVBoxLayout,
    QWidget,
)
from loguru import logger

from app.viewmodels.board_vm import BoardVM
from app.viewmodels.person_vm import PersonVM
from app.views.constants import (
    CARD_IMAGE_HEIGHT_RATIO,
    DROP_ZONE_ACTIVE_STYLE,
    DROP_ZONE_IDLE_STYLE,
    ERROR_CARD_STYLE,
    GRID_SIZE_CHOICES,
    GRID_SPACING_PX,
    IMAGE_FILE_FILTER,
    PAGE_SPACING_PX,
    PAGE_STYLE,
    PAPER_SIZE_CHOICES,
    PREVIEW_PX_PER_MM,
    WINDOW_TITLE,
)
from app.views.file_tasks import FileTaskRunner
from infrastructure.image_service import decode_data_url


class MainWindow(QMainWindow):
    """Main application window.

    File reads run on the thread pool and come back through `fileRead` /
    `fileFailed`, whose slots run on the GUI thread.
    """

    fileRead = Signal(str, str)  # filename, data URL
    fileFailed = Signal(str, str)  # path, reason

    def __init__(self, vm: BoardVM, image_service: Any) -> None:
        super().__init__()
        self._vm = vm
        self._runner = FileTaskRunner(service=image_service, receiver=self)

        self.setWindowTitle(WINDOW_TITLE)
        self.setAcceptDrops(True)
        self._setup_ui()

        self.fileRead.connect(self._on_file_read)
        self.fileFailed.connect(self._on_file_failed)

    def _setup_ui(self) -> None:
        central = QWidget(self)
        root = QVBoxLayout(central)

        controls = QHBoxLayout()
        controls.addWidget(QLabel("Grille"))
        self.grid_combo = QComboBox()
        self.grid_combo.addItems([f"{n} x {n}" for n in GRID_SIZE_CHOICES])
        self.grid_combo.setCurrentIndex(GRID_SIZE_CHOICES.index(self._vm.config.grid_size))
        self.grid_combo.currentIndexChanged.connect(self._on_grid_changed)
        controls.addWidget(self.grid_combo)

        controls.addWidget(QLabel("Papier"))
        self.paper_combo = QComboBox()
        self.paper_combo.addItems(PAPER_SIZE_CHOICES)
        self.paper_combo.setCurrentText(self._vm.config.paper_size.value)
        self.paper_combo.currentTextChanged.connect(self._on_paper_changed)
        controls.addWidget(self.paper_combo)

        open_btn = QPushButton("Ajouter des photos…")
        open_btn.clicked.connect(self.on_select_files)
        controls.addWidget(open_btn)
        controls.addStretch(1)
        root.addLayout(controls)

        self.drop_zone = QLabel("Déposez les photos ici")
        self.drop_zone.setAlignment(Qt.AlignCenter)
        self.drop_zone.setStyleSheet(DROP_ZONE_IDLE_STYLE)
        root.addWidget(self.drop_zone)

        self.error_list = QListWidget()
        self.error_list.setMaximumHeight(120)
        root.addWidget(self.error_list)

        self.board_area = QScrollArea()
        self.board_area.setWidgetResizable(True)
        root.addWidget(self.board_area, 1)

        self.setCentralWidget(central)
        self.refresh_board()

    # Board
    def refresh_board(self) -> None:
        """Rebuild the paged board and the error list from the view-model.

        Each page is drawn at the selected paper's proportions, split into
        `grid_size` x `grid_size` cards.
        """
        page_w_mm, page_h_mm = self._vm.page_size_mm()
        card_w_mm, card_h_mm = self._vm.card_size_mm()
        card_w = int(card_w_mm * PREVIEW_PX_PER_MM)
        card_h = int(card_h_mm * PREVIEW_PX_PER_MM)
        columns = self._vm.config.grid_size

        container = QWidget()
        pages_layout = QVBoxLayout(container)
        pages_layout.setSpacing(PAGE_SPACING_PX)
        pages = self._vm.pages()
        for page_records in pages:
            page = QFrame()
            page.setObjectName("page")
            page.setStyleSheet(PAGE_STYLE)
            page.setFixedSize(
                int(page_w_mm * PREVIEW_PX_PER_MM), int(page_h_mm * PREVIEW_PX_PER_MM)
            )
            grid = QGridLayout(page)
            grid.setContentsMargins(0, 0, 0, 0)
            grid.setSpacing(GRID_SPACING_PX)
            for index, record in enumerate(page_records):
                card = self._build_card(PersonVM(record), card_w, card_h)
                grid.addWidget(card, index // columns, index % columns, Qt.AlignTop | Qt.AlignLeft)
            pages_layout.addWidget(page, 0, Qt.AlignHCenter)
        pages_layout.addStretch(1)
        self.board_area.setWidget(container)

        self.error_list.clear()
        for record in self._vm.errored:
            self.error_list.addItem(f"{record.name}: {record.error_message}")
        self.statusBar().showMessage(
            f"{self._vm.record_count} photo(s) sur {len(pages)} page(s) "
            f"{self._vm.config.paper_size.value}, {len(self._vm.errored)} en erreur"
        )

    def _build_card(self, person: PersonVM, width: int, height: int) -> QWidget:
        card = QFrame()
        card.setObjectName("card")
        card.setFixedSize(width, height)
        layout = QVBoxLayout(card)
        layout.setContentsMargins(2, 2, 2, 2)
        picture = QLabel()
        picture.setAlignment(Qt.AlignCenter)
        pixmap = self._to_pixmap(person.record.image)
        if pixmap is not None:
            picture.setPixmap(
                pixmap.scaled(
                    width - 4,
                    int(height * CARD_IMAGE_HEIGHT_RATIO),
                    Qt.KeepAspectRatio,
                    Qt.SmoothTransformation,
                )
            )
        layout.addWidget(picture, 1)
        caption = QLabel(person.caption)
        caption.setAlignment(Qt.AlignCenter)
        layout.addWidget(caption)
        year = QLabel(person.year)
        year.setAlignment(Qt.AlignCenter)
        layout.addWidget(year)
        if person.is_error:
            card.setStyleSheet(ERROR_CARD_STYLE)
            card.setToolTip(person.tooltip)
        return card

    @staticmethod
    def _to_pixmap(image: str | None) -> QPixmap | None:
        if not image:
            return None
        try:
            qimg = QImage.fromData(decode_data_url(image))
        except ValueError as ex:
            logger.warning("Unusable image reference: {}", ex)
            return None
        if qimg.isNull():
            return None
        return QPixmap.fromImage(qimg)

    # Configuration
    def _on_grid_changed(self, index: int) -> None:
        self._vm.set_grid_size(GRID_SIZE_CHOICES[index])
        self.refresh_board()

    def _on_paper_changed(self, value: str) -> None:
        self._vm.set_paper_size(value)
        self.refresh_board()

    # File intake
    def on_select_files(self) -> None:
        paths, _ = QFileDialog.getOpenFileNames(self, "Ajouter des photos", "", IMAGE_FILE_FILTER)
        if paths:
            self._runner.request_many(paths)

    def dragEnterEvent(self, event) -> None:  # noqa: N802
        if event.mimeData().hasUrls():
            event.acceptProposedAction()
            self.drop_zone.setStyleSheet(DROP_ZONE_ACTIVE_STYLE)

    def dragLeaveEvent(self, event) -> None:  # noqa: N802
        self.drop_zone.setStyleSheet(DROP_ZONE_IDLE_STYLE)
        super().dragLeaveEvent(event)

    def dropEvent(self, event) -> None:  # noqa: N802
        self.drop_zone.setStyleSheet(DROP_ZONE_IDLE_STYLE)
        paths = [u.toLocalFile() for u in event.mimeData().urls() if u.isLocalFile()]
        queued = self._runner.request_many(paths)
        logger.info("Dropped {} file(s), {} queued", len(paths), queued)
        event.acceptProposedAction()

    def _on_file_read(self, filename: str, image: str) -> None:
        self._vm.process_file(filename, image)
        self.refresh_board()

    def _on_file_failed(self, path: str, reason: str) -> None:
        self.statusBar().showMessage(f"Lecture impossible: {path} ({reason})", 5000)
