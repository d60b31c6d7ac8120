"""
UI/view constants centralized for reuse across view modules.
"""

from __future__ import annotations

from core.models import MAX_GRID_SIZE, MIN_GRID_SIZE, PaperSize

WINDOW_TITLE: str = "Trombinoscope"

GRID_SIZE_CHOICES: list[int] = list(range(MIN_GRID_SIZE, MAX_GRID_SIZE + 1))
PAPER_SIZE_CHOICES: list[str] = [p.value for p in PaperSize]

# On-screen scale of the paper preview
PREVIEW_PX_PER_MM: float = 2.0
# Share of the card height given to the photo, the rest holds the captions
CARD_IMAGE_HEIGHT_RATIO: float = 0.7
GRID_SPACING_PX: int = 0
PAGE_SPACING_PX: int = 16
PAGE_STYLE: str = "QFrame#page { background: white; border: 1px solid #bbb; }"
ERROR_CARD_STYLE: str = "QFrame#card { border: 2px solid #c0392b; }"
DROP_ZONE_IDLE_STYLE: str = "border: 2px dashed #888; padding: 16px;"
DROP_ZONE_ACTIVE_STYLE: str = "border: 2px dashed #2e86de; padding: 16px; background: #eaf2fb;"

IMAGE_FILE_FILTER: str = "Images (*.png *.jpg *.jpeg *.gif *.bmp *.webp *.heic)"
