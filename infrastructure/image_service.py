"""Image file gating and data-URL encoding.

Only files whose guessed MIME type is `image/*` are ingested. No decoding or
validation of the pixel data is done here.
"""

from __future__ import annotations

import base64
import mimetypes
from pathlib import Path

from loguru import logger

from core.services.interfaces import IImageReader

# Formats mimetypes does not know on every platform
_EXTRA_TYPES = {
    ".heic": "image/heic",
    ".heif": "image/heif",
    ".webp": "image/webp",
}


def guess_mime_type(path: str) -> str | None:
    """Return the MIME type guessed from the file name, or None."""
    mime, _ = mimetypes.guess_type(path, strict=False)
    if mime is None:
        mime = _EXTRA_TYPES.get(Path(path).suffix.lower())
    return mime


def is_image_file(path: str) -> bool:
    """True if the file name maps to an `image/*` MIME type."""
    mime = guess_mime_type(path)
    return bool(mime) and mime.startswith("image/")


def encode_data_url(data: bytes, mime: str) -> str:
    """Build a `data:` URL carrying `data` base64-encoded."""
    payload = base64.b64encode(data).decode("ascii")
    return f"data:{mime};base64,{payload}"


def decode_data_url(url: str) -> bytes:
    """Return the raw bytes of a base64 `data:` URL."""
    header, sep, payload = url.partition(",")
    if not sep or not header.startswith("data:") or not header.endswith(";base64"):
        raise ValueError("Not a base64 data URL")
    return base64.b64decode(payload)


def read_as_data_url(path: str) -> str:
    """Read the file at `path` and return it as a data URL.

    Raises:
        OSError: When the file cannot be read.
    """
    p = Path(path)
    mime = guess_mime_type(str(p)) or "application/octet-stream"
    data = p.read_bytes()
    logger.debug("Read {} bytes from {} ({})", len(data), p, mime)
    return encode_data_url(data, mime)


class ImageService(IImageReader):
    """File-backed image reader used by the view-model."""

    def is_image(self, path: str) -> bool:
        return is_image_file(path)

    def read(self, path: str) -> str:
        return read_as_data_url(path)
