"""Screenshot loading: MIME detection and validation for uploaded channel screenshots."""

from __future__ import annotations

from pathlib import Path

from thumbaudit.errors import UnsupportedImageError
from thumbaudit.schemas.models import ScreenshotImage

SUPPORTED_MIME_TYPES = ("image/png", "image/jpeg", "image/webp")

_SUFFIX_MIME = {
    ".png": "image/png",
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".webp": "image/webp",
}


def sniff_mime_type(data: bytes) -> str | None:
    """Return the image MIME type from the file signature, or None if unrecognised."""
    if data.startswith(b"\x89PNG\r\n\x1a\n"):
        return "image/png"
    if data.startswith(b"\xff\xd8\xff"):
        return "image/jpeg"
    if len(data) >= 12 and data[:4] == b"RIFF" and data[8:12] == b"WEBP":
        return "image/webp"
    return None


def screenshot_from_bytes(
    data: bytes,
    filename: str = "",
    content_type: str | None = None,
) -> ScreenshotImage:
    """
    Build a ScreenshotImage from raw upload bytes.

    The file signature wins over the declared content type and the filename suffix.
    Raises UnsupportedImageError for empty files and anything that is not PNG, JPEG or WebP.
    """
    if not data:
        raise UnsupportedImageError(f"Empty image file: {filename or '<upload>'}")
    mime_type = sniff_mime_type(data)
    if mime_type is None:
        declared = (content_type or "").split(";")[0].strip().lower()
        if declared in SUPPORTED_MIME_TYPES:
            mime_type = declared
        else:
            mime_type = _SUFFIX_MIME.get(Path(filename).suffix.lower())
    if mime_type not in SUPPORTED_MIME_TYPES:
        raise UnsupportedImageError(
            f"Unsupported image type for {filename or '<upload>'}: "
            f"expected one of {', '.join(SUPPORTED_MIME_TYPES)}"
        )
    return ScreenshotImage(data=data, mime_type=mime_type, filename=filename)


def load_screenshot(path: str | Path) -> ScreenshotImage:
    """
    Read a screenshot from disk.

    Raises FileNotFoundError if path does not exist; UnsupportedImageError for other file types.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Screenshot not found: {path}")
    return screenshot_from_bytes(path.read_bytes(), filename=path.name)
