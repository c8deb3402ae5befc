"""Input loading: channel screenshots."""

from thumbaudit.ingest.screenshots import (
    SUPPORTED_MIME_TYPES,
    load_screenshot,
    screenshot_from_bytes,
    sniff_mime_type,
)

__all__ = [
    "SUPPORTED_MIME_TYPES",
    "load_screenshot",
    "screenshot_from_bytes",
    "sniff_mime_type",
]
