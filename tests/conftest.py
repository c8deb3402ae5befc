"""Pytest configuration and shared fixtures."""

from pathlib import Path

import pytest

from thumbaudit.audit.session import AuditSession
from thumbaudit.schemas.models import ScreenshotImage

# Only the signatures matter: images are passed through to the model untouched
PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00\x00\x00\rIHDR" + b"\x00" * 16
JPEG_BYTES = b"\xff\xd8\xff\xe0" + b"\x00\x10JFIF\x00" + b"\x00" * 16
WEBP_BYTES = b"RIFF\x24\x00\x00\x00WEBPVP8 " + b"\x00" * 16

SAMPLE_REPORT = """\
Overall Verdict
Your thumbnails are clear but blend in next to your competitors.
---
Scorecard
| Thumbnail | Clarity | Emotion |
|---|---|---|
| Yours | 7 | 5 |
| Competitor 1 | 8 | 9 |
---
Quick Wins
- Use bigger faces
- Cut the text to three words
1. Test a bright background
2. Add a curiosity gap
---
Final Note
"""


class FakeProvider:
    """Records each complete() call and returns a canned reply (or raises)."""

    def __init__(self, reply: str = SAMPLE_REPORT, error: Exception | None = None):
        self.reply = reply
        self.error = error
        self.calls: list[tuple[str, list[ScreenshotImage]]] = []

    def complete(self, prompt, images=(), **kwargs):
        self.calls.append((prompt, list(images)))
        if self.error is not None:
            raise self.error
        return self.reply


@pytest.fixture
def sample_report():
    return SAMPLE_REPORT


@pytest.fixture
def png_bytes():
    return PNG_BYTES


@pytest.fixture
def jpeg_bytes():
    return JPEG_BYTES


@pytest.fixture
def webp_bytes():
    return WEBP_BYTES


@pytest.fixture
def own_image():
    return ScreenshotImage(data=PNG_BYTES, mime_type="image/png", filename="own.png")


@pytest.fixture
def competitor_images():
    return [
        ScreenshotImage(data=JPEG_BYTES, mime_type="image/jpeg", filename="c1.jpg"),
        ScreenshotImage(data=PNG_BYTES, mime_type="image/png", filename="c2.png"),
        ScreenshotImage(data=WEBP_BYTES, mime_type="image/webp", filename="c3.webp"),
    ]


@pytest.fixture
def fake_llm():
    return FakeProvider()


@pytest.fixture
def failing_llm():
    return FakeProvider(error=RuntimeError("quota exceeded"))


@pytest.fixture
def session(fake_llm):
    """Fresh session wired to the fake provider."""
    return AuditSession(provider_factory=lambda: fake_llm)


@pytest.fixture
def ready_session(session, own_image, competitor_images):
    """Session with the own screenshot and two competitors uploaded."""
    session.set_own_image(own_image)
    session.set_competitor_image(0, competitor_images[0])
    session.set_competitor_image(1, competitor_images[1])
    return session


@pytest.fixture
def screenshot_files(tmp_path):
    """Own + three competitor screenshots written to disk, as paths."""
    paths = {
        "own": tmp_path / "own.png",
        "c1": tmp_path / "c1.jpg",
        "c2": tmp_path / "c2.png",
        "c3": tmp_path / "c3.webp",
    }
    paths["own"].write_bytes(PNG_BYTES)
    paths["c1"].write_bytes(JPEG_BYTES)
    paths["c2"].write_bytes(PNG_BYTES)
    paths["c3"].write_bytes(WEBP_BYTES)
    return {name: str(path) for name, path in paths.items()}


@pytest.fixture
def report_file(tmp_path) -> Path:
    path = tmp_path / "report.md"
    path.write_text(SAMPLE_REPORT, encoding="utf-8")
    return path


@pytest.fixture
def make_llm():
    """Factory for fake providers with a custom reply or error."""
    return FakeProvider
