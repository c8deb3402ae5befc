"""Audit prompt template: language substitution and user template files."""

from __future__ import annotations

from pathlib import Path

from thumbaudit.errors import TemplateFileError

LANGUAGE_PLACEHOLDER = "{{language}}"

# Languages offered by the UI; apply_language accepts any string
SUPPORTED_LANGUAGES: tuple[str, ...] = ("English", "Urdu", "Roman Urdu")

TEMPLATE_SUFFIXES = (".md", ".txt")


def apply_language(template: str, language: str, placeholder: str = LANGUAGE_PLACEHOLDER) -> str:
    """Replace the first placeholder occurrence with *language*, verbatim."""
    return template.replace(placeholder, language, 1)


def is_template_file(filename: str | None, content_type: str | None = None) -> bool:
    """True for plain-text or markdown files."""
    if content_type and content_type.split(";")[0].strip().lower().startswith("text/"):
        return True
    return bool(filename) and filename.lower().endswith(TEMPLATE_SUFFIXES)


def decode_template(data: bytes, filename: str = "") -> str:
    try:
        return data.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        raise TemplateFileError(f"Template {filename or '<upload>'} is not valid UTF-8 text") from e


def load_template(path: str | Path) -> str:
    """
    Read a user-supplied audit template.

    Raises FileNotFoundError if path does not exist; TemplateFileError for non-text files.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Template not found: {path}")
    if not is_template_file(path.name):
        raise TemplateFileError(f"Template must be a .txt or .md file: {path.name}")
    return decode_template(path.read_bytes(), filename=path.name)
