"""Audit prompt: built-in template and language substitution."""

from thumbaudit.prompt.audit_template import DEFAULT_AUDIT_TEMPLATE
from thumbaudit.prompt.template import (
    LANGUAGE_PLACEHOLDER,
    SUPPORTED_LANGUAGES,
    apply_language,
    is_template_file,
    load_template,
)

__all__ = [
    "DEFAULT_AUDIT_TEMPLATE",
    "LANGUAGE_PLACEHOLDER",
    "SUPPORTED_LANGUAGES",
    "apply_language",
    "is_template_file",
    "load_template",
]
