"""Exception types raised by the audit pipeline."""


class ThumbAuditError(Exception):
    """Base class for all thumbaudit errors."""


class ConfigurationError(ThumbAuditError):
    """Raised when a provider or setting is missing or unknown."""


class ValidationError(ThumbAuditError):
    """Raised when user input is rejected before any network call."""


class NotEnoughImagesError(ValidationError):
    """Fewer than three screenshots (own + competitors) were supplied."""

    def __init__(self, message: str | None = None):
        super().__init__(
            message
            or "Invalid number of screenshots provided. "
            "Expected your channel screenshot and at least 2 from competitors."
        )


class MissingTemplateError(ValidationError):
    """The audit template is empty or whitespace-only."""

    def __init__(self, message: str | None = None):
        super().__init__(message or "An audit report template must be provided.")


class UnsupportedImageError(ValidationError):
    """The uploaded file is not a PNG, JPEG or WebP image."""


class TemplateFileError(ValidationError):
    """The uploaded template is not a text or markdown file."""


class ReportGenerationError(ThumbAuditError):
    """The model call failed; the cause is logged, not carried in the message."""

    def __init__(self, message: str | None = None):
        super().__init__(message or "Failed to generate audit report from the AI model.")


class ExportError(ThumbAuditError):
    """PDF or DOCX rendering failed."""


class SessionBusyError(ThumbAuditError):
    """An audit or export is already in flight for this session."""
