"""Pydantic models: single source of truth for all data shapes."""

from thumbaudit.schemas.models import (
    AuditOutcome,
    ExportOutcome,
    FailureKind,
    MarkdownTable,
    OperationStatus,
    ReportSection,
    ScreenshotImage,
)

__all__ = [
    "AuditOutcome",
    "ExportOutcome",
    "FailureKind",
    "MarkdownTable",
    "OperationStatus",
    "ReportSection",
    "ScreenshotImage",
]
