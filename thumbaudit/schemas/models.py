"""Pydantic models: ReportSection, MarkdownTable, ScreenshotImage and the session outcome types."""

import base64
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class ReportSection(BaseModel):
    """A titled, hyphen-rule-delimited unit of the audit report."""

    model_config = ConfigDict(frozen=True)

    title: str
    content: str = ""


class MarkdownTable(BaseModel):
    """Pipe table pulled out of a section body. Rows are not reconciled with the header."""

    model_config = ConfigDict(frozen=True)

    head: list[str] = Field(default_factory=list)
    body: list[list[str]] = Field(default_factory=list)

    @property
    def column_count(self) -> int:
        return max([len(self.head)] + [len(row) for row in self.body])

    @property
    def is_empty(self) -> bool:
        return self.column_count == 0


class ScreenshotImage(BaseModel):
    """An uploaded channel screenshot."""

    model_config = ConfigDict(frozen=True)

    data: bytes
    mime_type: str = "image/jpeg"
    filename: str = ""

    def to_base64(self) -> str:
        return base64.b64encode(self.data).decode("ascii")

    def to_data_url(self) -> str:
        return f"data:{self.mime_type};base64,{self.to_base64()}"


class OperationStatus(str, Enum):
    IDLE = "idle"
    IN_FLIGHT = "in_flight"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


class FailureKind(str, Enum):
    VALIDATION = "validation"  # rejected before any network call
    GENERATION = "generation"  # the model call (or provider setup) failed


class AuditOutcome(BaseModel):
    """Result of one audit request: the report on success, a user-facing message on failure."""

    status: OperationStatus
    report: str | None = None
    sections: list[ReportSection] = Field(default_factory=list)
    error: str | None = None
    failure: FailureKind | None = None

    @property
    def ok(self) -> bool:
        return self.status == OperationStatus.SUCCEEDED


class ExportOutcome(BaseModel):
    """Result of one PDF/DOCX export. ``content`` is only set on success."""

    status: OperationStatus
    filename: str
    media_type: str
    content: bytes | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.status == OperationStatus.SUCCEEDED
