"""Audit session: upload slots, the audit request state and the export state for one page.

All state changes happen on the event loop. Only the blocking model call and the
renderers run in a worker thread, so a plain status field is enough to keep at most
one audit and one export in flight.
"""

from __future__ import annotations

import logging
from functools import partial
from pathlib import Path
from typing import Callable, Sequence

import anyio

from thumbaudit.audit.requester import generate_audit_report
from thumbaudit.errors import SessionBusyError, ValidationError
from thumbaudit.llm.base import LLMProvider
from thumbaudit.prompt.audit_template import DEFAULT_AUDIT_TEMPLATE
from thumbaudit.report.docx import DOCX_FILENAME, DOCX_MEDIA_TYPE, render_docx_report
from thumbaudit.report.parser import parse_report
from thumbaudit.report.pdf import PDF_FILENAME, PDF_MEDIA_TYPE, render_pdf_report
from thumbaudit.schemas.models import (
    AuditOutcome,
    ExportOutcome,
    FailureKind,
    OperationStatus,
    ReportSection,
    ScreenshotImage,
)

logger = logging.getLogger(__name__)

COMPETITOR_SLOTS = 3
MIN_COMPETITORS = 2

AUDIT_FAILED_MESSAGE = (
    "An error occurred while generating the audit. Please check your API key and try again."
)
NOT_READY_MESSAGE = (
    "Upload your channel screenshot and at least 2 competitor screenshots to run the audit."
)
NO_REPORT_MESSAGE = "There is no audit report to export yet."


class AuditSession:
    """State behind the single-page UI: one own screenshot, three competitor slots, one report."""

    def __init__(
        self,
        provider_factory: Callable[[], LLMProvider],
        language: str = "English",
        pdf_font_path: str | Path | None = None,
    ):
        self._provider_factory = provider_factory
        self._pdf_font_path = pdf_font_path
        self.own_image: ScreenshotImage | None = None
        self.competitor_images: list[ScreenshotImage | None] = [None] * COMPETITOR_SLOTS
        self.language = language
        self.custom_template: str | None = None

        self.audit_status = OperationStatus.IDLE
        self.report: str | None = None
        self.sections: tuple[ReportSection, ...] = ()
        self.error: str | None = None
        self.failure: FailureKind | None = None

        self.export_status = OperationStatus.IDLE
        self.export_error: str | None = None

    # ------------------------------------------------------------------
    # Inputs
    # ------------------------------------------------------------------

    @property
    def template(self) -> str:
        return self.custom_template if self.custom_template is not None else DEFAULT_AUDIT_TEMPLATE

    def set_template(self, template: str | None) -> None:
        """Use a custom template; None restores the built-in one."""
        self.custom_template = template

    def set_language(self, language: str) -> None:
        self.language = language

    def set_own_image(self, image: ScreenshotImage | None) -> None:
        self.own_image = image

    def set_competitor_image(self, index: int, image: ScreenshotImage | None) -> None:
        if not 0 <= index < COMPETITOR_SLOTS:
            raise IndexError(f"Competitor slot must be 0..{COMPETITOR_SLOTS - 1}, got {index}")
        self.competitor_images[index] = image

    @property
    def uploaded_competitors(self) -> list[ScreenshotImage]:
        return [img for img in self.competitor_images if img is not None]

    @property
    def is_audit_ready(self) -> bool:
        return self.own_image is not None and len(self.uploaded_competitors) >= MIN_COMPETITORS

    @property
    def is_auditing(self) -> bool:
        return self.audit_status == OperationStatus.IN_FLIGHT

    @property
    def is_exporting(self) -> bool:
        return self.export_status == OperationStatus.IN_FLIGHT

    # ------------------------------------------------------------------
    # Audit
    # ------------------------------------------------------------------

    def audit_outcome(self) -> AuditOutcome:
        return AuditOutcome(
            status=self.audit_status,
            report=self.report,
            sections=list(self.sections),
            error=self.error,
            failure=self.failure,
        )

    def _request_report(
        self,
        own_image: ScreenshotImage | None,
        competitors: Sequence[ScreenshotImage],
        template: str,
        language: str,
    ) -> str:
        llm = self._provider_factory()
        return generate_audit_report(own_image, competitors, template, language, llm)

    async def run_audit(self) -> AuditOutcome:
        """
        Run one audit with the current uploads.

        The previous report is discarded first. Always ends in SUCCEEDED or FAILED.
        Missing uploads are reported without touching the current state, the same
        as a disabled button. Raises SessionBusyError if an audit is already running.
        """
        if self.is_auditing:
            raise SessionBusyError("An audit is already being generated.")
        if not self.is_audit_ready:
            return AuditOutcome(
                status=OperationStatus.FAILED,
                error=NOT_READY_MESSAGE,
                failure=FailureKind.VALIDATION,
            )

        self.audit_status = OperationStatus.IN_FLIGHT
        self.error = None
        self.failure = None
        self.report = None
        self.sections = ()

        request = partial(
            self._request_report,
            self.own_image,
            self.uploaded_competitors,
            self.template,
            self.language,
        )
        try:
            report = await anyio.to_thread.run_sync(request)
        except ValidationError as e:
            logger.warning("Audit rejected: %s", e)
            self.error = str(e)
            self.failure = FailureKind.VALIDATION
            self.audit_status = OperationStatus.FAILED
        except Exception:
            logger.exception("Audit generation failed")
            self.error = AUDIT_FAILED_MESSAGE
            self.failure = FailureKind.GENERATION
            self.audit_status = OperationStatus.FAILED
        else:
            self.report = report
            self.sections = tuple(parse_report(report))
            self.audit_status = OperationStatus.SUCCEEDED
            logger.info("Audit succeeded with %d sections", len(self.sections))
        return self.audit_outcome()

    # ------------------------------------------------------------------
    # Export
    # ------------------------------------------------------------------

    async def export_pdf(self) -> ExportOutcome:
        renderer = partial(render_pdf_report, font_path=self._pdf_font_path)
        return await self._export(PDF_FILENAME, PDF_MEDIA_TYPE, renderer)

    async def export_docx(self) -> ExportOutcome:
        return await self._export(DOCX_FILENAME, DOCX_MEDIA_TYPE, render_docx_report)

    async def _export(
        self,
        filename: str,
        media_type: str,
        renderer: Callable[[Sequence[ReportSection]], bytes],
    ) -> ExportOutcome:
        # PDF and DOCX share one flag: one export at a time
        if self.is_exporting:
            raise SessionBusyError("An export is already running.")
        if self.report is None:
            return ExportOutcome(
                status=OperationStatus.FAILED,
                filename=filename,
                media_type=media_type,
                error=NO_REPORT_MESSAGE,
            )

        self.export_status = OperationStatus.IN_FLIGHT
        self.export_error = None
        sections = self.sections
        try:
            content = await anyio.to_thread.run_sync(renderer, sections)
        except Exception:
            logger.exception("Failed to export %s", filename)
            self.export_error = f"Failed to export {filename}."
            self.export_status = OperationStatus.FAILED
            return ExportOutcome(
                status=OperationStatus.FAILED,
                filename=filename,
                media_type=media_type,
                error=self.export_error,
            )
        self.export_status = OperationStatus.SUCCEEDED
        return ExportOutcome(
            status=OperationStatus.SUCCEEDED,
            filename=filename,
            media_type=media_type,
            content=content,
        )
