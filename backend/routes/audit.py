"""Audit API routes."""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel

from backend.dependencies import get_session
from thumbaudit.audit.session import AuditSession
from thumbaudit.errors import SessionBusyError
from thumbaudit.schemas.models import FailureKind, OperationStatus, ReportSection

logger = logging.getLogger(__name__)
router = APIRouter()


class AuditRequest(BaseModel):
    language: Optional[str] = None  # e.g. "English", "Urdu", "Roman Urdu"; keeps the current choice if omitted


class AuditResponse(BaseModel):
    status: OperationStatus
    report: Optional[str] = None
    sections: list[ReportSection] = []
    error: Optional[str] = None


@router.post("/audit", response_model=AuditResponse, status_code=status.HTTP_201_CREATED)
async def run_audit(
    request: Optional[AuditRequest] = None,
    session: AuditSession = Depends(get_session),
):
    """Generate the audit from the uploaded screenshots."""
    if request and request.language:
        session.set_language(request.language)
    try:
        outcome = await session.run_audit()
    except SessionBusyError as e:
        raise HTTPException(status_code=409, detail=str(e))

    if outcome.failure == FailureKind.VALIDATION:
        raise HTTPException(status_code=400, detail=outcome.error)
    if not outcome.ok:
        raise HTTPException(status_code=502, detail=outcome.error)
    return AuditResponse(status=outcome.status, report=outcome.report, sections=outcome.sections)


@router.get("/report", response_model=AuditResponse)
async def get_report(session: AuditSession = Depends(get_session)):
    """Current audit state: status, error message, raw report and parsed sections."""
    outcome = session.audit_outcome()
    return AuditResponse(
        status=outcome.status,
        report=outcome.report,
        sections=outcome.sections,
        error=outcome.error,
    )
