"""Download API routes: PDF and DOCX export of the current report."""

import logging

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import Response

from backend.dependencies import get_session
from thumbaudit.audit.session import AuditSession
from thumbaudit.errors import SessionBusyError

logger = logging.getLogger(__name__)
router = APIRouter()

EXPORT_TYPES = ("pdf", "docx")


@router.get("/download/{file_type}")
async def download_report(file_type: str, session: AuditSession = Depends(get_session)):
    """Render the current report and send it as an attachment."""
    if file_type not in EXPORT_TYPES:
        raise HTTPException(status_code=400, detail=f"Unknown file type: {file_type}")
    if session.report is None:
        raise HTTPException(status_code=404, detail="Audit report not found. Run the audit first.")

    try:
        if file_type == "pdf":
            outcome = await session.export_pdf()
        else:
            outcome = await session.export_docx()
    except SessionBusyError as e:
        raise HTTPException(status_code=409, detail=str(e))

    if not outcome.ok:
        raise HTTPException(status_code=500, detail=outcome.error)

    return Response(
        content=outcome.content,
        media_type=outcome.media_type,
        headers={"Content-Disposition": f'attachment; filename="{outcome.filename}"'},
    )
