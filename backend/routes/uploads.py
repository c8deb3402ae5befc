"""Upload API routes: channel screenshots and the optional custom template."""

import logging

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile
from pydantic import BaseModel

from backend.dependencies import get_session
from thumbaudit.audit.session import COMPETITOR_SLOTS, AuditSession
from thumbaudit.config import get_settings
from thumbaudit.errors import TemplateFileError, UnsupportedImageError
from thumbaudit.ingest.screenshots import screenshot_from_bytes
from thumbaudit.prompt.template import decode_template, is_template_file

logger = logging.getLogger(__name__)
router = APIRouter()
settings = get_settings()

MAX_UPLOAD_BYTES = settings.max_upload_bytes

COMPETITOR_SLOT_PREFIX = "competitor-"


class SlotsResponse(BaseModel):
    own: str | None
    competitors: list[str | None]
    audit_ready: bool


class TemplateResponse(BaseModel):
    custom: bool
    length: int


def _slots(session: AuditSession) -> SlotsResponse:
    return SlotsResponse(
        own=session.own_image.filename if session.own_image else None,
        competitors=[img.filename if img else None for img in session.competitor_images],
        audit_ready=session.is_audit_ready,
    )


def _competitor_index(slot: str) -> int | None:
    """'own' -> None, 'competitor-N' -> N-1. Raises 404 for anything else."""
    if slot == "own":
        return None
    if slot.startswith(COMPETITOR_SLOT_PREFIX):
        number = slot[len(COMPETITOR_SLOT_PREFIX):]
        if number.isdigit() and 1 <= int(number) <= COMPETITOR_SLOTS:
            return int(number) - 1
    raise HTTPException(status_code=404, detail=f"Unknown image slot: {slot}")


async def read_upload(upload: UploadFile) -> bytes:
    """Read an upload and enforce the size limit."""
    content = await upload.read()
    if len(content) > MAX_UPLOAD_BYTES:
        raise HTTPException(
            status_code=413,
            detail=f"File too large. Maximum size is {MAX_UPLOAD_BYTES // (1024 * 1024)} MB.",
        )
    return content


def store_screenshot(
    session: AuditSession,
    index: int | None,
    filename: str,
    content_type: str | None,
    content: bytes,
) -> None:
    """Validate and store one screenshot in the own slot (index None) or a competitor slot."""
    image = screenshot_from_bytes(content, filename=filename, content_type=content_type)
    if index is None:
        session.set_own_image(image)
    else:
        session.set_competitor_image(index, image)
    logger.info(
        "Stored screenshot %s (%s, %d bytes) in slot %s",
        filename,
        image.mime_type,
        len(content),
        "own" if index is None else f"competitor-{index + 1}",
    )


@router.post("/images/{slot}", response_model=SlotsResponse)
async def upload_image(
    slot: str,
    image: UploadFile = File(..., description="PNG, JPEG or WebP screenshot"),
    session: AuditSession = Depends(get_session),
):
    """Store a screenshot in the own-channel slot or one of the three competitor slots."""
    index = _competitor_index(slot)
    content = await read_upload(image)
    try:
        store_screenshot(session, index, image.filename or "", image.content_type, content)
    except UnsupportedImageError as e:
        raise HTTPException(status_code=415, detail=str(e))
    return _slots(session)


@router.delete("/images/{slot}", response_model=SlotsResponse)
async def remove_image(slot: str, session: AuditSession = Depends(get_session)):
    """Clear a screenshot slot."""
    index = _competitor_index(slot)
    if index is None:
        session.set_own_image(None)
    else:
        session.set_competitor_image(index, None)
    return _slots(session)


@router.get("/images", response_model=SlotsResponse)
async def list_images(session: AuditSession = Depends(get_session)):
    return _slots(session)


@router.post("/template", response_model=TemplateResponse)
async def upload_template(
    template: UploadFile = File(..., description="Plain-text or markdown audit template"),
    session: AuditSession = Depends(get_session),
):
    """Replace the built-in audit template with an uploaded one."""
    if not is_template_file(template.filename, template.content_type):
        raise HTTPException(status_code=400, detail="Template must be a plain-text or markdown file")
    content = await read_upload(template)
    try:
        text = decode_template(content, filename=template.filename or "")
    except TemplateFileError as e:
        raise HTTPException(status_code=400, detail=str(e))
    session.set_template(text)
    return TemplateResponse(custom=True, length=len(text))


@router.delete("/template", response_model=TemplateResponse)
async def reset_template(session: AuditSession = Depends(get_session)):
    """Go back to the built-in audit template."""
    session.set_template(None)
    return TemplateResponse(custom=False, length=len(session.template))
