"""Server-rendered single page: upload form, report view and export links."""

import logging
from pathlib import Path
from typing import Sequence

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates
from starlette.datastructures import UploadFile

from backend.dependencies import get_session
from backend.routes.uploads import MAX_UPLOAD_BYTES, store_screenshot
from thumbaudit.audit.session import AuditSession
from thumbaudit.errors import SessionBusyError, TemplateFileError, UnsupportedImageError
from thumbaudit.prompt.template import SUPPORTED_LANGUAGES, decode_template, is_template_file
from thumbaudit.report.html import render_sections_html

logger = logging.getLogger(__name__)
router = APIRouter()
templates = Jinja2Templates(directory=str(Path(__file__).resolve().parent.parent / "templates"))

# (form field, label, competitor index or None for the own-channel slot)
SCREENSHOT_FIELDS = (
    ("own", "Upload Your 'Most Popular' Screenshot", None),
    ("competitor_1", "Competitor 1 Screenshot", 0),
    ("competitor_2", "Competitor 2 Screenshot", 1),
    ("competitor_3", "Competitor 3 (Optional)", 2),
)


def _render(
    request: Request,
    session: AuditSession,
    errors: Sequence[str] = (),
    status_code: int = 200,
) -> HTMLResponse:
    languages = list(SUPPORTED_LANGUAGES)
    if session.language not in languages:
        languages.append(session.language)
    slots = []
    for field, label, index in SCREENSHOT_FIELDS:
        image = session.own_image if index is None else session.competitor_images[index]
        slots.append({"field": field, "label": label, "filename": image.filename if image else None})
    return templates.TemplateResponse(
        request,
        "index.html",
        {
            "session": session,
            "slots": slots,
            "languages": languages,
            "sections": render_sections_html(session.sections),
            "errors": list(errors),
        },
        status_code=status_code,
    )


async def _read_limited(upload: UploadFile, errors: list[str]) -> bytes | None:
    content = await upload.read()
    if len(content) > MAX_UPLOAD_BYTES:
        errors.append(
            f"{upload.filename}: file too large. Maximum size is {MAX_UPLOAD_BYTES // (1024 * 1024)} MB."
        )
        return None
    return content


@router.get("/", response_class=HTMLResponse)
async def index(request: Request, session: AuditSession = Depends(get_session)):
    return _render(request, session, errors=[session.error] if session.error else [])


@router.post("/", response_class=HTMLResponse)
async def submit(request: Request, session: AuditSession = Depends(get_session)):
    """Store any newly chosen files, then generate the audit."""
    form = await request.form()
    errors: list[str] = []

    for field, _, index in SCREENSHOT_FIELDS:
        upload = form.get(field)
        # Browsers send an empty file part for untouched inputs
        if not isinstance(upload, UploadFile) or not upload.filename:
            continue
        content = await _read_limited(upload, errors)
        if content is None:
            continue
        try:
            store_screenshot(session, index, upload.filename, upload.content_type, content)
        except UnsupportedImageError as e:
            errors.append(str(e))

    template_upload = form.get("template_file")
    if isinstance(template_upload, UploadFile) and template_upload.filename:
        if not is_template_file(template_upload.filename, template_upload.content_type):
            errors.append("Template must be a plain-text or markdown file (.txt or .md).")
        else:
            content = await _read_limited(template_upload, errors)
            if content is not None:
                try:
                    session.set_template(decode_template(content, filename=template_upload.filename))
                except TemplateFileError as e:
                    errors.append(str(e))
    elif form.get("reset_template"):
        session.set_template(None)

    language = form.get("language")
    if isinstance(language, str) and language:
        session.set_language(language)

    if errors:
        logger.warning("Rejected form submission: %s", "; ".join(errors))
        return _render(request, session, errors=errors, status_code=400)

    try:
        outcome = await session.run_audit()
    except SessionBusyError as e:
        return _render(request, session, errors=[str(e)], status_code=409)
    return _render(request, session, errors=[outcome.error] if outcome.error else [])
