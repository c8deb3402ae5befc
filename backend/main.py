"""FastAPI backend for the AI YouTube Thumbnail Auditor."""

import logging
import sys
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from backend.sessions import SessionStore, attach_session_id
from thumbaudit.audit.session import AuditSession
from thumbaudit.config import get_settings
from thumbaudit.llm import provider_from_settings

logger = logging.getLogger(__name__)
logging.basicConfig(level=logging.INFO)

settings = get_settings()

app = FastAPI(
    title="ThumbAudit API",
    description="AI-powered audit of your YouTube thumbnails against your competitors'.",
    version="0.1.0",
    docs_url="/api/docs",
    redoc_url="/api/redoc",
)


def new_audit_session() -> AuditSession:
    return AuditSession(
        provider_factory=lambda: provider_from_settings(settings),
        language=settings.thumbaudit_default_language,
        pdf_font_path=settings.pdf_font_path,
    )


# One AuditSession per visitor, keyed by the session cookie
app.state.sessions = SessionStore(new_audit_session, ttl_seconds=settings.thumbaudit_session_ttl_seconds)
app.middleware("http")(attach_session_id)

logger.info(
    "LLM provider: %s (API key %s)",
    settings.thumbaudit_llm_provider,
    "configured" if settings.api_key_for(settings.thumbaudit_llm_provider) else "*** NOT SET ***",
)

# ---------------------------------------------------------------------------
# CORS
# ---------------------------------------------------------------------------
cors_origins = settings.cors_origin_list
cors_origin_regex = settings.cors_origin_regex
logger.info("CORS configured for origins: %s", cors_origins)
cors_kw: dict = {
    "allow_origins": cors_origins,
    "allow_credentials": True,
    "allow_methods": ["*"],
    "allow_headers": ["*"],
    "expose_headers": ["Content-Disposition"],
}
if cors_origin_regex:
    cors_kw["allow_origin_regex"] = cors_origin_regex
app.add_middleware(CORSMiddleware, **cors_kw)


# ---------------------------------------------------------------------------
# Health
# ---------------------------------------------------------------------------
class HealthResponse(BaseModel):
    status: str
    llm_provider: str


@app.get("/health", response_model=HealthResponse)
@app.get("/api/health", response_model=HealthResponse)
async def health():
    """Health check endpoint."""
    return HealthResponse(status="ok", llm_provider=settings.thumbaudit_llm_provider)


# ---------------------------------------------------------------------------
# Routes
# ---------------------------------------------------------------------------
from backend.routes import audit, downloads, ui, uploads  # noqa: E402

app.include_router(uploads.router, prefix="/api", tags=["uploads"])
app.include_router(audit.router, prefix="/api", tags=["audit"])
app.include_router(downloads.router, prefix="/api", tags=["downloads"])
app.include_router(ui.router, tags=["ui"])
