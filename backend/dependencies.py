"""Shared route dependencies."""

from fastapi import Request

from backend.sessions import SessionStore
from thumbaudit.audit.session import AuditSession


async def get_session(request: Request) -> AuditSession:
    """The calling visitor's session, created on first use."""
    store: SessionStore = request.app.state.sessions
    return store.get_or_create(request.state.session_id)
