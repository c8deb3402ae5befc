"""
Per-visitor audit sessions.

Each browser gets a random session id in a cookie; uploads, the report and the
in-flight flags live in that visitor's AuditSession only. Sessions are kept in
memory and dropped after SESSION_TTL_SECONDS without a request.
"""

import logging
import secrets
import time
from typing import Callable, Optional

from fastapi import Request

from thumbaudit.audit.session import AuditSession

logger = logging.getLogger(__name__)

SESSION_COOKIE = "thumbaudit_session"
SESSION_TTL_SECONDS = 60 * 60  # 1 hour


class SessionStore:
    """Maps session ids to AuditSessions. Only touched from the event loop."""

    def __init__(
        self,
        session_factory: Callable[[], AuditSession],
        ttl_seconds: int = SESSION_TTL_SECONDS,
    ):
        self._factory = session_factory
        self._ttl = ttl_seconds
        self._sessions: dict[str, AuditSession] = {}
        self._last_seen: dict[str, float] = {}

    def __len__(self) -> int:
        return len(self._sessions)

    def __contains__(self, session_id: object) -> bool:
        return session_id in self._sessions

    def new_id(self) -> str:
        return secrets.token_hex(16)

    def resolve(self, session_id: Optional[str]) -> str:
        """Keep a known id; issue a fresh one for a missing or unknown cookie."""
        self._prune_expired()
        if session_id and session_id in self._sessions:
            return session_id
        return self.new_id()

    def get_or_create(self, session_id: str) -> AuditSession:
        session = self._sessions.get(session_id)
        if session is None:
            session = self._factory()
            self._sessions[session_id] = session
            logger.info("Created audit session (%d active)", len(self._sessions))
        self._last_seen[session_id] = time.time()
        return session

    def put(self, session_id: str, session: AuditSession) -> None:
        self._sessions[session_id] = session
        self._last_seen[session_id] = time.time()

    def _prune_expired(self) -> None:
        """Remove idle sessions. A session with an audit or export in flight is kept."""
        now = time.time()
        expired = [
            sid
            for sid, seen in self._last_seen.items()
            if now - seen > self._ttl
            and not (self._sessions[sid].is_auditing or self._sessions[sid].is_exporting)
        ]
        for sid in expired:
            del self._sessions[sid]
            del self._last_seen[sid]
        if expired:
            logger.info("Pruned %d idle audit sessions", len(expired))


async def attach_session_id(request: Request, call_next):
    """HTTP middleware: pick the visitor's session id and set the cookie when it is new."""
    store: SessionStore = request.app.state.sessions
    sent = request.cookies.get(SESSION_COOKIE)
    session_id = store.resolve(sent)
    request.state.session_id = session_id
    response = await call_next(request)
    if sent != session_id:
        response.set_cookie(SESSION_COOKIE, session_id, httponly=True, samesite="lax")
    return response
