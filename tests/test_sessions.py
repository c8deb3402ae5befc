"""Tests for the per-visitor session store and the server runner settings."""

from backend import run
from backend.sessions import SessionStore
from thumbaudit.audit.session import AuditSession
from thumbaudit.config import Settings
from thumbaudit.schemas.models import OperationStatus


def _store(fake_llm, ttl_seconds=3600):
    return SessionStore(lambda: AuditSession(provider_factory=lambda: fake_llm), ttl_seconds=ttl_seconds)


class TestSessionStore:
    def test_each_id_gets_its_own_session(self, fake_llm):
        store = _store(fake_llm)
        first = store.get_or_create("a")
        second = store.get_or_create("b")
        assert first is not second
        assert store.get_or_create("a") is first
        assert len(store) == 2

    def test_resolve_keeps_known_ids(self, fake_llm):
        store = _store(fake_llm)
        store.get_or_create("known")
        assert store.resolve("known") == "known"

    def test_resolve_issues_new_ids(self, fake_llm):
        store = _store(fake_llm)
        issued = {store.resolve(None), store.resolve("unknown"), store.resolve("")}
        assert "unknown" not in issued
        assert len(issued) == 3
        assert len(store) == 0

    def test_idle_sessions_are_pruned(self, fake_llm):
        store = _store(fake_llm, ttl_seconds=-1)
        store.get_or_create("idle")
        store.resolve(None)
        assert "idle" not in store

    def test_busy_sessions_survive_pruning(self, fake_llm):
        store = _store(fake_llm, ttl_seconds=-1)
        store.get_or_create("auditing").audit_status = OperationStatus.IN_FLIGHT
        store.get_or_create("exporting").export_status = OperationStatus.IN_FLIGHT
        store.resolve(None)
        assert "auditing" in store
        assert "exporting" in store


def test_port_comes_from_settings(monkeypatch):
    monkeypatch.setenv("PORT", "9123")
    assert Settings().port == 9123


def test_runner_uses_configured_port(monkeypatch):
    captured = {}
    monkeypatch.setenv("PORT", "9124")
    monkeypatch.setenv("THUMBAUDIT_ENV", "production")
    monkeypatch.setattr(run.uvicorn, "run", lambda app, **kwargs: captured.update(app=app, **kwargs))
    run.main()
    assert captured["app"] == "backend.main:app"
    assert captured["port"] == 9124
    assert captured["reload"] is False
