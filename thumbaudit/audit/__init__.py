"""Audit orchestration: the one model request and the page session around it."""

from thumbaudit.audit.requester import generate_audit_report
from thumbaudit.audit.session import AuditSession

__all__ = [
    "AuditSession",
    "generate_audit_report",
]
