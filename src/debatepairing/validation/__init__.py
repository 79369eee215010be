"""Roster pre-checks and event audits for Debate Pairing."""

from debatepairing.validation.audit import AuditReport, audit_event
from debatepairing.validation.integrity import (
    IntegrityReport,
    IssueType,
    RosterIntegrityValidator,
    create_integrity_validator,
)

__all__ = [
    "AuditReport",
    "audit_event",
    "IntegrityReport",
    "IssueType",
    "RosterIntegrityValidator",
    "create_integrity_validator",
]
