"""Static site auditor: internal link and SEO head-tag checks."""

from .audit import run_audit
from .models import (
    AuditConfig,
    AuditResult,
    AuditSetupError,
    HeadViolation,
    LinkReference,
    MissingLinkFinding,
)

__all__ = [
    "AuditConfig",
    "AuditResult",
    "AuditSetupError",
    "HeadViolation",
    "LinkReference",
    "MissingLinkFinding",
    "run_audit",
]
