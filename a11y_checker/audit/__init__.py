"""Accessibility audits backed by axe-core."""
from a11y_checker.audit.models import (
    AuditOptions,
    AuditResult,
    AuditTarget,
    FilterKind,
    Impact,
    NodeResult,
    RunOnly,
    Violation,
)
from a11y_checker.audit.runner import AuditRunner
from a11y_checker.audit.assertions import assert_no_violations, check_a11y
from a11y_checker.audit.presets import options_for_level, tags_for_level

__all__ = [
    "AuditOptions",
    "AuditResult",
    "AuditRunner",
    "AuditTarget",
    "FilterKind",
    "Impact",
    "NodeResult",
    "RunOnly",
    "Violation",
    "assert_no_violations",
    "check_a11y",
    "options_for_level",
    "tags_for_level",
]
