"""Exceptions raised by the audit runner."""
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from a11y_checker.audit.models import AuditResult


class AuditError(Exception):
    """Raised when an accessibility audit cannot produce a result."""


class TargetNotFound(AuditError):
    """Raised when an audit target selector matches no element."""

    def __init__(self, selector: str):
        self.selector = selector
        super().__init__(f"Audit target not found: {selector}")


class EngineUnavailable(AuditError):
    """Raised when axe-core cannot be loaded into the page."""


class AccessibilityViolationError(AssertionError):
    """Raised by assertion helpers when a scan reports violations."""

    def __init__(self, message: str, result: AuditResult):
        self.result = result
        super().__init__(message)
