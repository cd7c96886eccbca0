"""axe-core accessibility audits for Playwright and Selenium."""
__version__ = "1.0.0"

from a11y_checker.audit import (  # noqa: E402
    AuditOptions,
    AuditResult,
    AuditRunner,
    AuditTarget,
    FilterKind,
    Impact,
    NodeResult,
    RunOnly,
    Violation,
    assert_no_violations,
    check_a11y,
    options_for_level,
    tags_for_level,
)
from a11y_checker.errors import (  # noqa: E402
    AccessibilityViolationError,
    AuditError,
    EngineUnavailable,
    TargetNotFound,
)

__all__ = [
    "AccessibilityViolationError",
    "AuditError",
    "AuditOptions",
    "AuditResult",
    "AuditRunner",
    "AuditTarget",
    "EngineUnavailable",
    "FilterKind",
    "Impact",
    "NodeResult",
    "RunOnly",
    "TargetNotFound",
    "Violation",
    "assert_no_violations",
    "check_a11y",
    "options_for_level",
    "tags_for_level",
]
