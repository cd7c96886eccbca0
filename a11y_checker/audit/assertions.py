"""Assertion helpers for accessibility tests."""
from __future__ import annotations

from a11y_checker.audit.models import AuditOptions, AuditResult, AuditTarget
from a11y_checker.audit.runner import AuditRunner
from a11y_checker.errors import AccessibilityViolationError
from a11y_checker.report.reporters import BaseReporter, notify


def describe_violations(result: AuditResult) -> str:
    """Build the failure message listing each rule, impact and node."""
    count = len(result.violations)
    plural = "violation was" if count == 1 else "violations were"
    lines = [f"{count} accessibility {plural} detected"]
    for violation in result.violations:
        lines.append(f"- {violation.id} [{violation.impact.value}]: {violation.description}")
        for node in violation.nodes:
            lines.append(f"    {node.selector}")
    return "\n".join(lines)


def assert_no_violations(result: AuditResult) -> None:
    """Raise AccessibilityViolationError if the result has any violation."""
    if result.violations:
        raise AccessibilityViolationError(describe_violations(result), result)


def check_a11y(
    runner: AuditRunner,
    target: AuditTarget | None = None,
    options: AuditOptions | None = None,
    reporter: BaseReporter | None = None,
    skip_failures: bool = False,
) -> AuditResult:
    """Run an audit and fail when violations are found.

    Args:
        runner: Runner bound to a page with axe-core injected
        target: Page region to scan; None scans the full page
        options: Rule and impact filters
        reporter: Extra reporter for this call, notified after the runner's own
        skip_failures: Report violations without raising

    Returns:
        The AuditResult, when it is clean or ``skip_failures`` is set

    Raises:
        AccessibilityViolationError: If violations were found
    """
    result = runner.run(target, options)
    notify(reporter, result)
    if not skip_failures:
        assert_no_violations(result)
    return result
