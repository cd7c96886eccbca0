"""One-shot scan of a URL in a fresh Playwright browser."""
from __future__ import annotations

from a11y_checker.audit.models import AuditOptions, AuditResult, AuditTarget
from a11y_checker.audit.runner import AuditRunner
from a11y_checker.config.settings import Settings, settings as default_settings
from a11y_checker.drivers.playwright_page import open_page
from a11y_checker.report.reporters import BaseReporter


def scan_url(
    url: str,
    target: AuditTarget | None = None,
    options: AuditOptions | None = None,
    reporter: BaseReporter | None = None,
    wait_for: str | None = None,
    config: Settings | None = None,
) -> AuditResult:
    """Load a URL, inject axe-core and run one audit.

    Args:
        url: Page to scan
        target: Page region to scan; None scans the full page
        options: Rule and impact filters
        reporter: Receives the result before it is returned
        wait_for: Selector to wait for after navigation, before injection
        config: Settings to use instead of the global ones

    Raises:
        TargetNotFound: If ``wait_for`` or a target selector never matches
        EngineUnavailable: If axe-core cannot be injected
        RuntimeError: If the page cannot be loaded
    """
    config = config or default_settings
    with open_page(url, config) as page:
        if wait_for:
            page.wait_for(wait_for, timeout_ms=config.playwright.navigation_timeout)
        runner = AuditRunner(page, reporter=reporter, engine=config.engine)
        runner.inject()
        return runner.run(target, options)
