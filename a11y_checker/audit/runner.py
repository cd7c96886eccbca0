"""Run axe-core against a loaded page."""
from __future__ import annotations

import logging

from a11y_checker.audit.models import AuditOptions, AuditResult, AuditTarget
from a11y_checker.config.settings import EngineSettings
from a11y_checker.drivers.base import PageAdapter
from a11y_checker.engine.source import load_axe_source
from a11y_checker.errors import EngineUnavailable, TargetNotFound
from a11y_checker.report.reporters import BaseReporter, notify

logger = logging.getLogger(__name__)


class AuditRunner:
    """Accessibility audits for one page.

    Usage:
        runner = AuditRunner(PlaywrightPage(page))
        runner.inject()
        result = runner.run(AuditTarget.selector('[role="banner"]'))

    ``inject()`` must be called after every page load and before ``run()``.
    The runner never waits for targets to appear; use ``page.wait_for()``
    first when the target renders late.
    """

    def __init__(
        self,
        page: PageAdapter,
        reporter: BaseReporter | None = None,
        engine: EngineSettings | None = None,
    ):
        self.page = page
        self.reporter = reporter
        self.engine = engine

    def inject(self) -> None:
        """Load axe-core into the current page.

        Raises:
            EngineUnavailable: If the script cannot be loaded or does not
                define ``window.axe``
        """
        if self.page.engine_loaded():
            return
        self.page.add_script(load_axe_source(self.engine))
        if not self.page.engine_loaded():
            raise EngineUnavailable(f"axe-core did not initialise on {self.page.url}")
        logger.debug("Injected axe-core into %s", self.page.url)

    def run(
        self,
        target: AuditTarget | None = None,
        options: AuditOptions | None = None,
    ) -> AuditResult:
        """Run one audit and return its violations.

        Args:
            target: Page region to scan; None scans the full page
            options: Rule and impact filters; None runs every rule

        Returns:
            AuditResult restricted to the requested tags, rules and impacts

        Raises:
            EngineUnavailable: If axe-core has not been injected
            TargetNotFound: If an include selector matches nothing
            AuditError: If axe-core fails while running
        """
        target = target or AuditTarget.page()
        options = options or AuditOptions()

        if not self.page.engine_loaded():
            raise EngineUnavailable(
                f"axe-core is not loaded on {self.page.url}; call inject() after navigation"
            )

        for selector in target.include:
            if self.page.count(selector) == 0:
                raise TargetNotFound(selector)

        raw = self.page.run_axe(target.to_axe(), options.to_axe())
        result = AuditResult.from_axe(raw).filtered(options)
        logger.debug(
            "Audit of %s found %d violation(s)", result.url or self.page.url, len(result.violations)
        )

        notify(self.reporter, result)
        return result
