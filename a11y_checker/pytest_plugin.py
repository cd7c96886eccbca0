"""pytest fixtures for axe-core audits on pytest-playwright pages.

Usage:
    def test_home(page, axe):
        page.goto("https://digital.gov")
        axe.inject()
        check_a11y(axe)
"""
from __future__ import annotations

import pytest

from a11y_checker.audit.runner import AuditRunner
from a11y_checker.config.settings import settings
from a11y_checker.drivers.playwright_page import PlaywrightPage
from a11y_checker.report.reporters import (
    BaseReporter,
    JsonFileReporter,
    TerminalReporter,
    notify,
)


class _MultiReporter(BaseReporter):
    def __init__(self, reporters: list[BaseReporter]):
        self.reporters = reporters

    def report(self, result):
        for reporter in self.reporters:
            notify(reporter, result)


def pytest_addoption(parser):
    group = parser.getgroup("a11y", "axe-core accessibility audits")
    group.addoption(
        "--a11y-report-dir",
        action="store",
        default=None,
        help="Write every audit result as JSON into this directory",
    )


@pytest.fixture
def axe_reporter(request) -> BaseReporter:
    """Terminal table for every audit, plus JSON files with --a11y-report-dir."""
    reporters: list[BaseReporter] = [TerminalReporter()]
    report_dir = request.config.getoption("--a11y-report-dir")
    if report_dir:
        reporters.append(JsonFileReporter(report_dir, name=request.node.name))
    return _MultiReporter(reporters)


@pytest.fixture
def axe(page, axe_reporter) -> AuditRunner:
    """AuditRunner bound to the pytest-playwright ``page`` fixture."""
    return AuditRunner(PlaywrightPage(page), reporter=axe_reporter, engine=settings.engine)
