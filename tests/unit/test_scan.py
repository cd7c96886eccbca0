"""Unit tests for scan_url."""
from __future__ import annotations

from contextlib import contextmanager
from unittest.mock import patch

import pytest

from a11y_checker.audit.models import AuditOptions, AuditTarget
from a11y_checker.config.settings import Settings
from a11y_checker.errors import TargetNotFound
from a11y_checker.report.reporters import CallbackReporter
from a11y_checker.scan import scan_url


@pytest.fixture
def patched_open_page(fake_page, no_download):
    opened = []

    @contextmanager
    def _open_page(url, config=None):
        opened.append(url)
        yield fake_page

    with patch("a11y_checker.scan.open_page", _open_page):
        yield opened


class TestScanURL:

    def test_injects_and_runs(self, patched_open_page, fake_page):
        result = scan_url("https://example.com/", config=Settings())
        assert patched_open_page == ["https://example.com/"]
        assert fake_page.engine_loaded()
        assert len(result.violations) == 4

    def test_target_and_options(self, patched_open_page, fake_page):
        result = scan_url(
            "https://example.com/",
            target=AuditTarget.selector('[role="banner"]'),
            options=AuditOptions(included_impacts={"critical"}),
        )
        assert [v.id for v in result.violations] == ["image-alt"]
        context, _ = fake_page.axe_calls[0]
        assert context == {"include": [['[role="banner"]']]}

    def test_wait_for_missing(self, patched_open_page, fake_page):
        with pytest.raises(TargetNotFound):
            scan_url("https://example.com/", wait_for="#never")
        assert fake_page.axe_calls == []

    def test_reporter(self, patched_open_page):
        seen = []
        scan_url("https://example.com/", reporter=CallbackReporter(seen.append))
        assert len(seen) == 1
