"""Unit tests for report formatting."""
from __future__ import annotations

import json

import pytest
from rich.console import Console

from a11y_checker.audit.models import AuditResult
from a11y_checker.report.formatter import format_report


@pytest.fixture
def result(axe_raw_result) -> AuditResult:
    return AuditResult.from_axe(axe_raw_result)


class TestFormatJSON:

    def test_valid_json(self, result):
        data = json.loads(format_report(result, "json"))
        assert data["summary"]["serious"] == 2
        assert [v["id"] for v in data["violations"]][:2] == ["color-contrast", "image-alt"]

    def test_clean_result(self):
        data = json.loads(format_report(AuditResult(url="https://example.com/"), "json"))
        assert data["passed"] is True
        assert data["violations"] == []


class TestFormatCLI:

    def test_renders_with_rich(self, result):
        report = format_report(result, "cli")
        console = Console(record=True, width=200, force_terminal=False)
        console.print(report)
        text = console.export_text()
        assert "Accessibility Report" in text
        assert "[critical]" in text
        assert "image-alt" in text
        assert "#logo" in text

    def test_selector_brackets_survive_markup(self):
        raw = {"violations": [{
            "id": "region",
            "impact": "moderate",
            "nodes": [{"target": ['[role="banner"] > div'], "html": "<div>"}],
        }]}
        console = Console(record=True, width=200, force_terminal=False)
        console.print(format_report(AuditResult.from_axe(raw), "cli"))
        assert '[role="banner"] > div' in console.export_text()

    def test_clean_result(self):
        report = format_report(AuditResult(), "cli")
        assert "No accessibility violations detected" in report

    def test_node_list_truncated(self, monkeypatch):
        monkeypatch.setattr("a11y_checker.report.formatter.settings.report.max_nodes_per_violation", 1)
        raw = {"violations": [{
            "id": "link-name",
            "impact": "serious",
            "nodes": [{"target": [f"a.n{i}"]} for i in range(3)],
        }]}
        report = format_report(AuditResult.from_axe(raw), "cli")
        assert "a.n0" in report
        assert "a.n2" not in report
        assert "and 2 more" in report


class TestFormatMarkdown:

    def test_sections(self, result):
        report = format_report(result, "markdown")
        assert report.startswith("# Accessibility Report")
        assert "| Impact | Violations |" in report
        assert "### `image-alt` (critical)" in report
        assert "| `.hero-link` |" in report

    def test_pipes_escaped_in_html(self):
        raw = {"violations": [{
            "id": "label",
            "impact": "critical",
            "nodes": [{"target": ["input"], "html": '<input value="a|b">'}],
        }]}
        report = format_report(AuditResult.from_axe(raw), "markdown")
        assert 'a\\|b' in report

    def test_pipes_escaped_in_selector(self):
        raw = {"violations": [{
            "id": "valid-lang",
            "impact": "serious",
            "nodes": [{"target": ['[lang|="en"]'], "html": '<p lang="xx">'}],
        }]}
        report = format_report(AuditResult.from_axe(raw), "markdown")
        assert '| `[lang\\|="en"]` |' in report

    def test_clean_result(self):
        assert "No accessibility violations detected" in format_report(AuditResult(), "markdown")
