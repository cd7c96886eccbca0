"""Shared test fixtures and configuration."""
from __future__ import annotations

import copy

import pytest

from a11y_checker.drivers.base import PageAdapter
from a11y_checker.errors import EngineUnavailable, TargetNotFound

FAKE_AXE_SOURCE = "window.axe = { run: async () => ({ violations: [] }) };"


class FakePage(PageAdapter):
    """In-memory page that returns a canned axe-core result."""

    def __init__(
        self,
        raw: dict | None = None,
        elements: dict[str, int] | None = None,
        url: str = "https://example.com/",
        accepts_script: bool = True,
    ):
        self.raw = raw or {"violations": []}
        self.elements = elements or {}
        self._url = url
        self.accepts_script = accepts_script
        self.loaded = False
        self.scripts: list[str] = []
        self.axe_calls: list[tuple[dict | None, dict]] = []

    @property
    def url(self) -> str:
        return self._url

    def add_script(self, source: str) -> None:
        if not self.accepts_script:
            raise EngineUnavailable("blocked by Content-Security-Policy")
        self.scripts.append(source)
        self.loaded = True

    def engine_loaded(self) -> bool:
        return self.loaded

    def count(self, selector: str) -> int:
        return self.elements.get(selector, 0)

    def wait_for(self, selector: str, timeout_ms: int = 5000) -> None:
        if self.count(selector) == 0:
            raise TargetNotFound(selector)

    def run_axe(self, context: dict | None, options: dict) -> dict:
        self.axe_calls.append((context, options))
        return copy.deepcopy(self.raw)


def _violation(rule_id, impact, tags, targets, description=None):
    return {
        "id": rule_id,
        "impact": impact,
        "tags": tags,
        "description": description or f"Ensures {rule_id} passes",
        "help": f"{rule_id} help",
        "helpUrl": f"https://dequeuniversity.com/rules/axe/4.10/{rule_id}",
        "nodes": [
            {
                "target": [t],
                "html": f"<div class=\"{t.strip('.#')}\"></div>",
                "failureSummary": "Fix any of the following",
            }
            for t in targets
        ],
    }


@pytest.fixture
def axe_raw_result() -> dict:
    """Return an axe-core result with violations of mixed impact and tags."""
    return {
        "url": "https://example.com/",
        "timestamp": "2024-05-01T10:00:00.000Z",
        "violations": [
            _violation(
                "color-contrast", "serious", ["cat.color", "wcag2aa", "wcag143"],
                [".hero-link", ".footer-link"],
            ),
            _violation(
                "image-alt", "critical",
                ["cat.text-alternatives", "wcag2a", "wcag111", "section508"],
                ["#logo"],
            ),
            _violation(
                "region", "moderate", ["cat.keyboard", "best-practice"], [".promo"],
            ),
            _violation(
                "target-size", "serious", ["cat.sensory-and-visual-cues", "wcag22aa", "wcag258"],
                [".pager"],
            ),
        ],
    }


@pytest.fixture
def moderate_only_raw() -> dict:
    """Return an axe-core result whose violations are all moderate."""
    return {
        "url": "https://example.com/",
        "violations": [
            _violation("region", "moderate", ["cat.keyboard", "best-practice"], [".promo"]),
            _violation(
                "landmark-one-main", "moderate", ["cat.semantics", "best-practice"], ["html"],
            ),
        ],
    }


@pytest.fixture
def clean_raw() -> dict:
    return {"url": "https://example.com/", "timestamp": "2024-05-01T10:00:00.000Z", "violations": []}


@pytest.fixture
def fake_page(axe_raw_result) -> FakePage:
    return FakePage(raw=axe_raw_result, elements={'[role="banner"]': 1, "main": 1})


@pytest.fixture
def no_download(monkeypatch):
    """Serve a stub axe-core source instead of touching disk or network."""
    monkeypatch.setattr(
        "a11y_checker.audit.runner.load_axe_source", lambda engine=None: FAKE_AXE_SOURCE
    )


@pytest.fixture
def make_page():
    """Return the FakePage class for tests that build their own pages."""
    return FakePage
