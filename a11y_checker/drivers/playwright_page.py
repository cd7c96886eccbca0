"""Playwright page adapter with concurrency control."""
from __future__ import annotations

import logging
import threading
from contextlib import contextmanager
from typing import Iterator

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import Page
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError
from playwright.sync_api import sync_playwright

from a11y_checker.config.settings import Settings, settings as default_settings
from a11y_checker.drivers.base import ENGINE_CHECK_JS, PageAdapter
from a11y_checker.errors import AuditError, EngineUnavailable, TargetNotFound

logger = logging.getLogger(__name__)

SUPPORTED_BROWSERS = ("chromium", "firefox", "webkit")

# Limit simultaneous browser instances across threads, one semaphore per limit
_browser_semaphores: dict[int, threading.Semaphore] = {}
_semaphores_lock = threading.Lock()


def _browser_semaphore(limit: int) -> threading.Semaphore:
    with _semaphores_lock:
        if limit not in _browser_semaphores:
            _browser_semaphores[limit] = threading.Semaphore(limit)
        return _browser_semaphores[limit]

_COUNT_JS = """(selector) => {
    try {
        return document.querySelectorAll(selector).length;
    } catch (e) {
        return 0;
    }
}"""

_RUN_AXE_JS = """async ({ context, options }) => {
    const result = await window.axe.run(context === null ? document : context, options);
    return {
        url: result.url,
        timestamp: result.timestamp,
        violations: result.violations,
    };
}"""


class PlaywrightPage(PageAdapter):
    """Adapter over a sync Playwright ``Page``."""

    def __init__(self, page: Page):
        self.page = page

    @property
    def url(self) -> str:
        return self.page.url

    def add_script(self, source: str) -> None:
        try:
            self.page.add_script_tag(content=source)
        except PlaywrightError as exc:
            raise EngineUnavailable(f"Page refused the axe-core script: {exc}") from exc

    def engine_loaded(self) -> bool:
        return bool(self.page.evaluate(ENGINE_CHECK_JS))

    def count(self, selector: str) -> int:
        return int(self.page.evaluate(_COUNT_JS, selector))

    def wait_for(self, selector: str, timeout_ms: int = 5000) -> None:
        try:
            self.page.wait_for_selector(selector, state="attached", timeout=timeout_ms)
        except PlaywrightError as exc:
            # TimeoutError subclasses Error; invalid selectors raise Error directly
            raise TargetNotFound(selector) from exc

    def run_axe(self, context: dict | None, options: dict) -> dict:
        try:
            return self.page.evaluate(_RUN_AXE_JS, {"context": context, "options": options})
        except PlaywrightError as exc:
            raise AuditError(f"axe-core run failed: {exc}") from exc


@contextmanager
def open_page(url: str, config: Settings | None = None) -> Iterator[PlaywrightPage]:
    """Launch a browser in an isolated context and load a URL.

    Uses a semaphore to limit concurrent browser instances. The browser is
    closed when the block exits.

    Raises:
        ValueError: If the configured browser is not supported
        RuntimeError: If no browser slot frees up or the page fails to load
    """
    cfg = (config or default_settings).playwright
    if cfg.browser not in SUPPORTED_BROWSERS:
        raise ValueError(
            f"Unsupported browser '{cfg.browser}'. Use one of: {', '.join(SUPPORTED_BROWSERS)}"
        )

    semaphore = _browser_semaphore(cfg.max_concurrent_browsers)
    acquired = semaphore.acquire(timeout=cfg.semaphore_timeout)
    if not acquired:
        raise RuntimeError("Too many concurrent browser sessions. Please try again later.")

    try:
        with sync_playwright() as playwright:
            browser = getattr(playwright, cfg.browser).launch(headless=cfg.headless)
            context = browser.new_context()
            try:
                page = context.new_page()
                page.set_default_timeout(cfg.navigation_timeout)
                logger.debug("Loading %s in %s", url, cfg.browser)
                try:
                    page.goto(url, wait_until=cfg.wait_until, timeout=cfg.navigation_timeout)
                except PlaywrightTimeoutError as exc:
                    raise RuntimeError(f"Unable to load {url} within timeout") from exc
                except PlaywrightError as exc:
                    raise RuntimeError(f"Unable to load {url}: {exc}") from exc
                yield PlaywrightPage(page)
            finally:
                context.close()
                browser.close()
    finally:
        semaphore.release()
