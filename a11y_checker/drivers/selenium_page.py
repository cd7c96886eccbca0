"""Selenium WebDriver page adapter."""
from __future__ import annotations

from selenium.common.exceptions import TimeoutException, WebDriverException
from selenium.webdriver.common.by import By
from selenium.webdriver.remote.webdriver import WebDriver
from selenium.webdriver.support import expected_conditions as EC
from selenium.webdriver.support.ui import WebDriverWait

from a11y_checker.config.settings import settings
from a11y_checker.drivers.base import ENGINE_CHECK_JS, PageAdapter
from a11y_checker.errors import AuditError, EngineUnavailable, TargetNotFound

_COUNT_JS = """
try {
    return document.querySelectorAll(arguments[0]).length;
} catch (e) {
    return 0;
}
"""

_RUN_AXE_JS = """
const done = arguments[arguments.length - 1];
const context = arguments[0];
window.axe.run(context === null ? document : context, arguments[1])
    .then((result) => done({
        url: result.url,
        timestamp: result.timestamp,
        violations: result.violations,
    }))
    .catch((err) => done({ error: String(err) }));
"""


class SeleniumPage(PageAdapter):
    """Adapter over a Selenium ``WebDriver`` with a page already loaded."""

    def __init__(self, driver: WebDriver, script_timeout: int | None = None):
        self.driver = driver
        self.driver.set_script_timeout(script_timeout or settings.selenium.script_timeout)

    @property
    def url(self) -> str:
        return self.driver.current_url

    def add_script(self, source: str) -> None:
        try:
            self.driver.execute_script(source)
        except WebDriverException as exc:
            raise EngineUnavailable(f"Page refused the axe-core script: {exc.msg}") from exc

    def engine_loaded(self) -> bool:
        return bool(self.driver.execute_script(f"return {ENGINE_CHECK_JS};"))

    def count(self, selector: str) -> int:
        return int(self.driver.execute_script(_COUNT_JS, selector))

    def wait_for(self, selector: str, timeout_ms: int = 5000) -> None:
        try:
            WebDriverWait(self.driver, timeout_ms / 1000).until(
                EC.presence_of_element_located((By.CSS_SELECTOR, selector))
            )
        except (TimeoutException, WebDriverException) as exc:
            raise TargetNotFound(selector) from exc

    def run_axe(self, context: dict | None, options: dict) -> dict:
        try:
            result = self.driver.execute_async_script(_RUN_AXE_JS, context, options)
        except WebDriverException as exc:
            raise AuditError(f"axe-core run failed: {exc.msg}") from exc
        if not result:
            raise AuditError("axe-core run returned no result; the page may have navigated away")
        if result.get("error"):
            raise AuditError(f"axe-core run failed: {result['error']}")
        return result
