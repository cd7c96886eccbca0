"""Centralized configuration settings."""
from __future__ import annotations

import os
import tempfile
from dataclasses import dataclass, field


@dataclass
class EngineSettings:
    """Settings for locating the axe-core engine script."""
    axe_version: str = "4.10.2"
    cdn_url_template: str = "https://cdnjs.cloudflare.com/ajax/libs/axe-core/{version}/axe.min.js"
    # Local axe.min.js; when set the CDN is never contacted
    source_path: str = ""
    cache_dir: str = field(
        default_factory=lambda: os.path.join(tempfile.gettempdir(), "a11y-checker")
    )
    download_timeout: int = 20  # seconds

    @property
    def cdn_url(self) -> str:
        return self.cdn_url_template.format(version=self.axe_version)


@dataclass
class PlaywrightSettings:
    """Settings for Playwright-driven scans."""
    browser: str = "chromium"  # chromium, firefox, webkit
    headless: bool = True
    max_concurrent_browsers: int = 2
    navigation_timeout: int = 30000  # ms
    wait_until: str = "load"
    semaphore_timeout: int = 60  # seconds


@dataclass
class SeleniumSettings:
    """Settings for Selenium WebDriver scans."""
    script_timeout: int = 30  # seconds


@dataclass
class ReportSettings:
    """Settings for report output."""
    max_nodes_per_violation: int = 5
    output_dir: str = "a11y-reports"


@dataclass
class Settings:
    """Main application settings container."""
    engine: EngineSettings = field(default_factory=EngineSettings)
    playwright: PlaywrightSettings = field(default_factory=PlaywrightSettings)
    selenium: SeleniumSettings = field(default_factory=SeleniumSettings)
    report: ReportSettings = field(default_factory=ReportSettings)

    debug: bool = False

    def __post_init__(self):
        """Load settings from environment variables."""
        self.debug = os.environ.get("A11Y_CHECKER_DEBUG", "").lower() in ("true", "1", "yes")

        # Engine overrides
        if version := os.environ.get("A11Y_CHECKER_AXE_VERSION"):
            self.engine.axe_version = version
        if source := os.environ.get("A11Y_CHECKER_AXE_SOURCE"):
            self.engine.source_path = source
        if cache_dir := os.environ.get("A11Y_CHECKER_CACHE_DIR"):
            self.engine.cache_dir = cache_dir

        # Playwright overrides
        if browser := os.environ.get("A11Y_CHECKER_BROWSER"):
            self.playwright.browser = browser.lower()
        if headless := os.environ.get("A11Y_CHECKER_HEADLESS"):
            self.playwright.headless = headless.lower() not in ("false", "0", "no")
        if timeout := os.environ.get("A11Y_CHECKER_TIMEOUT"):
            self.playwright.navigation_timeout = int(timeout)
        if max_browsers := os.environ.get("A11Y_CHECKER_MAX_BROWSERS"):
            self.playwright.max_concurrent_browsers = int(max_browsers)

        # Report overrides
        if output_dir := os.environ.get("A11Y_CHECKER_REPORT_DIR"):
            self.report.output_dir = output_dir


# Global settings instance
settings = Settings()
