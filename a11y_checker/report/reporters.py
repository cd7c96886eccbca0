"""Side-effect-only consumers of audit results."""
from __future__ import annotations

import json
import logging
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from pathlib import Path
from typing import Callable

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from a11y_checker.audit.models import AuditResult, Impact

logger = logging.getLogger(__name__)

IMPACT_COLORS = {
    Impact.CRITICAL: "red bold",
    Impact.SERIOUS: "red",
    Impact.MODERATE: "yellow",
    Impact.MINOR: "blue",
}


class BaseReporter(ABC):
    """Receives each audit result for human-readable output.

    Reporters never change a result or the outcome of a test.
    """

    @abstractmethod
    def report(self, result: AuditResult) -> None:
        pass


class TerminalReporter(BaseReporter):
    """Print a violation count and a table of violations to the terminal."""

    def __init__(self, console: Console | None = None):
        self.console = console or Console()

    def report(self, result: AuditResult) -> None:
        count = len(result.violations)
        plural = "violation was" if count == 1 else "violations were"
        self.console.print(f"{count} accessibility {plural} detected")
        if not count:
            return

        table = Table(show_header=True, header_style="bold")
        table.add_column("id")
        table.add_column("impact")
        table.add_column("description")
        table.add_column("nodes", justify="right")
        for violation in result.violations:
            color = IMPACT_COLORS[violation.impact]
            table.add_row(
                escape(violation.id),
                f"[{color}]{violation.impact.value}[/{color}]",
                escape(violation.description),
                str(len(violation.nodes)),
            )
        self.console.print(table)


class JsonFileReporter(BaseReporter):
    """Write each result as a JSON file under a directory."""

    def __init__(self, directory: str | Path, name: str = "a11y"):
        self.directory = Path(directory)
        self.name = name

    def report(self, result: AuditResult) -> None:
        self.directory.mkdir(parents=True, exist_ok=True)
        stamp = datetime.now(timezone.utc).strftime("%Y%m%dT%H%M%S%f")
        path = self.directory / f"{self.name}-{stamp}.json"
        path.write_text(json.dumps(result.to_dict(), ensure_ascii=False, indent=2), encoding="utf-8")
        logger.info("Wrote accessibility report to %s", path)


class CallbackReporter(BaseReporter):
    """Adapt a plain function to the reporter interface."""

    def __init__(self, callback: Callable[[AuditResult], None]):
        self.callback = callback

    def report(self, result: AuditResult) -> None:
        self.callback(result)


def notify(reporter: BaseReporter | None, result: AuditResult) -> None:
    """Hand a result to a reporter; reporter errors are logged, not raised."""
    if reporter is None:
        return
    try:
        reporter.report(result)
    except Exception:
        logger.warning("Reporter %s failed", type(reporter).__name__, exc_info=True)
