"""Reporting for accessibility audit results."""
from a11y_checker.report.formatter import OutputFormat, format_report
from a11y_checker.report.reporters import (
    BaseReporter,
    CallbackReporter,
    JsonFileReporter,
    TerminalReporter,
    notify,
)

__all__ = [
    "BaseReporter",
    "CallbackReporter",
    "JsonFileReporter",
    "OutputFormat",
    "TerminalReporter",
    "format_report",
    "notify",
]
