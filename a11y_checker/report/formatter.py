"""Report formatting utilities."""
from __future__ import annotations

import json
from typing import Literal

from rich.markup import escape

from a11y_checker.audit.models import AuditResult, Impact
from a11y_checker.config.settings import settings
from a11y_checker.report.reporters import IMPACT_COLORS

OutputFormat = Literal["cli", "json", "markdown"]

_IMPACT_EMOJI = {
    Impact.CRITICAL: "🔴",
    Impact.SERIOUS: "🟠",
    Impact.MODERATE: "🟡",
    Impact.MINOR: "🔵",
}


def format_report(result: AuditResult, output: OutputFormat = "cli") -> str:
    """Format an audit result for output.

    Args:
        result: Result of one audit run
        output: Output format - 'cli', 'json', or 'markdown'

    Returns:
        Formatted string representation of the result
    """
    if output == "json":
        return _format_json(result)
    elif output == "markdown":
        return _format_markdown(result)
    else:
        return _format_cli(result)


def _format_json(result: AuditResult) -> str:
    return json.dumps(result.to_dict(), ensure_ascii=False, indent=2)


def _format_cli(result: AuditResult) -> str:
    """Format results for terminal display with Rich-compatible markup."""
    lines = []
    max_nodes = settings.report.max_nodes_per_violation

    lines.append("[bold cyan]Accessibility Report[/bold cyan]")
    if result.url:
        lines.append(f"[dim]Page:[/dim] {escape(result.url)}")
    lines.append("")

    if result.passed:
        lines.append("[green]✓ No accessibility violations detected[/green]")
        return "\n".join(lines)

    lines.append(
        f"[bold]Violations:[/bold] [red]{len(result.violations)}[/red] "
        f"rules, {result.node_count} nodes"
    )
    for impact, count in result.count_by_impact().items():
        color = IMPACT_COLORS[impact]
        lines.append(f"  [{color}]{impact.value.capitalize():10}[/{color}] {count}")
    lines.append("")

    for violation in result.violations:
        color = IMPACT_COLORS[violation.impact]
        lines.append(
            f"[{color}]✗ {escape('[' + violation.impact.value + ']')}[/{color}] "
            f"[bold]{escape(violation.id)}[/bold]: {escape(violation.help or violation.description)}"
        )
        for node in violation.nodes[:max_nodes]:
            lines.append(f"    [dim]→[/dim] {escape(node.selector)}")
        hidden = len(violation.nodes) - max_nodes
        if hidden > 0:
            lines.append(f"    [dim]… and {hidden} more[/dim]")
        if violation.help_url:
            lines.append(f"    [dim]{escape(violation.help_url)}[/dim]")

    return "\n".join(lines)


def _escape_cell(text: str) -> str:
    return text.replace("|", "\\|").replace("\n", " ")


def _format_markdown(result: AuditResult) -> str:
    lines = []

    lines.append("# Accessibility Report")
    lines.append("")
    if result.url:
        lines.append(f"**URL:** {result.url}")
    if result.timestamp:
        lines.append(f"**Scanned:** {result.timestamp}")
    lines.append("")

    if result.passed:
        lines.append("✅ No accessibility violations detected.")
        return "\n".join(lines)

    lines.append("## Summary")
    lines.append("")
    lines.append("| Impact | Violations |")
    lines.append("|--------|------------|")
    for impact, count in result.count_by_impact().items():
        lines.append(f"| {_IMPACT_EMOJI[impact]} {impact.value} | {count} |")
    lines.append("")

    lines.append("## Violations")
    lines.append("")
    for violation in result.violations:
        lines.append(f"### `{violation.id}` ({violation.impact.value})")
        lines.append("")
        lines.append(violation.description)
        if violation.help_url:
            lines.append("")
            lines.append(f"[{violation.help or 'Rule documentation'}]({violation.help_url})")
        lines.append("")
        lines.append("| Selector | HTML |")
        lines.append("|----------|------|")
        for node in violation.nodes:
            selector = _escape_cell(node.selector)
            snippet = _escape_cell(node.html)
            lines.append(f"| `{selector}` | `{snippet}` |")
        lines.append("")

    return "\n".join(lines)
