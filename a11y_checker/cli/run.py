"""CLI commands."""
from __future__ import annotations

import logging
from pathlib import Path

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel

from a11y_checker import __version__
from a11y_checker.audit.models import AuditOptions, AuditResult, AuditTarget
from a11y_checker.audit.presets import tags_for_level
from a11y_checker.config.settings import settings
from a11y_checker.errors import AuditError
from a11y_checker.report.formatter import OutputFormat, format_report
from a11y_checker.scan import scan_url

app = typer.Typer(
    add_completion=False,
    help="a11y-checker - Run axe-core accessibility audits against web pages",
)
console = Console()


def _configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose or settings.debug else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
    )


def _build_options(
    tags: list[str],
    rules: list[str],
    impacts: list[str],
    disabled: list[str],
    level: str | None,
    wcag_version: str,
) -> AuditOptions:
    if level:
        if tags:
            raise ValueError("Use either --level or --tag, not both")
        tags = sorted(tags_for_level(level, wcag_version))
    return AuditOptions(
        tags=frozenset(tags),
        rules=frozenset(rules),
        included_impacts=frozenset(impacts),
        disabled_rules=frozenset(disabled),
    )


@app.command()
def run(
    url: str = typer.Argument(..., help="URL to audit"),
    include: list[str] | None = typer.Option(
        None, "--include", "-i", help="Selector to scan instead of the full page (repeatable)"
    ),
    exclude: list[str] | None = typer.Option(
        None, "--exclude", "-x", help="Selector to skip (repeatable)"
    ),
    tag: list[str] | None = typer.Option(
        None, "--tag", "-t", help="Only run rules with this tag, e.g. wcag2aa (repeatable)"
    ),
    rule: list[str] | None = typer.Option(
        None, "--rule", "-r", help="Only run this rule id (repeatable)"
    ),
    disable: list[str] | None = typer.Option(
        None, "--disable", help="Rule id to switch off (repeatable)"
    ),
    impact: list[str] | None = typer.Option(
        None, "--impact", help="Only report this impact: minor, moderate, serious, critical"
    ),
    level: str | None = typer.Option(
        None, "--level", "-l", help="WCAG conformance level to test: A, AA or AAA"
    ),
    wcag_version: str = typer.Option("2.2", "--wcag-version", help="WCAG version for --level"),
    wait_for: str | None = typer.Option(
        None, "--wait-for", "-w", help="Selector to wait for before scanning"
    ),
    output: str = typer.Option(
        "cli",
        "--output",
        "-o",
        help="Output format: cli, json, markdown",
    ),
    save: str | None = typer.Option(
        None,
        "--save",
        "-s",
        help="Save report to file",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Show debug logging",
    ),
) -> None:
    """Audit a URL with axe-core. Exits with 1 when violations are found.

    Examples:
        a11y-checker run https://digital.gov
        a11y-checker run https://digital.gov -i '[role="banner"]'
        a11y-checker run https://digital.gov -t wcag2aaa -o markdown -s report.md
        a11y-checker run https://digital.gov --impact critical --impact serious
    """
    if output not in ("cli", "json", "markdown"):
        console.print(f"[red]Error:[/red] Invalid output format '{output}'. Use cli, json, or markdown.")
        raise typer.Exit(1)

    output_format: OutputFormat = output  # type: ignore
    _configure_logging(verbose)

    try:
        options = _build_options(
            tag or [], rule or [], impact or [], disable or [], level, wcag_version
        )
        target = AuditTarget(include=tuple(include or ()), exclude=tuple(exclude or ()))
    except ValueError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    console.print(Panel.fit(
        f"[bold cyan]a11y-checker[/bold cyan]\n[dim]Auditing:[/dim] {url}",
        border_style="cyan",
    ))

    result: AuditResult | None = None
    try:
        with console.status("[bold blue]Scanning page...", spinner="dots"):
            result = scan_url(url, target=target, options=options, wait_for=wait_for)
    except AuditError as e:
        console.print(f"\n[red]Audit Error:[/red] {e}")
    except (ValueError, RuntimeError) as e:
        console.print(f"\n[red]Error:[/red] {e}")
    except Exception as e:
        console.print(f"\n[red]Unexpected error:[/red] {e}")
        if verbose:
            console.print_exception()

    if result is None:
        raise typer.Exit(1)

    report = format_report(result, output_format)
    if save:
        save_path = Path(save)
        save_path.write_text(report, encoding="utf-8")
        console.print(f"\n[green]Report saved to:[/green] {save_path}")
    else:
        console.print("")
        if output_format == "cli":
            console.print(report)
        else:
            console.print(report, markup=False)

    if result.violations:
        raise typer.Exit(1)


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"[bold]a11y-checker[/bold] v{__version__}")
    console.print(f"[dim]axe-core {settings.engine.axe_version}[/dim]")


if __name__ == "__main__":
    app()
