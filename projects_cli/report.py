# projects_cli/report.py
from __future__ import annotations

from rich.console import Console
from rich.markup import escape

from projects_cli.models import FileReport, RunOutcome

console = Console(soft_wrap=True, highlight=False)
err_console = Console(stderr=True, soft_wrap=True, highlight=False)


def info(msg: str) -> None:
    console.print(f"[cyan]Info:[/] {escape(msg)}")


def error(msg: str) -> None:
    err_console.print(f"[red]Error:[/] {escape(msg)}")


def print_file(report: FileReport) -> None:
    """Header + one ' - ' line per diagnostic; silent for a clean file."""
    if not (report.schema_errors or report.errors or report.suggestions):
        return
    header = " schema errors:" if report.schema_errors else ""
    console.print(f"\n[yellow]{escape(report.file)}[/]{header}")
    for line in report.schema_errors + report.errors:
        console.print(f" - {escape(line)}")
    for line in report.suggestions:
        console.print(f" - [dim]{escape(line)}[/]")


def print_summary(outcome: RunOutcome) -> None:
    if outcome.failed:
        console.print("\n[red]Validation failed. Please fix the issues above.[/]")
    else:
        console.print(f"\n[green]All {outcome.count} project files are valid.[/]")
