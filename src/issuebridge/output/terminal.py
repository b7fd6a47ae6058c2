"""Rich terminal reporter: severity pills and a findings table."""

from __future__ import annotations

from typing import Optional, Sequence

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from issuebridge.issues.models import Issue
from issuebridge.issues.severity import Severity, severity_at_or_above

_SEVERITY_STYLE = {
    Severity.CRITICAL: "bold white on red",
    Severity.HIGH: "bold white on dark_orange",
    Severity.MEDIUM: "bold black on yellow",
    Severity.LOW: "bold black on bright_cyan",
}


def _severity_pill(severity: Severity) -> Text:
    return Text(f" {severity.value.upper()} ", style=_SEVERITY_STYLE.get(severity, ""))


def _location(issue: Issue) -> str:
    if issue.line is None:
        return issue.file_path or "-"
    if issue.column is None:
        return f"{issue.file_path}:{issue.line}"
    return f"{issue.file_path}:{issue.line}:{issue.column}"


def render(
    issues: Sequence[Issue],
    *,
    min_severity: Severity = Severity.LOW,
    show_summary: bool = True,
    error: Optional[Exception] = None,
    console: Optional[Console] = None,
) -> None:
    """Print issues to the terminal using Rich."""
    console = console or Console(stderr=True)
    shown = [i for i in issues if severity_at_or_above(i.severity, min_severity)]
    shown.sort(key=lambda i: i.severity.rank, reverse=True)

    console.print()
    if not shown:
        console.print("[bold green]No issues at or above the selected severity.[/bold green]")
    else:
        table = Table(
            title="Converted Issues",
            show_lines=True,
            title_style="bold",
            border_style="dim",
        )
        table.add_column("Severity", justify="center", width=12)
        table.add_column("Id", style="cyan", min_width=16)
        table.add_column("Location", style="magenta")
        table.add_column("Message", min_width=20)
        table.add_column("Ignored", justify="center")

        for issue in shown:
            table.add_row(
                _severity_pill(issue.severity),
                Text(issue.id),
                Text(_location(issue)),
                Text(issue.message or issue.title),
                "yes" if issue.is_ignored else "",
            )
        console.print(table)

    if error is not None:
        console.print()
        for line in str(error).splitlines():
            console.print(f"[bold red]Error:[/bold red] {escape(line)}", highlight=False)

    if show_summary:
        _print_summary(console, issues, shown)


def _print_summary(console: Console, issues: Sequence[Issue], shown: Sequence[Issue]) -> None:
    console.print()
    console.print(f"[dim]Issues:[/dim]     {len(issues)}")
    console.print(f"[dim]Shown:[/dim]      {len(shown)}")
    console.print(f"[dim]Ignored:[/dim]    {sum(1 for i in issues if i.is_ignored)}")
    for severity in Severity:
        count = sum(1 for i in issues if i.severity is severity)
        if count:
            console.print(f"[dim]{severity.value}:[/dim] {count}")
