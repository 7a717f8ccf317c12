from __future__ import annotations

from rich.console import Console
from rich.table import Table
from rich.text import Text

from .models import VerificationResult, WorklogSummary

MISSING_WORKLOG_MESSAGE = "You must log time for this task!"


def evaluate(summary: WorklogSummary) -> VerificationResult:
    """A branch passes as soon as any time is logged on its issue."""
    return VerificationResult(passed=summary.total_count > 0, summary=summary)


def build_worklog_table(summary: WorklogSummary) -> Table:
    table = Table(show_edge=False)
    table.add_column("Name", justify="left")
    table.add_column("Time", justify="right")
    for entry in summary.entries:
        table.add_row(Text(entry.author_display_name), Text(entry.time_spent))
    return table


def render_report(result: VerificationResult, console: Console, err_console: Console = None) -> None:
    """Print the worklog report for one verification.

    Presentation only, the verdict lives in ``result.passed``.
    """
    err_console = err_console or console
    summary = result.summary
    console.print(f"Verifying worklog for task {summary.issue_key}", style="bold reverse")
    count_style = "green reverse" if result.passed else "red reverse"
    console.print(f"Registered worklogs: {summary.total_count}", style=count_style)
    if result.passed:
        console.print(build_worklog_table(summary))
    else:
        err_console.print(MISSING_WORKLOG_MESSAGE, style="red reverse")
