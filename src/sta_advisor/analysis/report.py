"""Render timing path analysis results as human-readable tables."""

from __future__ import annotations

from io import StringIO
from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.table import Table

if TYPE_CHECKING:
    from sta_advisor.core.catalog import PatternCatalog
    from sta_advisor.core.model import AnalysisResult


def _format_slack(value: float | None) -> str:
    """Format a slack value in nanoseconds, or return 'N/A' if None.

    Parameters
    ----------
    value : float | None
        The value to format.

    Returns
    -------
    str
        The formatted string representation.
    """
    if value is None:
        return "N/A"
    return f"{value:.3f} ns"


def summary_table(result: AnalysisResult) -> Table:
    """Build the path summary table for *result*."""
    status = (
        "[red]VIOLATED[/red]" if result.has_violation else "[green]MET[/green]"
    )
    table = Table(title="Path Summary")
    table.add_column("Field", style="cyan")
    table.add_column("Value")
    table.add_row("Status", status)
    table.add_row("Slack", _format_slack(result.slack))
    table.add_row("Startpoint", escape(result.startpoint))
    table.add_row("Endpoint", escape(result.endpoint))
    table.add_row("Logic Depth", str(result.logic_depth))
    table.add_row("Cell Types", str(result.cell_types))
    return table


def issues_table(result: AnalysisResult) -> Table:
    """Build the table of detected issues and their suggestions."""
    table = Table(title="Issues", show_lines=True)
    table.add_column("Issue", style="yellow")
    table.add_column("Suggestions")
    for issue in result.issues:
        suggestions = "\n".join(
            f"{i}. {escape(s)}" for i, s in enumerate(issue.suggestions, start=1)
        )
        table.add_row(escape(issue.issue), suggestions)
    return table


def catalog_table(catalog: PatternCatalog) -> Table:
    """Build a table listing every rule in *catalog*."""
    table = Table(title="Issue Patterns")
    table.add_column("#", style="cyan")
    table.add_column("Pattern", style="green")
    table.add_column("Issue", style="yellow")
    table.add_column("Suggestions")
    for i, rule in enumerate(catalog, start=1):
        table.add_row(
            str(i),
            escape(rule.pattern.pattern),
            escape(rule.issue),
            str(len(rule.suggestions)),
        )
    return table


def generate_report(result: AnalysisResult, width: int = 120) -> str:
    """Generate a human-readable report for an analysis result.

    Parameters
    ----------
    result : AnalysisResult
        The analysis result to render.
    width : int
        Console width used for table layout.

    Returns
    -------
    str
        A formatted text report.

    Examples
    --------
    >>> from sta_advisor.analysis.analyzer import analyze
    >>> from sta_advisor.analysis.report import generate_report
    >>> report = generate_report(analyze("slack (VIOLATED) -0.045"))
    >>> "Path Summary" in report and "Timing violation detected" in report
    True
    """
    buf = StringIO()
    console = Console(file=buf, force_terminal=False, width=width)

    console.print(summary_table(result))

    if result.depth_analysis:
        console.print(f"[bold]Depth analysis:[/bold] {escape(result.depth_analysis)}")

    if result.issues:
        console.print(issues_table(result))
    else:
        console.print("No issues detected.")

    return buf.getvalue()
