"""Typer CLI for analyzing static timing analysis path reports.

Provides commands to analyze a report file or standard input, fetch a
report from the report server, show the built-in example reports, and
list the issue patterns the analyzer looks for.
"""

from __future__ import annotations

import json
import logging
import sys
from enum import StrEnum
from pathlib import Path  # noqa: TC003 - required at runtime by Typer
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler

from sta_advisor.analysis.analyzer import LOGIC_DEPTH_THRESHOLD, analyze
from sta_advisor.analysis.report import catalog_table, generate_report
from sta_advisor.config import load_settings
from sta_advisor.core.catalog import DEFAULT_CATALOG
from sta_advisor.errors import StaAdvisorError
from sta_advisor.io.fetch import fetch_report
from sta_advisor.io.samples import get_sample

app = typer.Typer(no_args_is_help=True)
console = Console()
err_console = Console(stderr=True)


class OutputFormat(StrEnum):
    """Output format for analysis results."""

    table = "table"
    json = "json"


class SampleName(StrEnum):
    """Built-in example reports."""

    synopsys = "synopsys"
    cadence = "cadence"


def _configure_logging(verbose: bool) -> None:
    """Route log records to stderr through rich."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def _fail(message: str) -> typer.Exit:
    typer.echo(f"Error: {message}", err=True)
    return typer.Exit(code=1)


def _read_report(report: Path) -> str:
    """Read report text from *report*, or from stdin when it is ``-``.

    Parameters
    ----------
    report : Path
        Path to the report file, or ``-``.

    Returns
    -------
    str
        The raw report text.
    """
    if str(report) == "-":
        return sys.stdin.read()
    if not report.is_file():
        raise _fail(f"Report file not found: {report}")
    return report.read_text()


def _emit_analysis(text: str, fmt: OutputFormat, depth_threshold: int) -> None:
    if not text.strip():
        raise _fail("Report is empty, nothing to analyze.")
    result = analyze(text, DEFAULT_CATALOG, depth_threshold=depth_threshold)
    if fmt == OutputFormat.json:
        typer.echo(json.dumps(result.to_dict(), indent=2))
    else:
        typer.echo(generate_report(result))


@app.callback()
def callback(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging."),
    ] = False,
) -> None:
    """Heuristic analysis of static timing analysis path reports."""
    _configure_logging(verbose)


@app.command(name="analyze")
def analyze_cmd(
    report: Annotated[
        Path,
        typer.Argument(help="Path to the timing report, or '-' for stdin."),
    ],
    fmt: Annotated[
        OutputFormat,
        typer.Option("--format", "-f", help="Output format."),
    ] = OutputFormat.table,
    depth_threshold: Annotated[
        int,
        typer.Option("--depth-threshold", help="Logic depth considered too long."),
    ] = LOGIC_DEPTH_THRESHOLD,
) -> None:
    """Analyze a timing path report."""
    _emit_analysis(_read_report(report), fmt, depth_threshold)


@app.command()
def fetch(
    path_or_url: Annotated[
        str,
        typer.Argument(help="Report path on the server, or a browse URL."),
    ],
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Output file (default: stdout)."),
    ] = None,
    run_analysis: Annotated[
        bool,
        typer.Option("--analyze", help="Analyze the fetched report."),
    ] = False,
    strict: Annotated[
        bool,
        typer.Option("--strict", help="Fail instead of returning sample data."),
    ] = False,
    fmt: Annotated[
        OutputFormat,
        typer.Option("--format", "-f", help="Output format with --analyze."),
    ] = OutputFormat.table,
) -> None:
    """Fetch a timing report from the report server."""
    try:
        settings = load_settings()
        text = fetch_report(path_or_url, settings, fallback=False if strict else None)
    except StaAdvisorError as exc:
        raise _fail(str(exc)) from exc

    if output is not None:
        output.write_text(text)
        typer.echo(f"Written to {output}")
    if run_analysis:
        _emit_analysis(text, fmt, LOGIC_DEPTH_THRESHOLD)
    elif output is None:
        typer.echo(text)


@app.command()
def example(
    name: Annotated[
        SampleName,
        typer.Argument(help="Which example report to show."),
    ],
    run_analysis: Annotated[
        bool,
        typer.Option("--analyze", help="Analyze the example instead of printing it."),
    ] = False,
    fmt: Annotated[
        OutputFormat,
        typer.Option("--format", "-f", help="Output format with --analyze."),
    ] = OutputFormat.table,
) -> None:
    """Show a built-in example timing report."""
    text = get_sample(name.value)
    if run_analysis:
        _emit_analysis(text, fmt, LOGIC_DEPTH_THRESHOLD)
    else:
        typer.echo(text)


@app.command()
def rules() -> None:
    """List the issue patterns the analyzer checks for."""
    console.print(catalog_table(DEFAULT_CATALOG))


def main() -> None:
    """Entry point for the sta-advisor CLI."""
    app()
