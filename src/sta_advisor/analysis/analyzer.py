"""Heuristic analysis of a single timing path report.

The analyzer never raises on malformed input: each extraction step falls
back to a default value (``None``, ``"Unknown"``, ``0`` or empty) when its
pattern is not found.
"""

from __future__ import annotations

import logging
import re

from sta_advisor.core.catalog import (
    DEFAULT_CATALOG,
    LONG_LOGIC_PATH,
    TIMING_VIOLATION,
    PatternCatalog,
)
from sta_advisor.core.model import UNKNOWN, AnalysisResult, TimingIssue

logger = logging.getLogger(__name__)

LOGIC_DEPTH_THRESHOLD = 8

DEPTH_ADVISORY = (
    "High logic depth detected. "
    "Consider restructuring logic or adding pipeline stages."
)

GENERIC_VIOLATION_ISSUE = TimingIssue(
    TIMING_VIOLATION,
    (
        "Analyze the critical path for high delay cells",
        "Check for long interconnect delays",
        "Review clock constraints and clock tree synthesis",
        "Consider architectural changes to reduce logic depth",
    ),
)

LONG_PATH_ISSUE = TimingIssue(
    LONG_LOGIC_PATH,
    (
        "Add pipeline registers to break the path",
        "Restructure logic to reduce depth",
        "Review synthesis constraints",
    ),
)

_NUMBER = r"-?(?:\d+(?:\.\d*)?|\.\d+)"
_NEGATIVE_NUMBER_RE = re.compile(r"-(?:\d+(?:\.\d*)?|\.\d+)")
_SLACK_AFTER_RE = re.compile(
    rf"slack\s+\((?:MET|VIOLATED)\)\s+({_NUMBER})", re.IGNORECASE
)
_SLACK_BEFORE_RE = re.compile(
    rf"(?<![\d.])({_NUMBER})\s+slack\s+\((?:MET|VIOLATED)\)", re.IGNORECASE
)
_STARTPOINT_RE = re.compile(r"Startpoint:[ \t]*([^(\n]*)", re.IGNORECASE)
_BEGINPOINT_RE = re.compile(r"Beginpoint:[ \t]*([^(\n]*)", re.IGNORECASE)
_ENDPOINT_RE = re.compile(r"Endpoint:[ \t]*([^(\n]*)", re.IGNORECASE)
_CELL_RE = re.compile(r"/Y\s+\(([A-Z0-9_]+)\)")
_CELL_VARIANT_RE = re.compile(r"X\d+_[A-Z]+$")


def detect_violation(text: str) -> bool:
    """Return True if *text* signals a failing timing check.

    A report is flagged when it carries the literal ``VIOLATED`` marker, or
    when it mentions ``slack`` and contains any negative number. The second
    clause is loose: an unrelated negative value (clock uncertainty, setup
    time) next to a passing slack line also triggers it.

    Examples
    --------
    >>> detect_violation("slack (VIOLATED) -0.045")
    True
    >>> detect_violation("slack (MET) 0.130")
    False
    """
    if "VIOLATED" in text:
        return True
    return "slack" in text and _NEGATIVE_NUMBER_RE.search(text) is not None


def extract_slack(text: str) -> float | None:
    """Return the slack value from a PrimeTime or Tempus style slack line."""
    match = _SLACK_AFTER_RE.search(text) or _SLACK_BEFORE_RE.search(text)
    if match is None:
        return None
    return float(match.group(1))


def _extract_label(text: str, *patterns: re.Pattern[str]) -> str:
    for pattern in patterns:
        match = pattern.search(text)
        if match is not None:
            return match.group(1).strip() or UNKNOWN
    return UNKNOWN


def extract_endpoints(text: str) -> tuple[str, str]:
    """Return the ``(startpoint, endpoint)`` pair named in *text*.

    ``Beginpoint:`` is used only when no ``Startpoint:`` label is present.
    Each name runs up to the next parenthesis or the end of its line.

    Examples
    --------
    >>> extract_endpoints("Beginpoint: u0/Q (^)\\nEndpoint: u1/D (^)")
    ('u0/Q', 'u1/D')
    >>> extract_endpoints("")
    ('Unknown', 'Unknown')
    """
    startpoint = _extract_label(text, _STARTPOINT_RE, _BEGINPOINT_RE)
    endpoint = _extract_label(text, _ENDPOINT_RE)
    return startpoint, endpoint


def extract_cells(text: str) -> list[str]:
    """Return the cell type of every ``/Y (CELL)`` driver pin, in order."""
    return _CELL_RE.findall(text)


def base_cell_name(cell: str) -> str:
    """Strip the drive-strength and threshold-voltage suffix from *cell*.

    Examples
    --------
    >>> base_cell_name("NAND2X0_RVT")
    'NAND2'
    >>> base_cell_name("DFFARX1_LVT")
    'DFFAR'
    """
    return _CELL_VARIANT_RE.sub("", cell)


def analyze(
    text: str,
    catalog: PatternCatalog = DEFAULT_CATALOG,
    *,
    depth_threshold: int = LOGIC_DEPTH_THRESHOLD,
) -> AnalysisResult:
    """Analyze a raw timing path report.

    Parameters
    ----------
    text : str
        The raw report text. Any string is accepted.
    catalog : PatternCatalog
        Issue detection rules, applied in order.
    depth_threshold : int
        Logic depth above which the path is reported as too long.

    Returns
    -------
    AnalysisResult
        The extracted findings, with defaults for anything not found.

    Examples
    --------
    >>> from sta_advisor.analysis.analyzer import analyze
    >>> result = analyze("slack (MET) 0.130")
    >>> result.has_violation, result.slack, result.issues
    (False, 0.13, ())
    """
    has_violation = detect_violation(text)
    slack = extract_slack(text)
    startpoint, endpoint = extract_endpoints(text)

    issues = catalog.match(text)
    if has_violation and not issues:
        issues.append(GENERIC_VIOLATION_ISSUE)

    cells = extract_cells(text)
    logic_depth = len(cells)
    cell_types = len({base_cell_name(cell) for cell in cells})

    depth_analysis = ""
    if logic_depth > depth_threshold:
        depth_analysis = DEPTH_ADVISORY
        if not any(issue.issue == LONG_LOGIC_PATH for issue in issues):
            issues.append(LONG_PATH_ISSUE)

    logger.debug(
        "Analyzed report: violation=%s slack=%s depth=%d issues=%d",
        has_violation,
        slack,
        logic_depth,
        len(issues),
    )

    return AnalysisResult(
        has_violation=has_violation,
        slack=slack,
        startpoint=startpoint,
        endpoint=endpoint,
        issues=tuple(issues),
        logic_depth=logic_depth,
        depth_analysis=depth_analysis,
        cell_types=cell_types,
        cells=tuple(cells),
    )
