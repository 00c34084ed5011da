"""Analysis and rendering of timing path reports."""

from sta_advisor.analysis.analyzer import (
    DEPTH_ADVISORY,
    LOGIC_DEPTH_THRESHOLD,
    analyze,
    base_cell_name,
    detect_violation,
    extract_cells,
    extract_endpoints,
    extract_slack,
)
from sta_advisor.analysis.report import generate_report

__all__ = [
    # analyzer
    "DEPTH_ADVISORY",
    "LOGIC_DEPTH_THRESHOLD",
    "analyze",
    "base_cell_name",
    "detect_violation",
    "extract_cells",
    "extract_endpoints",
    "extract_slack",
    # report
    "generate_report",
]
