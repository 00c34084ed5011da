"""Data models for timing path analysis results."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

UNKNOWN = "Unknown"


@dataclass(frozen=True)
class TimingIssue:
    """A detected issue together with its remediation suggestions.

    Attributes
    ----------
    issue : str
        Human-readable issue label, e.g. ``"High fanout net detected"``.
    suggestions : tuple[str, ...]
        Ordered remediation suggestions.
    """

    issue: str
    suggestions: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        """Return the issue as a JSON-serialisable dictionary."""
        return {"issue": self.issue, "suggestions": list(self.suggestions)}


@dataclass(frozen=True)
class AnalysisResult:
    """Heuristic summary of a single timing path report.

    Attributes
    ----------
    has_violation : bool
        Whether the report signals a failing timing check.
    slack : float | None
        Signed timing margin in nanoseconds, or None if not found.
    startpoint : str
        Launching element of the path.
    endpoint : str
        Capturing element of the path.
    issues : tuple[TimingIssue, ...]
        Detected issues in catalog order.
    logic_depth : int
        Number of cell output pins traversed on the path.
    depth_analysis : str
        Advisory note for deep paths, empty otherwise.
    cell_types : int
        Number of distinct base cell families on the path.
    cells : tuple[str, ...]
        Cell names in path order, duplicates retained.
    """

    has_violation: bool = False
    slack: float | None = None
    startpoint: str = UNKNOWN
    endpoint: str = UNKNOWN
    issues: tuple[TimingIssue, ...] = ()
    logic_depth: int = 0
    depth_analysis: str = ""
    cell_types: int = 0
    cells: tuple[str, ...] = ()

    @property
    def issue_labels(self) -> list[str]:
        """Return the labels of all detected issues, in order."""
        return [issue.issue for issue in self.issues]

    def to_dict(self) -> dict[str, Any]:
        """Return the result as a JSON-serialisable dictionary."""
        return {
            "has_violation": self.has_violation,
            "slack": self.slack,
            "startpoint": self.startpoint,
            "endpoint": self.endpoint,
            "issues": [issue.to_dict() for issue in self.issues],
            "logic_depth": self.logic_depth,
            "depth_analysis": self.depth_analysis,
            "cell_types": self.cell_types,
            "cells": list(self.cells),
        }
