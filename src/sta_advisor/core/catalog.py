"""Ordered catalog of timing issue detection rules."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING

from sta_advisor.core.model import TimingIssue

if TYPE_CHECKING:
    from collections.abc import Iterator

TIMING_VIOLATION = "Timing violation detected"
HIGH_FANOUT = "High fanout net detected"
LOW_DRIVE_STRENGTH = "Low drive strength cells in critical path"
CLOCK_UNCERTAINTY = "Clock uncertainty affecting timing"
LONG_LOGIC_PATH = "Long logic path detected"


@dataclass(frozen=True)
class PatternRule:
    """A single detection rule matched against the whole report text.

    Attributes
    ----------
    pattern : re.Pattern[str]
        Compiled pattern searched anywhere in the text.
    issue : str
        Issue label reported when the pattern matches.
    suggestions : tuple[str, ...]
        Remediation suggestions attached to the issue.
    """

    pattern: re.Pattern[str]
    issue: str
    suggestions: tuple[str, ...]

    @classmethod
    def compile(cls, pattern: str, issue: str, *suggestions: str) -> PatternRule:
        """Build a rule from a case-insensitive regular expression string."""
        return cls(re.compile(pattern, re.IGNORECASE), issue, tuple(suggestions))

    def matches(self, text: str) -> bool:
        """Return True if the pattern occurs anywhere in *text*."""
        return self.pattern.search(text) is not None

    def to_issue(self) -> TimingIssue:
        """Return the issue this rule contributes when it matches."""
        return TimingIssue(self.issue, self.suggestions)


@dataclass(frozen=True)
class PatternCatalog:
    """Immutable, ordered sequence of :class:`PatternRule`.

    Examples
    --------
    >>> from sta_advisor.core.catalog import DEFAULT_CATALOG
    >>> [i.issue for i in DEFAULT_CATALOG.match("clock uncertainty -0.05")]
    ['Clock uncertainty affecting timing']
    """

    rules: tuple[PatternRule, ...]

    def __iter__(self) -> Iterator[PatternRule]:
        return iter(self.rules)

    def __len__(self) -> int:
        return len(self.rules)

    def labels(self) -> list[str]:
        """Return the issue label of every rule, in catalog order."""
        return [rule.issue for rule in self.rules]

    def match(self, text: str) -> list[TimingIssue]:
        """Return one issue per matching rule, in catalog order."""
        return [rule.to_issue() for rule in self.rules if rule.matches(text)]


DEFAULT_CATALOG = PatternCatalog(
    rules=(
        PatternRule.compile(
            r"slack \(VIOLATED\)",
            TIMING_VIOLATION,
            "Consider upsizing critical cells in the path",
            "Optimize logic depth to reduce delay",
            "Check for high fanout nets and buffer them",
            "Review clock skew between source and destination",
        ),
        PatternRule.compile(
            r"high fanout",
            HIGH_FANOUT,
            "Add buffers to distribute the load",
            "Consider register duplication for critical paths",
            "Use higher drive strength cells for the driver",
        ),
        PatternRule.compile(
            r"(INVX0|NAND2X0|NOR2X0|BUFX0)_RVT",
            LOW_DRIVE_STRENGTH,
            "Upsize cells to higher drive strength variants",
            "Replace X0 cells with X1 or X2 variants",
            "Consider using faster cell types (e.g., RVT to LVT)",
        ),
        PatternRule.compile(
            r"clock uncertainty",
            CLOCK_UNCERTAINTY,
            "Review clock tree synthesis settings",
            "Check for excessive clock jitter or skew",
            "Consider using more balanced clock tree",
        ),
        PatternRule.compile(
            r"long path",
            LONG_LOGIC_PATH,
            "Consider logic restructuring to reduce depth",
            "Add pipeline registers to break long paths",
            "Review synthesis constraints for the path",
        ),
    )
)
