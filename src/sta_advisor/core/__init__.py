"""Core data models and the issue pattern catalog."""

from sta_advisor.core.catalog import DEFAULT_CATALOG, PatternCatalog, PatternRule
from sta_advisor.core.model import UNKNOWN, AnalysisResult, TimingIssue

__all__ = [
    "DEFAULT_CATALOG",
    "UNKNOWN",
    "AnalysisResult",
    "PatternCatalog",
    "PatternRule",
    "TimingIssue",
]
