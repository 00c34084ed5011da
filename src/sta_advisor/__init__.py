"""sta_advisor -- heuristic analysis of static timing analysis path reports."""

from sta_advisor.analysis import analyze, generate_report
from sta_advisor.config import Settings, load_settings
from sta_advisor.core import (
    DEFAULT_CATALOG,
    AnalysisResult,
    PatternCatalog,
    PatternRule,
    TimingIssue,
)
from sta_advisor.errors import ConfigurationError, ReportFetchError, StaAdvisorError
from sta_advisor.io import MOCK_REPORT, SAMPLE_REPORTS, extract_path, fetch_report

__all__ = [
    # core
    "DEFAULT_CATALOG",
    "AnalysisResult",
    "PatternCatalog",
    "PatternRule",
    "TimingIssue",
    # analysis
    "analyze",
    "generate_report",
    # config
    "Settings",
    "load_settings",
    # errors
    "ConfigurationError",
    "ReportFetchError",
    "StaAdvisorError",
    # io
    "MOCK_REPORT",
    "SAMPLE_REPORTS",
    "extract_path",
    "fetch_report",
]
