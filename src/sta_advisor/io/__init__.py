"""Report sources: the report server fetcher and built-in samples."""

from sta_advisor.io.fetch import decode_report_body, extract_path, fetch_report
from sta_advisor.io.samples import MOCK_REPORT, SAMPLE_REPORTS, get_sample

__all__ = [
    # fetch
    "decode_report_body",
    "extract_path",
    "fetch_report",
    # samples
    "MOCK_REPORT",
    "SAMPLE_REPORTS",
    "get_sample",
]
