"""Fetch timing reports from an authenticated file-browsing server.

The server exposes files either as plain text or as JSON (a list of line
records, or an object with a ``content`` field). An HTML page instead of
file content means the token was rejected or the path does not exist.
"""

from __future__ import annotations

import json
import logging
from urllib.parse import urlsplit

import httpx

from sta_advisor.config import DEFAULT_URL_MARKER, Settings, load_settings
from sta_advisor.errors import ReportFetchError
from sta_advisor.io.samples import MOCK_REPORT

logger = logging.getLogger(__name__)

ACCEPT = "text/plain,application/json"
_HTML_PREFIXES = ("<!doctype", "<html")


def extract_path(path_or_url: str, marker: str = DEFAULT_URL_MARKER) -> str:
    """Return the server-side file path referenced by *path_or_url*.

    Parameters
    ----------
    path_or_url : str
        A bare path such as ``/home/user/report.txt``, or a browse URL that
        embeds the path after *marker*.
    marker : str
        Path segment that precedes the file path in browse URLs.

    Returns
    -------
    str
        The extracted path, or the input unchanged if it is not a URL.

    Examples
    --------
    >>> extract_path("https://host/edawsbrowse/home/user/timing.rpt")
    '/home/user/timing.rpt'
    >>> extract_path("/home/user/timing.rpt")
    '/home/user/timing.rpt'
    >>> extract_path("https://host/files/timing.rpt")
    '/files/timing.rpt'
    """
    marker = "/" + marker.strip("/")
    index = path_or_url.find(marker + "/")
    if index != -1:
        return path_or_url[index + len(marker) :]
    if path_or_url.startswith("/"):
        return path_or_url
    if path_or_url.startswith("http"):
        try:
            return urlsplit(path_or_url).path
        except ValueError:
            logger.debug("Could not parse %r as a URL, using it as is", path_or_url)
    return path_or_url


def _is_html(text: str) -> bool:
    return text.lstrip().lower().startswith(_HTML_PREFIXES)


def _record_line(record: object) -> str:
    if not isinstance(record, dict) or record.get("line") is None:
        return ""
    return str(record["line"])


def decode_report_body(body: str, content_type: str = "") -> str:
    """Convert a server response body into report text.

    Parameters
    ----------
    body : str
        The decoded response body.
    content_type : str
        The response ``Content-Type`` header.

    Returns
    -------
    str
        The report text.

    Raises
    ------
    ReportFetchError
        If the body is an HTML page or JSON of an unsupported shape.
    """
    if "application/json" in content_type:
        try:
            data = json.loads(body)
        except json.JSONDecodeError:
            logger.debug("Response declared JSON but did not parse, using text")
        else:
            if isinstance(data, list):
                return "\n".join(_record_line(record) for record in data)
            if isinstance(data, dict):
                if data.get("content"):
                    return str(data["content"])
                return json.dumps(data, indent=2)
            msg = "Unexpected response format from report server"
            raise ReportFetchError(msg)

    if _is_html(body):
        msg = (
            "Authentication failed or invalid path. "
            "Received HTML instead of file content."
        )
        raise ReportFetchError(msg)
    return body


def _request_report(path: str, settings: Settings, client: httpx.Client) -> str:
    base_url, token = settings.require_credentials()
    url = f"{base_url}{path}"
    logger.info("Fetching timing report from %s", url)

    try:
        response = client.get(
            url,
            headers={"Authorization": f"Bearer {token}", "Accept": ACCEPT},
            timeout=settings.timeout,
        )
    except (httpx.HTTPError, httpx.InvalidURL) as exc:
        msg = f"Failed to reach report server: {exc}"
        raise ReportFetchError(msg) from exc

    if not response.is_success:
        msg = (
            f"Failed to fetch report: {response.status_code} "
            f"{response.reason_phrase}"
        )
        raise ReportFetchError(msg)

    content_type = response.headers.get("content-type", "")
    return decode_report_body(response.text, content_type)


def fetch_report(
    path_or_url: str,
    settings: Settings | None = None,
    *,
    client: httpx.Client | None = None,
    fallback: bool | None = None,
) -> str:
    """Fetch a timing report, falling back to sample data on failure.

    Parameters
    ----------
    path_or_url : str
        File path on the server, or a browse URL embedding it.
    settings : Settings | None
        Connection settings. Loaded from the environment when omitted.
    client : httpx.Client | None
        HTTP client to use. A temporary client is created when omitted.
    fallback : bool | None
        Return :data:`MOCK_REPORT` instead of raising when the fetch fails.
        Defaults to ``settings.use_fallback``.

    Returns
    -------
    str
        The report text.

    Raises
    ------
    ConfigurationError
        If the server URL or API token is not configured.
    ReportFetchError
        If the fetch fails and fallback is disabled.
    """
    if settings is None:
        settings = load_settings()
    if fallback is None:
        fallback = settings.use_fallback

    path = extract_path(path_or_url, settings.url_marker)
    logger.debug("Resolved %r to server path %r", path_or_url, path)

    try:
        if client is not None:
            return _request_report(path, settings, client)
        with httpx.Client() as own_client:
            return _request_report(path, settings, own_client)
    except ReportFetchError as exc:
        if not fallback:
            raise
        logger.warning("%s; returning sample report instead", exc)
        return MOCK_REPORT
