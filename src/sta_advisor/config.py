"""Settings for the report server connection.

All settings are read from environment variables. A ``.env`` file in the
working directory is loaded first without overriding variables that are
already set.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

from dotenv import find_dotenv, load_dotenv

from sta_advisor.errors import ConfigurationError

ENV_PREFIX = "STA_ADVISOR_"
DEFAULT_URL_MARKER = "/edawsbrowse"
DEFAULT_TIMEOUT = 30.0

_TRUE_VALUES = ("1", "true", "yes", "on")


@dataclass(frozen=True)
class Settings:
    """Report server settings.

    Attributes
    ----------
    base_url : str | None
        Root URL of the report server, without a trailing slash.
    api_token : str | None
        Bearer token sent with every request.
    url_marker : str
        Path segment after which browse URLs embed the file path.
    use_fallback : bool
        Return the built-in mock report when a fetch fails.
    timeout : float
        Request timeout in seconds.
    """

    base_url: str | None = None
    api_token: str | None = None
    url_marker: str = DEFAULT_URL_MARKER
    use_fallback: bool = True
    timeout: float = DEFAULT_TIMEOUT

    def require_credentials(self) -> tuple[str, str]:
        """Return ``(base_url, api_token)`` or raise if either is missing."""
        if not self.base_url:
            msg = f"Report server URL is not configured. Set {ENV_PREFIX}BASE_URL."
            raise ConfigurationError(msg)
        if not self.api_token:
            msg = f"API token is not configured. Set {ENV_PREFIX}API_TOKEN."
            raise ConfigurationError(msg)
        return self.base_url, self.api_token


def _get(env: Mapping[str, str], key: str) -> str:
    return (env.get(ENV_PREFIX + key) or "").strip()


def load_settings(
    env: Mapping[str, str] | None = None,
    *,
    dotenv: bool = True,
) -> Settings:
    """Build :class:`Settings` from the environment.

    Parameters
    ----------
    env : Mapping[str, str] | None
        Variables to read instead of ``os.environ``.
    dotenv : bool
        Load a ``.env`` file into ``os.environ`` first. Ignored when *env*
        is given.

    Returns
    -------
    Settings
        The resolved settings.

    Raises
    ------
    ConfigurationError
        If ``STA_ADVISOR_TIMEOUT`` is not a positive number.
    """
    if env is None:
        if dotenv:
            load_dotenv(find_dotenv(usecwd=True), override=False)
        env = os.environ

    timeout_raw = _get(env, "TIMEOUT")
    try:
        timeout = float(timeout_raw) if timeout_raw else DEFAULT_TIMEOUT
    except ValueError:
        msg = f"Invalid {ENV_PREFIX}TIMEOUT: {timeout_raw!r}"
        raise ConfigurationError(msg) from None
    if timeout <= 0:
        msg = f"{ENV_PREFIX}TIMEOUT must be positive, got {timeout}"
        raise ConfigurationError(msg)

    fallback_raw = _get(env, "FALLBACK")
    use_fallback = fallback_raw.lower() in _TRUE_VALUES if fallback_raw else True

    return Settings(
        base_url=_get(env, "BASE_URL").rstrip("/") or None,
        api_token=_get(env, "API_TOKEN") or None,
        url_marker=_get(env, "URL_MARKER") or DEFAULT_URL_MARKER,
        use_fallback=use_fallback,
        timeout=timeout,
    )
