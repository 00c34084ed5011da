"""Exceptions raised by sta-advisor."""


class StaAdvisorError(Exception):
    """Base class for all sta-advisor errors."""


class ReportFetchError(StaAdvisorError):
    """A timing report could not be retrieved from the report server."""


class ConfigurationError(StaAdvisorError):
    """Required settings are missing or invalid."""
