"""Exception hierarchy for dashboard data ingestion.

Every failure in the fetch path is one of these types. The controller turns
them into a single message for the user; none is fatal.
"""


class DashboardDataError(Exception):
    """Base class for all ingestion failures."""


class NetworkError(DashboardDataError):
    """The API source could not be reached or answered with a non-2xx status."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class ParseError(DashboardDataError):
    """The payload was not well-formed JSON or CSV."""


class SchemaError(DashboardDataError):
    """The payload parsed but lacks a required section."""


class ValidationError(DashboardDataError):
    """Required input was missing or unusable before any fetch was attempted."""
