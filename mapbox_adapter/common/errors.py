"""Domain errors and failure typing."""

from __future__ import annotations


class GeocoderError(Exception):
    """Base class for adapter failures."""

    error_code = "GEOCODER_ERROR"


class ConfigError(GeocoderError):
    """Raised for invalid or missing configuration."""

    error_code = "CONFIG_ERROR"


class TransportError(GeocoderError):
    """Raised when the HTTP transport gives up on a request."""

    error_code = "HTTP_ERROR"


class QueryError(GeocoderError):
    """Terminal failure of a single geocode call.

    ``query`` holds the attempted URL, or the raw input when the call was
    rejected before a URL was built.
    """

    error_code = "QUERY_ERROR"

    def __init__(self, message: str, query: str | None = None) -> None:
        super().__init__(message)
        self.query = query


class UnsupportedInput(QueryError):
    """Raised when an IP literal is passed where an address is required."""

    error_code = "UNSUPPORTED_INPUT"


class InvalidCredentials(QueryError):
    """Raised on HTTP 401."""

    error_code = "INVALID_CREDENTIALS"


class QuotaExceeded(QueryError):
    """Raised on HTTP 429."""

    error_code = "QUOTA_EXCEEDED"


class NoResult(QueryError):
    """Raised when the service answered but produced nothing usable."""

    error_code = "NO_RESULT"
