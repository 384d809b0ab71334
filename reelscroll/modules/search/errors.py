"""Failure kinds raised by the OMDb search client."""


class SearchError(Exception):
    """Base class for every failed search request."""

    kind = "unknown"


class NetworkError(SearchError):
    """Transport-level failure: connect, read, or timeout."""

    kind = "network"


class HttpError(SearchError):
    """Non-2xx HTTP response."""

    kind = "http"

    def __init__(self, status_code: int, message: str = ""):
        self.status_code = status_code
        self.message = message
        super().__init__(f"HTTP {status_code}: {message}" if message else f"HTTP {status_code}")


class UnknownError(SearchError):
    """Empty or malformed body, or any unexpected exception."""

    kind = "unknown"
