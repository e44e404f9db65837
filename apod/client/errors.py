"""Errors raised by :class:`apod.client.client.APODClient`.

Every error is terminal for the call that raised it.  The underlying cause,
when there is one, is chained as ``__cause__``.
"""

from __future__ import annotations


class APODClientError(Exception):
    """Base class for all client errors."""


class InvalidURLError(APODClientError):
    """Raised when the service URL cannot be created."""

    def __init__(self, base_url: str) -> None:
        super().__init__(f"Service URL cannot be created from '{base_url}'")
        self.base_url = base_url


class RateLimitError(APODClientError):
    """Raised when the server reports no remaining requests for this key."""

    def __init__(self) -> None:
        super().__init__("Rate limit exceeded for this API key")


class RequestIOError(APODClientError):
    """Raised when the request cannot reach the server."""

    def __init__(self) -> None:
        super().__init__("IO error encountered while performing request")


class RequestStatusError(APODClientError):
    """Raised when the server answers with a non-success status."""

    def __init__(self, status: int) -> None:
        super().__init__(f"Request failed with invalid HTTP status code: {status}")
        self.status = status


class DecodeError(APODClientError):
    """Raised when the response body does not match ``APODMetadata``."""

    def __init__(self) -> None:
        super().__init__("Error while decoding response content")
