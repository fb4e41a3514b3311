"""Exception hierarchy for the Butterfly API client.

``UsageError`` flags a caller bug (bad input combination, detected before
any I/O). Subclasses of ``ButterflyError`` are runtime conditions reported by
the network or the server.
"""

from __future__ import annotations


class UsageError(ValueError):
    """Invalid combination of arguments supplied by the caller."""


class ButterflyError(Exception):
    """Base class for failures that happen while talking to the API."""


class NetworkError(ButterflyError):
    """The HTTP request could not complete (connectivity error or cancellation).

    Args:
        original_error: The exception raised by the transport.
    """

    def __init__(self, original_error: BaseException) -> None:
        super().__init__(f"Network error: {original_error}")
        self.original_error = original_error


class RedirectError(ButterflyError):
    """The server answered with a redirect embedded in the error envelope.

    Args:
        status: The 3xx status of the error entry.
        location: Target path or URL, taken from the entry's ``detail``.
    """

    def __init__(self, status: int, location: str) -> None:
        super().__init__(f"Redirect ({status}) to {location}")
        self.status = status
        self.location = location


class ApiError(ButterflyError):
    """The server reported a failure, either in the body or via the HTTP status."""

    def __init__(self, status: int, title: str, detail: str = "") -> None:
        super().__init__(f"Error {status}: {title}")
        self.status = status
        self.title = title
        self.detail = detail
