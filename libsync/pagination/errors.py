"""Error taxonomy for paginated fetching.

Every error except :class:`FetcherClosedError` reaches the caller through
the fetcher's ``on_page(None, error)`` callback rather than being raised.
"""

from __future__ import annotations


class PaginationError(Exception):
    """Base class for all pagination errors."""


class TransportError(PaginationError):
    """The executor failed to complete the request.

    The underlying exception (e.g. an ``httpx.HTTPError``) is chained as
    ``__cause__``.
    """


class InvalidResponseError(PaginationError):
    """The response body could not be interpreted as a JSON envelope."""


class NoPageError(PaginationError):
    """The requested navigation link is not available."""

    direction = ""

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or f"No {self.direction} page available.")


class NoNextPageError(NoPageError):
    direction = "next"


class NoPreviousPageError(NoPageError):
    direction = "previous"


class NoFirstPageError(NoPageError):
    direction = "first"


class NoLastPageError(NoPageError):
    direction = "last"


class FetcherClosedError(PaginationError):
    """A navigation method was called after the fetcher was closed."""
