"""Collaborator interfaces consumed by :class:`PaginatedFetcher`."""

from __future__ import annotations

from typing import Any, Protocol

from libsync.pagination.requests import PageRequest


class RequestTemplate(Protocol):
    """The seed request of a paged collection."""

    def build(self) -> PageRequest:
        """Return the descriptor for the first page."""

    def clone(self) -> RequestTemplate:
        """Return an equal copy with cursor fields reset."""


class RequestExecutor(Protocol):
    """Performs a GET and returns the raw response body."""

    def execute(self, request: PageRequest) -> bytes | str | None:
        """Execute *request*.

        Raises:
            TransportError: On any network or HTTP status failure.
        """


class Parser(Protocol):
    """Maps a decoded envelope to domain items."""

    def parse(self, envelope: dict[str, Any]) -> list[Any]:
        ...
