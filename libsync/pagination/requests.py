"""Request descriptors for paged collections."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class PageRequest:
    """A read-only request for one page of a collection.

    ``url`` is either an absolute URL or a path relative to the executor's
    base URL.  ``params`` are kept as ordered pairs so the descriptor stays
    hashable and comparable.
    """

    url: str
    params: tuple[tuple[str, str], ...] = field(default_factory=tuple)
    method: str = "GET"

    @property
    def is_absolute(self) -> bool:
        return self.url.startswith(("http://", "https://"))


def request_for_link(link: str) -> PageRequest:
    """Return a GET request for a server-supplied pagination *link*.

    The link is used verbatim: it already carries the host, the paging
    query parameters and their encoding.
    """
    return PageRequest(url=link)
