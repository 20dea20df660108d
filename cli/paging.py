"""Blocking page iteration on top of :class:`PaginatedFetcher`.

The fetcher delivers pages on its worker thread; the CLI wants a plain
loop.  ``walk_pages`` bridges the two with a queue.
"""

from __future__ import annotations

import queue
from typing import Iterator

from libsync.kitsu import HttpxExecutor, ResourceParser
from libsync.kitsu.parser import Resource
from libsync.pagination import (
    NoLastPageError,
    NoNextPageError,
    PaginatedFetcher,
)
from libsync.pagination.interfaces import Parser, RequestExecutor, RequestTemplate


def walk_pages(
    request: RequestTemplate,
    pages: int,
    from_last: bool = False,
    executor: RequestExecutor | None = None,
    parser: Parser | None = None,
) -> Iterator[list[Resource]]:
    """Yield up to *pages* pages of items, following ``next`` links.

    With *from_last* the walk jumps to the last page right after the first
    one is fetched.  The walk ends early when there is no next page.

    Raises:
        PaginationError: Any transport or invalid-response error.
    """
    results: queue.Queue = queue.Queue()

    def on_page(items, error) -> None:
        results.put((items, error))

    def receive() -> list[Resource]:
        items, error = results.get()
        if error is not None:
            raise error
        return items

    with PaginatedFetcher(
        request,
        executor or HttpxExecutor(),
        on_page,
        parser=parser or ResourceParser(),
    ) as fetcher:
        fetcher.start()
        items = receive()

        if from_last:
            fetcher.last()
            try:
                items = receive()
            except NoLastPageError:
                # Single-page collection: the first page is the last one.
                pass

        yield items

        for _ in range(pages - 1):
            fetcher.next()
            try:
                yield receive()
            except NoNextPageError:
                return
