"""Link-following fetcher for paged collections.

How this works
--------------
The first page is fetched with the seed request passed in.  From then on the
``links`` object of each response drives navigation: ``next()`` follows the
``next`` link, ``prev()`` the ``prev`` link and so on.

If a request fails, the current link state is left as it was.  E.g. with
``links.next == page 5``, a failing ``next()`` keeps ``links.next`` at page 5,
so calling ``next()`` again retries the same page.

Threading
---------
All work runs on a single worker thread (a ``ThreadPoolExecutor`` with one
worker), one unit at a time, in the order the calls were made.

Until ``start()`` has been called, every navigation call fetches the first
page instead.  That check happens when the call is made, so
``next(); prev()`` before ``start()`` always means two first-page requests.
Once started, the choice of link is made on the worker, so ``next()`` queued
behind an in-flight ``start()`` sees the links of the first page.

``on_page`` is always called on the worker thread, for local errors too, so
results arrive in call order.
"""

from __future__ import annotations

import json
import logging
import threading
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Any, Callable, Optional

from libsync.pagination.errors import (
    FetcherClosedError,
    InvalidResponseError,
    NoFirstPageError,
    NoLastPageError,
    NoNextPageError,
    NoPageError,
    NoPreviousPageError,
    PaginationError,
    TransportError,
)
from libsync.pagination.interfaces import Parser, RequestExecutor, RequestTemplate
from libsync.pagination.links import LinkSet
from libsync.pagination.requests import PageRequest, request_for_link

logger = logging.getLogger(__name__)

#: ``on_page(items, error)``: exactly one of the two is ``None``.
PageCallback = Callable[[Optional[list], Optional[Exception]], None]


class DataParser:
    """Default parser: returns the raw ``data`` members of the envelope."""

    def parse(self, envelope: dict[str, Any]) -> list[Any]:
        data = envelope.get("data")
        if data is None:
            return []
        if isinstance(data, list):
            return data
        return [data]


class PaginatedFetcher:
    """Fetch a paged collection one page at a time.

    Call :meth:`start` to fetch the first page, then :meth:`next`,
    :meth:`prev`, :meth:`first` and :meth:`last` to move around.  Every call
    returns immediately; the result is delivered to *on_page*.

    Args:
        request: The seed request template.  It is cloned on every use and
            never mutated.
        executor: Performs the HTTP requests.  Shared, not owned.
        on_page: Called with ``(items, None)`` for every page received, or
            ``(None, error)`` when a call fails.
        parser: Maps a decoded envelope to items.  Defaults to
            :class:`DataParser`.
    """

    def __init__(
        self,
        request: RequestTemplate,
        executor: RequestExecutor,
        on_page: PageCallback,
        parser: Parser | None = None,
    ) -> None:
        self.original_request = request.clone()
        self.executor = executor
        self.on_page = on_page
        self.parser = parser or DataParser()

        self.links = LinkSet()
        # Set by start() when it queues the seed request.  Until then every
        # navigation call is redirected to the seed request.
        self.started_original = False

        self._pool = ThreadPoolExecutor(max_workers=1, thread_name_prefix="libsync-pager")
        self._lock = threading.Lock()
        self._closed = False
        self._worker: threading.Thread | None = None

    # ------------------------------------------------------------------
    # Requests
    # ------------------------------------------------------------------

    @property
    def request(self) -> RequestTemplate:
        """A fresh copy of the seed request template."""
        return self.original_request.clone()

    def request_for(self, link: str) -> PageRequest:
        """Return the request for an absolute pagination *link*."""
        return request_for_link(link)

    def update_links(self, envelope: Any) -> None:
        """Replace the link state with the links found in *envelope*.

        If the envelope has no ``links`` object, every link is reset to
        ``None``; links from a previous page are never kept.
        """
        self.links = LinkSet.from_envelope(envelope)
        logger.debug("Links updated: %s", self.links)

    # ------------------------------------------------------------------
    # Public navigation
    # ------------------------------------------------------------------

    def start(self) -> None:
        """Send out the seed request.  Each call re-issues it."""
        self._submit(self._perform_original)
        self.started_original = True

    def next(self) -> None:
        """Fetch the next page."""
        self._go("next", NoNextPageError)

    def prev(self) -> None:
        """Fetch the previous page."""
        self._go("previous", NoPreviousPageError)

    def first(self) -> None:
        """Fetch the first page."""
        self._go("first", NoFirstPageError)

    def last(self) -> None:
        """Fetch the last page."""
        self._go("last", NoLastPageError)

    def _go(self, attribute: str, error_cls: type[NoPageError]) -> None:
        if not self.started_original:
            logger.debug("Not started, fetching the first page instead of the %s link", attribute)
            self._submit(self._perform_original)
            return
        self._submit(self._navigate, attribute, error_cls)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def wait(self, timeout: float | None = None) -> None:
        """Block until every call made so far has been processed.

        Must not be called from ``on_page``, which runs on the worker.

        Raises:
            concurrent.futures.TimeoutError: If *timeout* expires first.
        """
        with self._lock:
            if self._closed:
                return
            marker: Future = self._pool.submit(lambda: None)
        marker.result(timeout=timeout)

    def close(self) -> None:
        """Stop accepting calls and wait for queued work to finish.

        Work that is already queued still runs and its results are still
        delivered to ``on_page``.  When called from ``on_page`` the worker
        cannot wait for itself, so this returns without waiting.
        """
        with self._lock:
            if self._closed:
                return
            self._closed = True
        self._pool.shutdown(wait=threading.current_thread() is not self._worker)

    def __enter__(self) -> PaginatedFetcher:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    # ------------------------------------------------------------------
    # Worker side
    # ------------------------------------------------------------------

    def _submit(self, fn: Callable[..., None], *args: Any) -> None:
        with self._lock:
            if self._closed:
                raise FetcherClosedError("The fetcher has been closed.")
            self._pool.submit(self._run, fn, *args)

    def _run(self, fn: Callable[..., None], *args: Any) -> None:
        self._worker = threading.current_thread()
        try:
            fn(*args)
        except Exception:
            # Nothing else observes the worker's futures.
            logger.exception("Unhandled error in pagination worker")

    def _perform_original(self) -> None:
        self._perform(self.request.build())

    def _navigate(self, attribute: str, error_cls: type[NoPageError]) -> None:
        link = getattr(self.links, attribute)
        # No links at all means the server does not paginate this collection.
        if not self.links.has_any_links() or link is None:
            self._deliver(None, error_cls())
            return

        self._perform(self.request_for(link))

    def _perform(self, request: PageRequest) -> None:
        logger.debug("GET %s params=%s", request.url, dict(request.params))
        try:
            body = self.executor.execute(request)
        except PaginationError as exc:
            logger.warning("Request for %s failed: %s", request.url, exc)
            self._deliver(None, exc)
            return
        except Exception as exc:
            logger.warning("Request for %s failed: %s", request.url, exc)
            error = TransportError(str(exc))
            error.__cause__ = exc
            self._deliver(None, error)
            return

        try:
            envelope = _decode_envelope(body)
            items = self._parse(envelope)
        except InvalidResponseError as exc:
            logger.warning("Invalid response for %s: %s", request.url, exc)
            self._deliver(None, exc)
            return

        self.update_links(envelope)
        self._deliver(items, None)

    def _parse(self, envelope: dict[str, Any]) -> list:
        # Parsed before any state changes so a parser failure keeps the cursor.
        try:
            return list(self.parser.parse(envelope))
        except Exception as exc:
            raise InvalidResponseError(f"Could not parse response: {exc}") from exc

    def _deliver(self, items: list | None, error: Exception | None) -> None:
        try:
            self.on_page(items, error)
        except Exception:
            logger.exception("on_page callback raised")


def _decode_envelope(body: bytes | str | None) -> dict[str, Any]:
    """Decode a raw response body into a JSON object."""
    if not body:
        raise InvalidResponseError("Empty response body.")
    try:
        envelope = json.loads(body)
    except ValueError as exc:
        raise InvalidResponseError(f"Response is not valid JSON: {exc}") from exc
    if not isinstance(envelope, dict):
        raise InvalidResponseError(
            f"Expected a JSON object, got {type(envelope).__name__}."
        )
    return envelope
