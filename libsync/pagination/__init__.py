"""Pagination package: link-following fetcher for paged collections."""

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
from libsync.pagination.fetcher import DataParser, PaginatedFetcher
from libsync.pagination.links import LinkSet
from libsync.pagination.requests import PageRequest, request_for_link

__all__ = [
    "PaginatedFetcher",
    "DataParser",
    "LinkSet",
    "PageRequest",
    "request_for_link",
    "PaginationError",
    "TransportError",
    "InvalidResponseError",
    "NoPageError",
    "NoNextPageError",
    "NoPreviousPageError",
    "NoFirstPageError",
    "NoLastPageError",
    "FetcherClosedError",
]
