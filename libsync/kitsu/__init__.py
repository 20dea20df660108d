"""Kitsu API collaborators: request templates, executor and parser."""

from libsync.kitsu.client import HttpxExecutor
from libsync.kitsu.filters import Direction, MediaFilter, RangeFilter, Sort
from libsync.kitsu.parser import Resource, ResourceParser
from libsync.kitsu.requests import LibraryRequest, MediaRequest, MediaType

__all__ = [
    "HttpxExecutor",
    "ResourceParser",
    "Resource",
    "LibraryRequest",
    "MediaRequest",
    "MediaType",
    "MediaFilter",
    "RangeFilter",
    "Sort",
    "Direction",
]
