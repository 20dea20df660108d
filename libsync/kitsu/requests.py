"""Seed request templates for Kitsu's paged collections.

Templates are frozen dataclasses.  ``build()`` turns one into the
:class:`~libsync.pagination.PageRequest` for the first page; ``clone()``
returns an equal copy.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any

from libsync.config import settings
from libsync.kitsu.filters import MediaFilter
from libsync.pagination.requests import PageRequest

LIBRARY_STATUSES = ("current", "planned", "completed", "on_hold", "dropped")


class MediaType(str, Enum):
    ANIME = "anime"
    MANGA = "manga"


def _page_params(limit: int, offset: int) -> list[tuple[str, str]]:
    return [("page[limit]", str(limit)), ("page[offset]", str(offset))]


def _filter_value(value: Any) -> str:
    if isinstance(value, (list, tuple)):
        return ",".join(str(v) for v in value)
    return str(value)


def _check_page(limit: int, offset: int) -> None:
    if limit < 1:
        raise ValueError(f"page_limit must be at least 1, got {limit}.")
    if offset < 0:
        raise ValueError(f"page_offset must not be negative, got {offset}.")


@dataclass(frozen=True)
class LibraryRequest:
    """A user's library entries of one media type.

    Args:
        user_id: The Kitsu user whose library is fetched.
        media_type: Anime or manga entries.
        statuses: Only entries with these statuses; empty means all.
        page_limit: Entries per page.
        page_offset: Offset of the first page.
        include: Related resources to side-load.  Defaults to the media.
    """

    user_id: int
    media_type: MediaType = MediaType.ANIME
    statuses: tuple[str, ...] = ()
    page_limit: int = field(default_factory=lambda: settings.page_limit)
    page_offset: int = 0
    include: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "media_type", MediaType(self.media_type))
        object.__setattr__(self, "statuses", tuple(self.statuses))
        unknown = [s for s in self.statuses if s not in LIBRARY_STATUSES]
        if unknown:
            raise ValueError(
                f"Unknown library status {unknown[0]!r}. "
                f"Expected one of: {', '.join(LIBRARY_STATUSES)}"
            )
        _check_page(self.page_limit, self.page_offset)

    def clone(self) -> LibraryRequest:
        return replace(self)

    def build(self) -> PageRequest:
        params: list[tuple[str, str]] = [
            ("filter[user_id]", str(self.user_id)),
            ("filter[kind]", self.media_type.value),
        ]
        if self.statuses:
            params.append(("filter[status]", ",".join(self.statuses)))
        params.extend(_page_params(self.page_limit, self.page_offset))
        include = self.include or (self.media_type.value,)
        params.append(("include", ",".join(include)))
        return PageRequest(url="/library-entries", params=tuple(params))


@dataclass(frozen=True)
class MediaRequest:
    """The anime or manga catalogue, filtered and sorted by a
    :class:`~libsync.kitsu.filters.MediaFilter`."""

    media_type: MediaType = MediaType.ANIME
    filter: MediaFilter = field(default_factory=MediaFilter)
    page_limit: int = field(default_factory=lambda: settings.page_limit)
    page_offset: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "media_type", MediaType(self.media_type))
        _check_page(self.page_limit, self.page_offset)

    def clone(self) -> MediaRequest:
        return replace(self)

    def build(self) -> PageRequest:
        params = [
            (f"filter[{key}]", _filter_value(value))
            for key, value in self.filter.construct().items()
        ]
        params.append(("sort", str(self.filter.sort)))
        params.extend(_page_params(self.page_limit, self.page_offset))
        return PageRequest(url=f"/{self.media_type.value}", params=tuple(params))
