"""Media catalogue filters.

Kitsu filters media with ``filter[<key>]=<value>`` query parameters.  Ranges
are written ``start..end`` (``start..`` when open-ended).
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Generic, Iterable, Optional, TypeVar

T = TypeVar("T", int, float)

YEAR_MIN = 1907
YEAR_MAX = 99999
RATING_MIN = 0.5
RATING_MAX = 5.0


class Direction(str, Enum):
    ASCENDING = "ascending"
    DESCENDING = "descending"


@dataclass(frozen=True)
class Sort:
    """Sort by a given attribute key."""

    key: str
    direction: Direction = Direction.DESCENDING

    def __str__(self) -> str:
        prefix = "-" if self.direction is Direction.DESCENDING else ""
        return f"{prefix}{self.key}"


@dataclass(frozen=True)
class RangeFilter(Generic[T]):
    """An inclusive range; ``end=None`` leaves it open."""

    start: T
    end: Optional[T] = None

    def capped(self, minimum: T, maximum: T) -> RangeFilter[T]:
        """Return a copy with both bounds clamped to ``[minimum, maximum]``."""
        start = max(minimum, min(self.start, maximum))
        end = None if self.end is None else max(minimum, min(self.end, maximum))
        return RangeFilter(start, end)

    def corrected(self) -> RangeFilter[T]:
        """Return a copy with start and end swapped if they are reversed."""
        if self.end is not None and self.start > self.end:
            return RangeFilter(self.end, self.start)
        return self

    def __str__(self) -> str:
        end = "" if self.end is None else str(self.end)
        return f"{self.start}..{end}"


def _default_year() -> RangeFilter[int]:
    return RangeFilter(YEAR_MIN, None)


def _default_rating() -> RangeFilter[float]:
    return RangeFilter(RATING_MIN, RATING_MAX)


@dataclass(frozen=True)
class MediaFilter:
    """Filters applied when browsing the anime or manga catalogue.

    Year and rating ranges are normalised on construction: clamped to the
    values Kitsu accepts and swapped if reversed.  A rating range without an
    end runs up to 5.0.
    """

    sort: Sort = field(default_factory=lambda: Sort("user_count"))
    year: RangeFilter[int] = field(default_factory=_default_year)
    rating: RangeFilter[float] = field(default_factory=_default_rating)
    genres: tuple[str, ...] = ()
    additional: tuple[tuple[str, Any], ...] = ()

    def __post_init__(self) -> None:
        year = self.year.capped(YEAR_MIN, YEAR_MAX).corrected()
        rating = self.rating
        if rating.end is None:
            rating = RangeFilter(rating.start, RATING_MAX)
        rating = rating.capped(RATING_MIN, RATING_MAX).corrected()
        object.__setattr__(self, "year", year)
        object.__setattr__(self, "rating", rating)
        object.__setattr__(self, "genres", tuple(self.genres))

    def with_genres(self, genres: Iterable[str]) -> MediaFilter:
        """Filter by *genres*.  An empty iterable means all genres."""
        return replace(self, genres=tuple(genres))

    def with_filter(self, key: str, value: Any) -> MediaFilter:
        """Filter by an arbitrary *key*, replacing any earlier value for it."""
        others = tuple((k, v) for k, v in self.additional if k != key)
        return replace(self, additional=others + ((key, value),))

    def construct(self) -> dict[str, Any]:
        """Return the filters as a ``{key: value}`` dict."""
        filters: dict[str, Any] = {"year": str(self.year)}

        # Kitsu drops unrated media when a rating filter is sent, so only
        # send one when it differs from the full range.
        if self.rating != _default_rating():
            filters["averageRating"] = str(self.rating)

        if self.genres:
            filters["genres"] = list(self.genres)

        for key, value in self.additional:
            filters[key] = value

        return filters
