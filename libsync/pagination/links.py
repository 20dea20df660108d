"""Pagination link state parsed from a response envelope."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class LinkSet:
    """Immutable snapshot of the four navigation links of a page.

    Every field is independently optional; a response may legitimately
    supply only ``first`` and ``last``.
    """

    first: str | None = None
    next: str | None = None
    previous: str | None = None
    last: str | None = None

    def has_any_links(self) -> bool:
        """Return ``True`` if at least one link is set."""
        return any(
            link is not None
            for link in (self.first, self.next, self.previous, self.last)
        )

    @classmethod
    def from_envelope(cls, envelope: Any) -> LinkSet:
        """Build a :class:`LinkSet` from a decoded response envelope.

        Reads the ``"links"`` object.  If it is missing or not an object,
        every link is ``None``.  Note the wire key for the previous page is
        ``"prev"``.  Non-string values are treated as missing.
        """
        container = envelope.get("links") if isinstance(envelope, dict) else None
        if not isinstance(container, dict):
            return cls()

        return cls(
            first=_string_or_none(container.get("first")),
            next=_string_or_none(container.get("next")),
            previous=_string_or_none(container.get("prev")),
            last=_string_or_none(container.get("last")),
        )


def _string_or_none(value: Any) -> str | None:
    return value if isinstance(value, str) else None
