"""JSON:API document parser.

Turns the ``data`` member of a Kitsu response into :class:`Resource`
objects, resolving relationship identifiers against the side-loaded
``included`` resources.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Union

Related = Union["Resource", list["Resource"], None]


@dataclass
class Resource:
    """A single JSON:API resource object."""

    id: str
    type: str
    attributes: dict[str, Any] = field(default_factory=dict)
    related: dict[str, Related] = field(default_factory=dict)

    @property
    def title(self) -> str:
        """Best-effort display title for media resources."""
        titles = self.attributes.get("titles") or {}
        return (
            self.attributes.get("canonicalTitle")
            or titles.get("en")
            or titles.get("en_jp")
            or self.attributes.get("slug")
            or f"{self.type}/{self.id}"
        )


def _make_resource(obj: Any) -> Resource | None:
    if not isinstance(obj, dict):
        return None
    res_id, res_type = obj.get("id"), obj.get("type")
    if res_id is None or not res_type:
        return None
    attributes = obj.get("attributes")
    return Resource(
        id=str(res_id),
        type=str(res_type),
        attributes=attributes if isinstance(attributes, dict) else {},
    )


class ResourceParser:
    """Parse JSON:API envelopes into :class:`Resource` lists.

    Entries without an ``id`` or ``type`` are skipped.  Relationships are
    resolved one level deep; a related resource that was not side-loaded is
    returned as a bare ``Resource`` carrying only its identifier.
    """

    def parse(self, envelope: dict[str, Any]) -> list[Resource]:
        included: dict[tuple[str, str], Resource] = {}
        for obj in envelope.get("included") or []:
            res = _make_resource(obj)
            if res is not None:
                included[(res.type, res.id)] = res

        data = envelope.get("data")
        objects = data if isinstance(data, list) else [data]

        resources: list[Resource] = []
        for obj in objects:
            res = _make_resource(obj)
            if res is None:
                continue
            res.related = self._resolve(obj.get("relationships"), included)
            resources.append(res)
        return resources

    def _resolve(
        self,
        relationships: Any,
        included: dict[tuple[str, str], Resource],
    ) -> dict[str, Related]:
        if not isinstance(relationships, dict):
            return {}

        resolved: dict[str, Related] = {}
        for name, rel in relationships.items():
            # Relationships without linkage (links only) are not resolvable.
            if not isinstance(rel, dict) or "data" not in rel:
                continue
            linkage = rel["data"]
            if isinstance(linkage, list):
                resolved[name] = [
                    r for r in (self._lookup(i, included) for i in linkage) if r
                ]
            else:
                resolved[name] = self._lookup(linkage, included)
        return resolved

    @staticmethod
    def _lookup(
        identifier: Any,
        included: dict[tuple[str, str], Resource],
    ) -> Resource | None:
        stub = _make_resource(identifier)
        if stub is None:
            return None
        return included.get((stub.type, stub.id), stub)
