"""Utilities for rendering Kitsu resources in the CLI."""

from __future__ import annotations

from libsync.kitsu.parser import Resource

_STATUS_ICONS = {
    "current": "▶️",
    "planned": "🗓️",
    "completed": "✅",
    "on_hold": "⏸️",
    "dropped": "🗑️",
}


def _media_of(entry: Resource) -> Resource | None:
    for name in ("media", "anime", "manga"):
        related = entry.related.get(name)
        if isinstance(related, Resource):
            return related
    return None


def render_entry(entry: Resource) -> str:
    """Render a library entry as one line: status, title, progress."""
    status = entry.attributes.get("status", "")
    icon = _STATUS_ICONS.get(status, "📦")
    media = _media_of(entry)
    title = media.title if media else f"(entry {entry.id})"
    progress = entry.attributes.get("progress", 0)

    total = None
    if media:
        total = media.attributes.get("episodeCount") or media.attributes.get("chapterCount")
    progress_text = f"{progress}/{total}" if total else f"{progress}"

    return f"{icon} {title}  [{status or 'unknown'}]  {progress_text}"


def render_media(media: Resource) -> str:
    """Render a media resource as one line: title, year, rating."""
    start_date = media.attributes.get("startDate") or ""
    year = start_date[:4] or "????"
    rating = media.attributes.get("averageRating")
    rating_text = f"★ {rating}" if rating else "★ -"
    return f"{media.title} ({year})  {rating_text}"
