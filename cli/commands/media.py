"""Media commands for browsing the anime/manga catalogue."""

from typing import List, Optional

import typer

from libsync.kitsu import Direction, MediaFilter, MediaRequest, MediaType, RangeFilter, Sort
from libsync.kitsu.filters import RATING_MAX, RATING_MIN, YEAR_MIN
from libsync.pagination import PaginationError

from cli.paging import walk_pages
from cli.rendering import render_media

media_app = typer.Typer(help="Browse the media catalogue.", no_args_is_help=True)


@media_app.callback()
def media() -> None:
    """Browse the media catalogue."""


@media_app.command("browse")
def media_browse(
    media_type: MediaType = typer.Argument(MediaType.ANIME, help="anime | manga"),
    genre: Optional[List[str]] = typer.Option(None, "--genre", help="Filter by genre (repeatable)."),
    year_start: int = typer.Option(YEAR_MIN, "--year-start", help="Earliest start year."),
    year_end: Optional[int] = typer.Option(None, "--year-end", help="Latest start year."),
    rating_min: float = typer.Option(RATING_MIN, "--rating-min", help="Minimum average rating."),
    rating_max: float = typer.Option(RATING_MAX, "--rating-max", help="Maximum average rating."),
    sort: str = typer.Option("user_count", "--sort", help="Attribute to sort by."),
    ascending: bool = typer.Option(False, "--ascending", help="Sort ascending."),
    pages: int = typer.Option(1, "--pages", min=1, help="Maximum number of pages to show."),
) -> None:
    """Browse anime or manga matching the given filters."""
    direction = Direction.ASCENDING if ascending else Direction.DESCENDING
    media_filter = MediaFilter(
        sort=Sort(sort, direction),
        year=RangeFilter(year_start, year_end),
        rating=RangeFilter(rating_min, rating_max),
        genres=tuple(genre or ()),
    )
    request = MediaRequest(media_type=media_type, filter=media_filter)

    typer.echo(f"🔍 Browsing {media_type.value} (sort={media_filter.sort})")
    try:
        for number, items in enumerate(walk_pages(request, pages), start=1):
            typer.echo(f"── Page {number} ({len(items)} results)")
            if not items:
                typer.echo("No results found.")
            for media in items:
                typer.echo(f" {render_media(media)}")
    except PaginationError as e:
        typer.echo(f"❌ Error: {e}")
        raise typer.Exit(code=1)
