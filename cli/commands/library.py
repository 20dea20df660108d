"""Library commands for browsing a user's anime/manga library page by page."""

from typing import List, Optional

import typer

from libsync.config import settings
from libsync.kitsu import LibraryRequest, MediaType
from libsync.pagination import PaginationError

from cli.paging import walk_pages
from cli.rendering import render_entry

library_app = typer.Typer(help="Browse a user's library.", no_args_is_help=True)


@library_app.callback()
def library() -> None:
    """Browse a user's library."""


@library_app.command("show")
def library_show(
    user_id: int = typer.Argument(..., help="Kitsu user id."),
    media_type: MediaType = typer.Option(MediaType.ANIME, "--type", help="anime | manga"),
    status: Optional[List[str]] = typer.Option(
        None, "--status", help="Only entries with this status (repeatable)."
    ),
    pages: int = typer.Option(1, "--pages", min=1, help="Maximum number of pages to show."),
    limit: Optional[int] = typer.Option(None, "--limit", min=1, help="Entries per page."),
    last: bool = typer.Option(False, "--last", help="Jump to the last page first."),
) -> None:
    """Show a user's library, following the server's pagination links."""
    try:
        request = LibraryRequest(
            user_id=user_id,
            media_type=media_type,
            statuses=tuple(status or ()),
            page_limit=limit or settings.page_limit,
        )
    except ValueError as e:
        typer.echo(f"❌ {e}")
        raise typer.Exit(code=1)

    typer.echo(f"📚 Library of user {user_id} ({media_type.value})")
    try:
        for number, entries in enumerate(walk_pages(request, pages, from_last=last), start=1):
            typer.echo(f"── Page {number} ({len(entries)} entries)")
            if not entries:
                typer.echo("No entries found.")
            for entry in entries:
                typer.echo(f" {render_entry(entry)}")
    except PaginationError as e:
        typer.echo(f"❌ Error: {e}")
        raise typer.Exit(code=1)
