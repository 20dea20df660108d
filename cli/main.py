"""libsync CLI: entry-point for browsing Kitsu collections.

Usage:
    python cli/main.py --help

Command groups:
    library   → a user's library entries, page by page
    media     → the anime / manga catalogue, filtered and sorted
"""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure the project root is on sys.path so that `from libsync.xxx import ...`
# works when the CLI is invoked as `python cli/main.py` from any working
# directory.
_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

import logging

import typer

from libsync.config import settings
from cli.commands.library import library_app
from cli.commands.media import media_app

app = typer.Typer(
    name="libsync",
    help="Browse Kitsu libraries and media, one page at a time.",
    no_args_is_help=True,
)
app.add_typer(library_app, name="library")
app.add_typer(media_app, name="media")


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log every request."),
) -> None:
    """Configure logging before any command runs."""
    level = logging.DEBUG if verbose else getattr(logging, settings.log_level.upper(), logging.WARNING)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


# ---------------------------------------------------------------------------
# Entry-point
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    app()
