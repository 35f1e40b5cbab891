import typer
import logging
from pathlib import Path
from typing import Any, List, Optional, Tuple
from rich.console import Console
from rich.markup import escape
from toolz import pipe
from pymonad.either import Either

from . import logger_config  # Important to initialise the logger
from .loader import read_api_key, read_playlist_urls
from .playlist_url import extract_playlist_ids
from .youtube_api import build_service, fetch_playlists
from .merger import merge_playlists
from .report import report_lines
from .domain.errors import AppError
from .domain.models import PlaylistEntry
from .i18n import get_message, set_lang

# Initialization
# Messages go to stderr, stdout only carries the merged list
console = Console(stderr=True)
logger = logging.getLogger(__name__)

app = typer.Typer(
    name="playlist-merger",
    help="Merge YouTube playlists into a single list sorted by publish date.",
    add_completion=False,
)


def _handle_error(error: AppError) -> None:
    """Displays a formatted error message and exits the application."""
    console.print(f"[bold red]{get_message('error')}:[/bold red] {escape(error.message)}")
    raise typer.Exit(code=1)


@app.command()
def merge(
    file: Path = typer.Option(
        Path("playlist.txt"), "--file", "-file", help=get_message("help_file")
    ),
    keyfile: Path = typer.Option(
        Path("key.txt"), "--keyfile", "-keyfile", help=get_message("help_keyfile")
    ),
    strip_key: bool = typer.Option(
        False, "--strip-key", help=get_message("help_strip_key")
    ),
    lang: Optional[str] = typer.Option(
        None, "--lang", help=get_message("help_lang"), show_default=False
    ),
):
    """Prints the videos of several playlists ordered by publish date."""
    if lang:
        set_lang(lang)
        logger.info(f"Language explicitly set to: {lang}")

    logger.info(f"Command 'merge' initiated with file '{file}' and key file '{keyfile}'.")

    def load_playlist_ids(api_key: str) -> Either[AppError, Tuple[str, List[str]]]:
        console.print(f"📄 {get_message('reading_inputs', file=escape(str(file)))}")
        return (
            read_playlist_urls(file)
            .bind(extract_playlist_ids)
            .map(lambda playlist_ids: (api_key, playlist_ids))
        )

    def fetch_flow(inputs: Tuple[str, List[str]]) -> Either[AppError, List[List[PlaylistEntry]]]:
        api_key, playlist_ids = inputs
        console.print(f"🔎 {get_message('playlists_found', count=len(playlist_ids))}")
        console.print(f"📡 {get_message('fetching_playlists')}")
        return build_service(api_key).bind(
            lambda youtube: fetch_playlists(youtube, playlist_ids)
        )

    def merge_flow(playlists: List[List[PlaylistEntry]]) -> Either[AppError, List[PlaylistEntry]]:
        console.print(f"🔀 {get_message('merging_playlists', count=len(playlists))}")
        return merge_playlists(playlists)

    def on_success(entries: List[PlaylistEntry]) -> Any:
        for line in report_lines(entries):
            typer.echo(line)
        console.print(
            f"[bold green]✓ {get_message('merge_completed', count=len(entries))}[/bold green]"
        )

    pipe(
        read_api_key(keyfile, strip=strip_key),
        lambda e: e.bind(load_playlist_ids),
        lambda e: e.bind(fetch_flow),
        lambda e: e.bind(merge_flow),
        lambda e: e.either(_handle_error, on_success),
    )


if __name__ == "__main__":
    app()
