from typing import Iterable, Iterator

from .domain.models import PlaylistEntry


def format_entry(entry: PlaylistEntry) -> str:
    """Formats an entry as `"title", "published_at", "video_id"`.

    Quotes inside the title are written as-is.
    """
    return f'"{entry.title}", "{entry.published_at}", "{entry.video_id}"'


def report_lines(entries: Iterable[PlaylistEntry]) -> Iterator[str]:
    for entry in entries:
        yield format_entry(entry)
