import logging
import re
from datetime import datetime
from operator import itemgetter
from typing import Iterable, List, Tuple

from pymonad.either import Either, Left, Right
from toolz import concat

from .domain.errors import TimestampParseError
from .domain.models import PlaylistEntry

logger = logging.getLogger(__name__)

RFC3339_PATTERN = re.compile(
    r"(?P<base>[0-9]{4}-[0-9]{2}-[0-9]{2}T[0-9]{2}:[0-9]{2}:[0-9]{2})"
    r"(?:\.(?P<fraction>[0-9]+))?"
    r"(?P<offset>Z|[+-](?P<offset_hours>[0-9]{2}):(?P<offset_minutes>[0-9]{2}))"
)


def published_sort_key(value: str) -> Tuple[datetime, int]:
    """
    Parses an RFC 3339 timestamp such as '2023-01-01T12:00:00Z' into a sort key.

    The key is the timezone-aware datetime plus the nanoseconds that do not
    fit in its microseconds, so instants keep nanosecond precision.

    Raises:
        ValueError: if the value is not a valid RFC 3339 date-time.
    """
    match = RFC3339_PATTERN.fullmatch(value)
    if not match:
        raise ValueError(f"'{value}' is not an RFC 3339 timestamp")

    if match["offset"] != "Z" and (
        int(match["offset_hours"]) > 23 or int(match["offset_minutes"]) > 59
    ):
        raise ValueError(f"'{value}' has an invalid UTC offset")

    fraction = (match["fraction"] or "").ljust(9, "0")
    offset = "+00:00" if match["offset"] == "Z" else match["offset"]
    published = datetime.fromisoformat(f"{match['base']}.{fraction[:6]}{offset}")
    return published, int(fraction[6:9])


def parse_published_at(value: str) -> datetime:
    """Parses an RFC 3339 timestamp, truncated to microseconds."""
    return published_sort_key(value)[0]


def merge_playlists(playlists: Iterable[Iterable[PlaylistEntry]]) -> Either[TimestampParseError, List[PlaylistEntry]]:
    """
    Merges playlists into a single list ordered by publish date.

    Entries published at the same instant keep their input order
    (playlist order, then position within the playlist).

    Returns:
        Either: A Right(sorted entries) or a Left(TimestampParseError) if
        any entry has an unparsable publish date.
    """
    decorated = []
    for entry in concat(playlists):
        try:
            sort_key = published_sort_key(entry.published_at)
        except ValueError as e:
            error_message = (
                f"Invalid publish date '{entry.published_at}' for video '{entry.video_id}' "
                f"in playlist '{entry.playlist_id}': {e}"
            )
            logger.error(error_message)
            return Left(TimestampParseError(error_message))
        decorated.append((sort_key, entry))

    # list.sort is stable; the key keeps entries out of the comparison
    decorated.sort(key=itemgetter(0))

    merged = [entry for _, entry in decorated]
    logger.info(f"{len(merged)} entries merged.")
    return Right(merged)
