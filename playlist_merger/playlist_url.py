import logging
import re
from typing import Iterable, List
from urllib.parse import parse_qs, urlsplit

from pymonad.either import Either, Left, Right

from .domain.errors import (
    AmbiguousParameterError,
    AppError,
    InvalidHostError,
    MissingParameterError,
    URLParseError,
)

logger = logging.getLogger(__name__)

YOUTUBE_HOST = "youtube.com"
PLAYLIST_PARAMETER = "list"
BAD_PERCENT_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")


def _has_control_characters(url: str) -> bool:
    return any(ord(char) < 0x20 or ord(char) == 0x7F for char in url)


def extract_playlist_id(url: str) -> Either[AppError, str]:
    """
    Extracts the playlist ID from a YouTube playlist URL.

    The host must be exactly 'youtube.com' and the query must carry a
    single 'list' parameter, e.g. https://youtube.com/playlist?list=PL123.

    Args:
        url: The playlist URL.

    Returns:
        Either: A Right(playlist_id) or a Left with the matching AppError.
    """
    if _has_control_characters(url):
        logger.error(f"URL {url!r} contains control characters.")
        return Left(URLParseError(f"Could not parse URL {url!r}: control characters found"))

    try:
        parsed = urlsplit(url)
        # Accessing the port validates it
        parsed.port
    except ValueError as e:
        logger.error(f"Could not parse URL '{url}': {e}")
        return Left(URLParseError(f"Could not parse URL '{url}': {e}"))

    if BAD_PERCENT_ESCAPE.search(parsed.netloc + parsed.path + "?" + parsed.query):
        logger.error(f"URL '{url}' contains an invalid percent-escape.")
        return Left(URLParseError(f"Could not parse URL '{url}': invalid percent-escape"))

    host = parsed.netloc.rpartition("@")[2]
    if host != YOUTUBE_HOST:
        logger.error(f"URL '{url}' has host '{host}', expected '{YOUTUBE_HOST}'.")
        return Left(
            InvalidHostError(f"URL '{url}' is not a {YOUTUBE_HOST} URL (host: '{host}')")
        )

    values = parse_qs(parsed.query, keep_blank_values=True).get(PLAYLIST_PARAMETER)
    if not values:
        logger.error(f"No '{PLAYLIST_PARAMETER}' parameter in URL '{url}'.")
        return Left(
            MissingParameterError(
                f"Query item '{PLAYLIST_PARAMETER}' does not exist in URL '{url}'"
            )
        )

    if len(values) != 1:
        logger.error(f"{len(values)} '{PLAYLIST_PARAMETER}' parameters in URL '{url}'.")
        return Left(
            AmbiguousParameterError(
                f"Query item '{PLAYLIST_PARAMETER}' should have a single value in URL '{url}'"
            )
        )

    return Right(values[0])


def extract_playlist_ids(urls: Iterable[str]) -> Either[AppError, List[str]]:
    """Extracts every playlist ID, stopping at the first invalid URL."""
    playlist_ids = []
    for url in urls:
        result = extract_playlist_id(url)
        if result.is_left():
            return result
        playlist_ids.append(result.value)

    logger.info(f"{len(playlist_ids)} playlist ID(s) extracted.")
    return Right(playlist_ids)
