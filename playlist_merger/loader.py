import logging
from pathlib import Path
from typing import List, Union

from pymonad.either import Either, Left, Right

from .domain.errors import FileReadError

logger = logging.getLogger(__name__)


def read_api_key(path: Union[str, Path], strip: bool = False) -> Either[FileReadError, str]:
    """
    Reads the YouTube Data API key from a file.

    The key is returned exactly as stored, trailing newline included,
    unless `strip` is set.

    Returns:
        Either: A Right(api_key) or a Left(FileReadError).
    """
    try:
        with open(path, "r", encoding="utf-8", newline="") as key_file:
            api_key = key_file.read()
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Could not read API key file '{path}': {e}")
        return Left(FileReadError(f"Could not read API key file '{path}': {e}"))

    logger.info(f"API key read from '{path}'.")
    return Right(api_key.strip() if strip else api_key)


def read_playlist_urls(path: Union[str, Path]) -> Either[FileReadError, List[str]]:
    """
    Reads playlist URLs from a newline-separated file.

    Blank lines and lines starting with '#' are skipped.

    Returns:
        Either: A Right(list of URLs) or a Left(FileReadError).
    """
    try:
        with open(path, "r", encoding="utf-8") as playlist_file:
            lines = playlist_file.read().split("\n")
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Could not read playlist file '{path}': {e}")
        return Left(FileReadError(f"Could not read playlist file '{path}': {e}"))

    urls = []
    for line in lines:
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        urls.append(line)

    logger.info(f"{len(urls)} playlist URL(s) read from '{path}'.")
    return Right(urls)
