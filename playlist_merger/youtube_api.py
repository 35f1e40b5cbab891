import logging
from typing import Any, Dict, Iterable, Iterator, List

from googleapiclient.discovery import build
from googleapiclient.errors import HttpError
from pymonad.either import Either, Left, Right

from .domain.errors import YouTubeApiError
from .domain.models import PlaylistEntry

logger = logging.getLogger(__name__)

PLAYLIST_ITEM_PARTS = "snippet,id,contentDetails"
MAX_RESULTS = 50


def build_service(api_key: str) -> Either[YouTubeApiError, Any]:
    """
    Builds the YouTube Data API client authenticated with an API key.

    Returns:
        Either: A Right(youtube_service) or a Left(YouTubeApiError).
    """
    try:
        logger.info("Building YouTube service with API key.")
        youtube = build("youtube", "v3", developerKey=api_key, cache_discovery=False)
        return Right(youtube)
    except Exception as e:
        logger.error(f"Could not build YouTube service: {e}")
        return Left(YouTubeApiError(f"Could not build YouTube service: {e}"))


def iter_playlist_pages(youtube, playlist_id: str) -> Iterator[Dict[str, Any]]:
    """
    Yields the raw playlistItems.list responses of a playlist.

    The first request has no page token, the following ones pass the
    nextPageToken of the previous response. Stops once a response has no
    (or an empty) nextPageToken.
    """
    page_token = None
    while True:
        params = {
            "part": PLAYLIST_ITEM_PARTS,
            "playlistId": playlist_id,
            "maxResults": MAX_RESULTS,
        }
        if page_token:
            params["pageToken"] = page_token

        response = youtube.playlistItems().list(**params).execute()
        yield response

        page_token = response.get("nextPageToken")
        if not page_token:
            return


def fetch_playlist_entries(youtube, playlist_id: str) -> Either[YouTubeApiError, List[PlaylistEntry]]:
    """
    Retrieves every entry of a playlist, in API order.

    Args:
        youtube: The YouTube service returned by build_service.
        playlist_id: The ID of the playlist.

    Returns:
        Either: A Right(list of PlaylistEntry) or a Left(YouTubeApiError).
        Nothing is returned for the playlist if any page fails.
    """
    entries = []
    try:
        logger.info(f"Fetching items of playlist '{playlist_id}'.")
        for page_number, response in enumerate(iter_playlist_pages(youtube, playlist_id), start=1):
            items = response.get("items", [])
            logger.info(f"Page {page_number} of playlist '{playlist_id}': {len(items)} item(s).")
            entries.extend(PlaylistEntry.from_api_item(item) for item in items)

    except HttpError as e:
        error_message = f"API error while listing playlist '{playlist_id}': {e.content.decode('utf-8')}"
        logger.error(f"Failed to fetch playlist '{playlist_id}': {error_message}")
        return Left(YouTubeApiError(error_message))
    except Exception as e:
        logger.error(f"An unexpected error occurred while fetching playlist '{playlist_id}': {e}")
        return Left(YouTubeApiError(f"An unexpected error occurred: {e}"))

    logger.info(f"Playlist '{playlist_id}' fetched: {len(entries)} item(s).")
    return Right(entries)


def fetch_playlists(youtube, playlist_ids: Iterable[str]) -> Either[YouTubeApiError, List[List[PlaylistEntry]]]:
    """Fetches the playlists one after the other, stopping at the first failure."""
    playlists = []
    for playlist_id in playlist_ids:
        result = fetch_playlist_entries(youtube, playlist_id)
        if result.is_left():
            return result
        playlists.append(result.value)
    return Right(playlists)
