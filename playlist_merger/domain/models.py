from dataclasses import dataclass


@dataclass(frozen=True)
class PlaylistEntry:
    """A video as it appears in a YouTube playlist."""
    title: str
    published_at: str
    video_id: str
    playlist_id: str = ""

    @classmethod
    def from_api_item(cls, item: dict) -> "PlaylistEntry":
        """Builds an entry from a playlistItems.list resource."""
        snippet = item.get("snippet") or {}
        details = item.get("contentDetails") or {}
        return cls(
            title=snippet.get("title", ""),
            published_at=details.get("videoPublishedAt", ""),
            video_id=details.get("videoId", ""),
            playlist_id=snippet.get("playlistId", ""),
        )
