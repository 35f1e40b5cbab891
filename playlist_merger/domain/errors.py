# playlist_merger/domain/errors.py
from dataclasses import dataclass


@dataclass(frozen=True)
class AppError:
    """Base class for application errors."""
    message: str


@dataclass(frozen=True)
class FileReadError(AppError):
    """The API key file or the playlist file could not be read."""
    pass


@dataclass(frozen=True)
class URLParseError(AppError):
    """A playlist line is not a well-formed URL."""
    pass


@dataclass(frozen=True)
class InvalidHostError(AppError):
    """The URL does not point to the YouTube web host."""
    pass


@dataclass(frozen=True)
class MissingParameterError(AppError):
    """The URL has no 'list' query parameter."""
    pass


@dataclass(frozen=True)
class AmbiguousParameterError(AppError):
    """The URL has more than one 'list' query parameter."""
    pass


@dataclass(frozen=True)
class YouTubeApiError(AppError):
    """Error while talking to the YouTube Data API."""
    pass


@dataclass(frozen=True)
class TimestampParseError(AppError):
    """A playlist entry carries a publish date that is not RFC 3339."""
    pass
