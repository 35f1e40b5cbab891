import pytest

from playlist_merger.playlist_url import extract_playlist_id, extract_playlist_ids
from playlist_merger.domain.errors import (
    AmbiguousParameterError,
    InvalidHostError,
    MissingParameterError,
    URLParseError,
)


@pytest.mark.parametrize(
    "url, expected_id",
    [
        ("https://youtube.com/playlist?list=PL123456789", "PL123456789"),
        ("https://youtube.com/watch?v=abc&list=PLmixed_-Id", "PLmixed_-Id"),
        ("http://youtube.com/playlist?list=PL%2Fencoded", "PL/encoded"),
        ("https://youtube.com/playlist?list=", ""),
    ],
)
def test_extract_playlist_id_success(url, expected_id):
    """
    Checks that the single 'list' value is returned after query decoding.
    """
    result = extract_playlist_id(url)

    assert result.is_right()
    assert result.value == expected_id


# Scenario: wrong host, whatever the query
@pytest.mark.parametrize(
    "url",
    [
        "https://notyoutube.com/playlist?list=PL123",
        "https://notyoutube.com/playlist",
        "https://notyoutube.com/playlist?list=a&list=b",
        "https://www.youtube.com/playlist?list=PL123",
        "https://YouTube.com/playlist?list=PL123",
        "https://youtu.be/playlist?list=PL123",
        "youtube.com/playlist?list=PL123",
    ],
)
def test_extract_playlist_id_invalid_host(url, caplog):
    """
    Checks that any host other than exactly 'youtube.com' is rejected.
    LDD: Verifies error logs.
    """
    result = extract_playlist_id(url)

    assert result.is_left()
    error_value, _ = result.monoid
    assert isinstance(error_value, InvalidHostError)
    assert "youtube.com" in error_value.message
    assert "expected 'youtube.com'" in caplog.text


def test_extract_playlist_id_ignores_user_info():
    result = extract_playlist_id("https://user@youtube.com/playlist?list=PL1")

    assert result.is_right()
    assert result.value == "PL1"


def test_extract_playlist_id_missing_parameter(caplog):
    """
    Checks that a URL without a 'list' parameter returns a MissingParameterError.
    LDD: Verifies error logs.
    """
    result = extract_playlist_id("https://youtube.com/watch?v=abc")

    assert result.is_left()
    error_value, _ = result.monoid
    assert isinstance(error_value, MissingParameterError)
    assert "'list' does not exist" in error_value.message
    assert "No 'list' parameter" in caplog.text


def test_extract_playlist_id_ambiguous_parameter():
    """
    Checks that a URL with two 'list' parameters returns an AmbiguousParameterError.
    """
    result = extract_playlist_id("https://youtube.com/playlist?list=PL1&list=PL2")

    assert result.is_left()
    error_value, _ = result.monoid
    assert isinstance(error_value, AmbiguousParameterError)
    assert "single value" in error_value.message


@pytest.mark.parametrize(
    "url",
    [
        "https://[::1/playlist?list=PL1",
        "https://youtube.com:port/playlist?list=PL1",
        "https://youtube.com/playlist?list=PL1\x7f",
        "https://youtube.com/play\nlist?list=PL1",
        "https://youtube.com/%zz?list=PL1",
        "https://youtube.com/playlist?list=PL%2",
    ],
)
def test_extract_playlist_id_malformed_url(url):
    """
    Checks that malformed URLs return a URLParseError.
    """
    result = extract_playlist_id(url)

    assert result.is_left()
    error_value, _ = result.monoid
    assert isinstance(error_value, URLParseError)


def test_extract_playlist_ids_keeps_order():
    urls = [
        "https://youtube.com/playlist?list=PL_B",
        "https://youtube.com/playlist?list=PL_A",
    ]

    result = extract_playlist_ids(urls)

    assert result.is_right()
    assert result.value == ["PL_B", "PL_A"]


def test_extract_playlist_ids_stops_at_first_error():
    """
    Checks that the first invalid URL is reported, even if later ones are invalid too.
    """
    urls = [
        "https://youtube.com/playlist?list=PL_A",
        "https://notyoutube.com/playlist?list=PL_B",
        "https://youtube.com/watch?v=abc",
    ]

    result = extract_playlist_ids(urls)

    assert result.is_left()
    error_value, _ = result.monoid
    assert isinstance(error_value, InvalidHostError)


def test_extract_playlist_ids_empty_input():
    result = extract_playlist_ids([])

    assert result.is_right()
    assert result.value == []
