"""
Test helper functions and utilities.
"""
import json
from datetime import datetime
from typing import Any, Optional, Union
from unittest.mock import MagicMock

from recognizer.models import TrackEntity, TrackLinks, TrackMetadata


def create_track_entity(**kwargs) -> TrackEntity:
    """Create sample TrackEntity with optional overrides."""
    defaults = {
        "mb_id": "b1a9c0e9-d987-4042-ae91-78d6a3267d69",
        "title": "Harder, Better, Faster, Stronger",
        "artist": "Daft Punk",
        "album": "Discovery",
        "metadata": TrackMetadata(last_recognition_date=datetime(2024, 5, 1, 12, 0, 0)),
        "links": TrackLinks(
            deezer="https://www.deezer.com/track/3135556",
            spotify="https://open.spotify.com/track/5W3cjX2J3tjhG8zb6u0qHn",
        ),
    }
    is_favorite = kwargs.pop("is_favorite", None)
    recognized_at = kwargs.pop("last_recognition_date", None)
    defaults.update(kwargs)
    if is_favorite is not None or recognized_at is not None:
        defaults["metadata"] = TrackMetadata(
            last_recognition_date=recognized_at or defaults["metadata"].last_recognition_date,
            is_favorite=bool(is_favorite),
        )
    return TrackEntity(**defaults)


def create_mock_response(
    status_code: int = 200, body: Optional[Union[dict, list, str, bytes]] = None
) -> MagicMock:
    """
    Create mock requests.Response usable as a context manager.

    Args:
        status_code: HTTP status code
        body: JSON-serializable body, or raw str/bytes content

    Returns:
        Mock response
    """
    if isinstance(body, bytes):
        content = body
    elif isinstance(body, str):
        content = body.encode("utf-8")
    else:
        content = json.dumps(body if body is not None else {}).encode("utf-8")

    response = MagicMock()
    response.status_code = status_code
    response.ok = status_code < 400
    response.content = content
    response.__enter__.return_value = response
    response.__exit__.return_value = False
    return response


def deezer_body(album: Optional[dict] = None, artist: Optional[dict] = None, **extra: Any) -> dict:
    """Build a Deezer track body with only the given blocks."""
    body = dict(extra)
    if album is not None:
        body["album"] = album
    if artist is not None:
        body["artist"] = artist
    return body
