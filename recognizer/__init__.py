"""
Core modules for musicrecognizer recognition results, artwork and deep links.
"""

__version__ = "0.1.0"

from recognizer.artwork import ArtworkFetcher, ArtworkLookup, ArtworkMissReason
from recognizer.config import RecognizerConfig, load_config
from recognizer.deeplink import NotificationServiceRouter, parse_deep_link
from recognizer.exceptions import (
    ConfigError,
    DeepLinkError,
    RecognizerError,
    RecordingError,
    TrackNotFoundError,
)
from recognizer.library import TrackLibrary, TrackPage
from recognizer.mappers import RemoteResultMapper, TrackMapper
from recognizer.models import Track, TrackEntity, TrackLinks, TrackMetadata

__all__ = [
    "ArtworkFetcher",
    "ArtworkLookup",
    "ArtworkMissReason",
    "RecognizerConfig",
    "load_config",
    "NotificationServiceRouter",
    "parse_deep_link",
    "RemoteResultMapper",
    "TrackMapper",
    "TrackLibrary",
    "TrackPage",
    "Track",
    "TrackEntity",
    "TrackLinks",
    "TrackMetadata",
    "RecognizerError",
    "ConfigError",
    "DeepLinkError",
    "RecordingError",
    "TrackNotFoundError",
]
