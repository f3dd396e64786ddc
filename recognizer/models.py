"""
Data models for musicrecognizer.
"""

from dataclasses import dataclass, field, fields, replace
from datetime import date, datetime
from enum import Enum
from typing import FrozenSet, List, Optional, Tuple, Union


@dataclass(frozen=True)
class TrackLinks:
    """External service links for a track. Every link is optional."""

    spotify: Optional[str] = None
    apple_music: Optional[str] = None
    deezer: Optional[str] = None
    napster: Optional[str] = None
    musicbrainz: Optional[str] = None
    youtube: Optional[str] = None
    youtube_music: Optional[str] = None
    soundcloud: Optional[str] = None

    def present(self) -> List[Tuple[str, str]]:
        """Return (service, url) pairs for the links that are set."""
        return [
            (f.name, getattr(self, f.name))
            for f in fields(self)
            if getattr(self, f.name)
        ]


@dataclass(frozen=True)
class TrackMetadata:
    """Library bookkeeping for a persisted track."""

    last_recognition_date: datetime
    is_favorite: bool = False


@dataclass(frozen=True)
class TrackEntity:
    """Persisted representation of a recognized track."""

    mb_id: str
    title: str
    artist: str
    metadata: TrackMetadata
    album: Optional[str] = None
    release_date: Optional[date] = None
    lyrics: Optional[str] = None
    links: TrackLinks = field(default_factory=TrackLinks)

    def __post_init__(self):
        if not self.mb_id:
            raise ValueError("Track mb_id must not be empty")

    def with_favorite(self, is_favorite: bool) -> "TrackEntity":
        """Return a copy with the favorite flag set."""
        return replace(self, metadata=replace(self.metadata, is_favorite=is_favorite))


@dataclass(frozen=True)
class Track:
    """Track as shown by the recognition queue and library screens."""

    mb_id: str
    title: str
    artist: str
    last_recognition_date: datetime
    album: Optional[str] = None
    release_date: Optional[date] = None
    lyrics: Optional[str] = None
    artwork_url: Optional[str] = None
    links: TrackLinks = field(default_factory=TrackLinks)
    is_favorite: bool = False


class TrackDataField(Enum):
    """Track fields the library search can look at."""

    TITLE = "title"
    ARTIST = "artist"
    ALBUM = "album"
    LYRICS = "lyrics"


DEFAULT_SEARCH_SCOPE: FrozenSet[TrackDataField] = frozenset(
    {TrackDataField.TITLE, TrackDataField.ARTIST, TrackDataField.ALBUM}
)


@dataclass(frozen=True)
class SearchPending:
    """Search that has been requested but not yet answered."""

    query: str
    search_scope: FrozenSet[TrackDataField]


@dataclass(frozen=True)
class SearchSuccess:
    """Completed library search."""

    query: str
    search_scope: FrozenSet[TrackDataField]
    data: List[Track] = field(default_factory=list)


SearchResult = Union[SearchPending, SearchSuccess]
