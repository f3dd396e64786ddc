"""
In-memory track library with paging, search and favorites.
"""

import logging
import threading
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional

from recognizer.exceptions import TrackNotFoundError
from recognizer.mappers import TrackMapper
from recognizer.models import (
    DEFAULT_SEARCH_SCOPE,
    SearchSuccess,
    Track,
    TrackDataField,
    TrackEntity,
)

logger = logging.getLogger(__name__)


@dataclass
class TrackPage:
    """One page of library tracks."""

    items: List[Track] = field(default_factory=list)
    page: int = 0
    page_size: int = 0
    total: int = 0

    @property
    def has_next(self) -> bool:
        return (self.page + 1) * self.page_size < self.total


class TrackLibrary:
    """Recognized tracks keyed by mb_id, newest recognition first."""

    def __init__(self, track_mapper: Optional[TrackMapper] = None):
        self.track_mapper = track_mapper or TrackMapper()
        self._tracks: Dict[str, TrackEntity] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._tracks)

    def upsert(self, track: TrackEntity) -> None:
        with self._lock:
            self._tracks[track.mb_id] = track
        logger.debug(f"Stored track {track.mb_id}: {track.title} - {track.artist}")

    def upsert_all(self, tracks: Iterable[TrackEntity]) -> None:
        for track in tracks:
            self.upsert(track)

    def get(self, mb_id: str) -> TrackEntity:
        try:
            return self._tracks[mb_id]
        except KeyError:
            raise TrackNotFoundError(f"Track not found: {mb_id}") from None

    def delete(self, mb_id: str) -> None:
        with self._lock:
            if self._tracks.pop(mb_id, None) is None:
                raise TrackNotFoundError(f"Track not found: {mb_id}")
        logger.debug(f"Deleted track {mb_id}")

    def toggle_favorite(self, mb_id: str) -> TrackEntity:
        """Flip the favorite flag of a track and return the updated entity."""
        with self._lock:
            track = self._tracks.get(mb_id)
            if track is None:
                raise TrackNotFoundError(f"Track not found: {mb_id}")
            updated = track.with_favorite(not track.metadata.is_favorite)
            self._tracks[mb_id] = updated
        return updated

    def _ordered(self, favorites_only: bool = False) -> List[TrackEntity]:
        with self._lock:
            tracks = list(self._tracks.values())
        if favorites_only:
            tracks = [t for t in tracks if t.metadata.is_favorite]
        return sorted(tracks, key=lambda t: t.metadata.last_recognition_date, reverse=True)

    def page(self, page: int, page_size: int, favorites_only: bool = False) -> TrackPage:
        """
        Return one page of tracks, newest recognition first.

        Args:
            page: Zero-based page index
            page_size: Tracks per page
            favorites_only: Only include favorite tracks

        Returns:
            TrackPage (empty past the last page)
        """
        if page < 0:
            raise ValueError(f"page must be >= 0, got {page}")
        if page_size < 1:
            raise ValueError(f"page_size must be >= 1, got {page_size}")

        tracks = self._ordered(favorites_only)
        start = page * page_size
        items = [self.track_mapper.map(t) for t in tracks[start:start + page_size]]
        return TrackPage(items=items, page=page, page_size=page_size, total=len(tracks))

    def search(self, query: str, scope: Optional[Iterable[TrackDataField]] = None) -> SearchSuccess:
        """Case-insensitive substring search over the fields in scope."""
        search_scope = frozenset(scope) if scope is not None else DEFAULT_SEARCH_SCOPE
        needle = query.strip().casefold()

        matches: List[Track] = []
        if not needle:
            return SearchSuccess(query=query, search_scope=search_scope, data=matches)

        for track in self._ordered():
            for data_field in search_scope:
                value = getattr(track, data_field.value)
                if value and needle in value.casefold():
                    matches.append(self.track_mapper.map(track))
                    break

        return SearchSuccess(query=query, search_scope=search_scope, data=matches)
