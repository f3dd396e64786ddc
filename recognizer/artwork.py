"""
Cover artwork lookup through the Deezer public API.

Artwork is cosmetic: every failure on the way (transport, status, decoding) is
logged and reported as "no artwork" instead of being raised to the caller.
"""

import logging
import re
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional, Tuple

import requests
from pydantic import BaseModel, ValidationError

from recognizer.config import ArtworkSettings
from recognizer.models import TrackEntity

logger = logging.getLogger(__name__)

TRACK_ID_PATTERN = re.compile(r"\d+$")

# Deezer track ids are 32-bit signed integers
MAX_TRACK_ID = 2**31 - 1


class DeezerAlbumJson(BaseModel):
    cover_xl: Optional[str] = None
    cover_big: Optional[str] = None
    cover_medium: Optional[str] = None


class DeezerArtistJson(BaseModel):
    picture_xl: Optional[str] = None
    picture_big: Optional[str] = None
    picture_medium: Optional[str] = None


class DeezerTrackJson(BaseModel):
    """Subset of the Deezer ``/track/{id}`` response used for artwork."""

    album: Optional[DeezerAlbumJson] = None
    artist: Optional[DeezerArtistJson] = None


# Album images first, artist pictures only when the album has none
IMAGE_PRIORITY: Tuple[Callable[[DeezerTrackJson], Optional[str]], ...] = (
    lambda t: t.album.cover_xl if t.album else None,
    lambda t: t.album.cover_big if t.album else None,
    lambda t: t.album.cover_medium if t.album else None,
    lambda t: t.artist.picture_xl if t.artist else None,
    lambda t: t.artist.picture_big if t.artist else None,
    lambda t: t.artist.picture_medium if t.artist else None,
)


def pick_image_url(track_json: DeezerTrackJson) -> Optional[str]:
    """Return the first image URL that is not null, in priority order."""
    for accessor in IMAGE_PRIORITY:
        url = accessor(track_json)
        if url is not None:
            return url
    return None


def extract_catalog_id(url: str) -> Optional[int]:
    """Extract the numeric Deezer track id from the end of a track link."""
    match = TRACK_ID_PATTERN.search(url)
    if not match:
        return None
    digits = match.group(0).lstrip("0") or "0"
    if len(digits) > len(str(MAX_TRACK_ID)):
        return None
    track_id = int(digits)
    if track_id > MAX_TRACK_ID:
        return None
    return track_id


class ArtworkMissReason(Enum):
    """Why a lookup produced no artwork."""

    NO_PROVIDER_LINK = "no_provider_link"
    NO_CATALOG_ID = "no_catalog_id"
    HTTP_STATUS = "http_status"
    NO_IMAGE = "no_image"
    TRANSPORT_ERROR = "transport_error"
    DECODE_ERROR = "decode_error"
    UNEXPECTED_ERROR = "unexpected_error"


@dataclass(frozen=True)
class ArtworkLookup:
    """Outcome of an artwork lookup."""

    url: Optional[str] = None
    reason: Optional[ArtworkMissReason] = None
    error: Optional[BaseException] = None

    @classmethod
    def found(cls, url: str) -> "ArtworkLookup":
        return cls(url=url)

    @classmethod
    def absent(cls, reason: ArtworkMissReason) -> "ArtworkLookup":
        return cls(reason=reason)

    @classmethod
    def failed(cls, reason: ArtworkMissReason, error: BaseException) -> "ArtworkLookup":
        return cls(reason=reason, error=error)

    @property
    def is_failure(self) -> bool:
        """True when the lookup was cut short by a suppressed error."""
        return self.error is not None


class ArtworkFetcher:
    """Resolve a cover image URL for a track from its Deezer link."""

    def __init__(
        self,
        settings: Optional[ArtworkSettings] = None,
        session: Optional[requests.Session] = None,
    ):
        """
        Initialize with lookup settings.

        Args:
            settings: Artwork settings (defaults apply when omitted)
            session: Optional requests session, created when not provided
        """
        self.settings = settings or ArtworkSettings()
        self.session = session or requests.Session()
        self.session.headers.update({"User-Agent": self.settings.user_agent})
        self._executor = ThreadPoolExecutor(
            max_workers=self.settings.max_workers,
            thread_name_prefix="artwork-io",
        )

    def fetch_url(self, track: TrackEntity) -> Optional[str]:
        """Return the best available artwork URL, or None."""
        return self.lookup(track).url

    def fetch_url_async(self, track: TrackEntity) -> "Future[Optional[str]]":
        """Run ``fetch_url`` on the I/O executor and return its future."""
        return self._executor.submit(self.fetch_url, track)

    def lookup(self, track: TrackEntity) -> ArtworkLookup:
        """
        Look up artwork for a track.

        Args:
            track: Track whose Deezer link is used

        Returns:
            ArtworkLookup with the URL, or the reason there is none
        """
        deezer_url = track.links.deezer
        if not deezer_url:
            return ArtworkLookup.absent(ArtworkMissReason.NO_PROVIDER_LINK)

        deezer_track_id = extract_catalog_id(deezer_url)
        if deezer_track_id is None:
            logger.debug(f"No Deezer track id in link: {deezer_url}")
            return ArtworkLookup.absent(ArtworkMissReason.NO_CATALOG_ID)

        return self._fetch_deezer_source(deezer_track_id)

    def _fetch_deezer_source(self, deezer_track_id: int) -> ArtworkLookup:
        request_url = f"{self.settings.base_url.rstrip('/')}/track/{deezer_track_id}"
        try:
            with self.session.get(request_url, timeout=self.settings.timeout) as response:
                if not 200 <= response.status_code < 300:
                    logger.debug(
                        f"Artwork lookup returned HTTP {response.status_code} ({request_url})"
                    )
                    return ArtworkLookup.absent(ArtworkMissReason.HTTP_STATUS)
                track_json = DeezerTrackJson.model_validate_json(response.content)
        except requests.RequestException as e:
            logger.error(f"Error during artwork fetching ({request_url}): {e}", exc_info=True)
            return ArtworkLookup.failed(ArtworkMissReason.TRANSPORT_ERROR, e)
        except (ValidationError, ValueError) as e:
            logger.error(f"Error during artwork decoding ({request_url}): {e}", exc_info=True)
            return ArtworkLookup.failed(ArtworkMissReason.DECODE_ERROR, e)
        except Exception as e:
            logger.error(f"Unexpected error during artwork fetching ({request_url}): {e}", exc_info=True)
            return ArtworkLookup.failed(ArtworkMissReason.UNEXPECTED_ERROR, e)

        url = pick_image_url(track_json)
        if url is None:
            return ArtworkLookup.absent(ArtworkMissReason.NO_IMAGE)
        return ArtworkLookup.found(url)

    def close(self) -> None:
        """Shut down the I/O executor and release pooled connections."""
        self._executor.shutdown(wait=True)
        self.session.close()

    def __enter__(self) -> "ArtworkFetcher":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
