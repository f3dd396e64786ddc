"""
Integration tests for ArtworkFetcher with the real Deezer API.
Requires MUSICRECOGNIZER_NETWORK_TESTS to be set.
"""
import pytest

from recognizer.artwork import ArtworkFetcher, ArtworkMissReason
from recognizer.models import TrackLinks
from tests.helpers import create_track_entity


@pytest.mark.integration
class TestArtworkFetcherIntegration:
    """Integration tests with real Deezer API."""

    @pytest.fixture
    def fetcher(self, network_tests_enabled):
        with ArtworkFetcher() as fetcher:
            yield fetcher

    def test_known_track_has_artwork(self, fetcher):
        """Test resolving artwork for Harder, Better, Faster, Stronger."""
        track = create_track_entity(links=TrackLinks(deezer="https://www.deezer.com/track/3135556"))

        url = fetcher.fetch_url(track)

        assert url is not None
        assert url.startswith("https://")

    def test_unknown_track_has_no_artwork(self, fetcher):
        """Test that Deezer's error body is treated as no artwork."""
        track = create_track_entity(links=TrackLinks(deezer="https://www.deezer.com/track/1"))

        result = fetcher.lookup(track)

        assert result.url is None
        assert result.reason in (ArtworkMissReason.NO_IMAGE, ArtworkMissReason.HTTP_STATUS)
