"""
Shared pytest fixtures for musicrecognizer tests.
"""
import os
from datetime import datetime

import pytest
import requests

from recognizer.artwork import ArtworkFetcher
from recognizer.config import ArtworkSettings
from recognizer.library import TrackLibrary
from recognizer.mappers import RemoteResultMapper, TrackMapper
from tests.helpers import create_mock_response, create_track_entity


@pytest.fixture
def sample_track_entity():
    """Create sample TrackEntity with a Deezer link."""
    return create_track_entity()


@pytest.fixture
def sample_tracks():
    """Three tracks recognized on different days, the middle one favorite."""
    return [
        create_track_entity(
            mb_id="mb-001",
            title="One More Time",
            artist="Daft Punk",
            album="Discovery",
            last_recognition_date=datetime(2024, 1, 1),
        ),
        create_track_entity(
            mb_id="mb-002",
            title="Windowlicker",
            artist="Aphex Twin",
            album="Windowlicker",
            lyrics="I'm going to lick your window",
            last_recognition_date=datetime(2024, 2, 1),
            is_favorite=True,
        ),
        create_track_entity(
            mb_id="mb-003",
            title="Teardrop",
            artist="Massive Attack",
            album="Mezzanine",
            last_recognition_date=datetime(2024, 3, 1),
        ),
    ]


@pytest.fixture
def track_mapper():
    return TrackMapper()


@pytest.fixture
def remote_result_mapper(track_mapper):
    return RemoteResultMapper(track_mapper)


@pytest.fixture
def track_library(sample_tracks):
    """Library pre-filled with sample tracks."""
    library = TrackLibrary()
    library.upsert_all(sample_tracks)
    return library


@pytest.fixture
def mock_session(mocker):
    """Create mock requests session returning an empty 200 response."""
    session = mocker.Mock(spec=requests.Session)
    session.headers = {}
    session.get.return_value = create_mock_response(200, {})
    return session


@pytest.fixture
def artwork_settings():
    return ArtworkSettings(base_url="https://api.deezer.test", timeout=5.0, max_workers=2)


@pytest.fixture
def artwork_fetcher(artwork_settings, mock_session):
    """Create ArtworkFetcher backed by the mock session."""
    fetcher = ArtworkFetcher(artwork_settings, session=mock_session)
    yield fetcher
    fetcher.close()


@pytest.fixture
def sample_config_yaml(tmp_path):
    """Create sample config YAML file."""
    config_file = tmp_path / "config.yaml"
    config_file.write_text("""
version: 1.0
artwork:
  base_url: https://api.deezer.test
  timeout: 3.5
  max_workers: 4
deep_links:
  scheme: musicrecognizer
log_level: debug
""")
    return str(config_file)


@pytest.fixture
def network_tests_enabled():
    """Skip unless real network tests were requested."""
    if not os.getenv("MUSICRECOGNIZER_NETWORK_TESTS"):
        pytest.skip("MUSICRECOGNIZER_NETWORK_TESTS not set")
