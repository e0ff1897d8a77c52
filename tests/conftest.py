"""Pytest configuration and fixtures for yt-transcript tests."""

import os
import sys
import pytest

# Make the package and the test mocks importable without installing anything
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..', 'src')))
sys.path.insert(0, os.path.abspath(os.path.dirname(__file__)))

from yt_transcript.core.config import Config
from yt_transcript.core.transcript_fetcher import TranscriptFetcher
from yt_transcript.models import CaptionTrack, TranscriptSnippet
from yt_transcript.services import TranscriptService

from mocks.mock_youtube import (
    MockYouTubeSession,
    WATCH_PAGE_HTML,
    PLAYER_RESPONSE,
    TRANSCRIPT_XML
)


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests without I/O")
    config.addinivalue_line("markers", "integration: end-to-end tests over a mocked session")


def pytest_collection_modifyitems(items):
    """Mark tests by directory so run_tests.py can select them."""
    for item in items:
        path = str(item.fspath)
        if f"{os.sep}integration{os.sep}" in path:
            item.add_marker(pytest.mark.integration)
        elif f"{os.sep}unit{os.sep}" in path:
            item.add_marker(pytest.mark.unit)


@pytest.fixture
def test_config():
    """Configuration with the built-in defaults."""
    return Config()


@pytest.fixture
def sample_snippets():
    """Snippets around the one-minute mark."""
    return [
        TranscriptSnippet(text="a", start=58.2, duration=1.5),
        TranscriptSnippet(text="b", start=60.0, duration=1.2),
        TranscriptSnippet(text="c", start=61.4, duration=2.0),
    ]


@pytest.fixture
def sample_tracks():
    """Manual and generated tracks in two languages."""
    return [
        CaptionTrack(base_url="https://example.test/de-asr", language_code="de", is_generated=True),
        CaptionTrack(base_url="https://example.test/en-asr", language_code="en", is_generated=True),
        CaptionTrack(base_url="https://example.test/en", language_code="en", is_generated=False, name="English"),
        CaptionTrack(base_url="https://example.test/fr", language_code="fr", is_generated=False, name="French"),
    ]


@pytest.fixture
def mock_session():
    """Session answering the three pipeline requests with canned data."""
    return MockYouTubeSession(
        page_html=WATCH_PAGE_HTML,
        player_response=PLAYER_RESPONSE,
        transcript_xml=TRANSCRIPT_XML
    )


@pytest.fixture
def fetcher(mock_session, test_config):
    """TranscriptFetcher wired to the mock session."""
    return TranscriptFetcher(session=mock_session, config=test_config)


@pytest.fixture
def service(fetcher, test_config):
    """TranscriptService wired to the mock session."""
    return TranscriptService(fetcher=fetcher, config=test_config)
