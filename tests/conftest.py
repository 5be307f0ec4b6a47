"""Shared fixtures."""

from typing import Any

import pytest

from podcastdir.catalog.models import Episode, Podcast
from tests.helpers import FakeClock, make_episode, make_podcast


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def podcast() -> Podcast:
    return make_podcast()


@pytest.fixture
def episode() -> Episode:
    return make_episode()


@pytest.fixture
def top_podcasts_payload() -> dict[str, Any]:
    """Top podcasts feed as served by the iTunes RSS JSON endpoint."""
    return {
        "feed": {
            "entry": [
                {
                    "id": {"attributes": {"im:id": "1535809341"}},
                    "im:name": {"label": "The Joe Budden Podcast"},
                    "im:artist": {"label": "The Joe Budden Network"},
                    "summary": {"label": "Tune into Joe Budden and his friends."},
                    "im:image": [
                        {"label": "https://example.com/55x55bb.png", "attributes": {"height": "55"}},
                        {"label": "https://example.com/60x60bb.png", "attributes": {"height": "60"}},
                        {"label": "https://example.com/170x170bb.png", "attributes": {"height": "170"}},
                    ],
                },
                {
                    "id": {"attributes": {"im:id": "1311004083"}},
                    "im:name": {"label": "Broken Record"},
                    "im:artist": {"label": "Pushkin Industries"},
                    "im:image": [{"label": "https://example.com/br.png"}],
                },
            ]
        }
    }


@pytest.fixture
def lookup_payload() -> dict[str, Any]:
    """Lookup response with one podcast record and two episodes."""
    return {
        "resultCount": 3,
        "results": [
            {
                "wrapperType": "track",
                "kind": "podcast",
                "collectionId": 123456,
                "collectionName": "Test Podcast",
                "artistName": "Test Author",
                "artworkUrl600": "https://example.com/art600.jpg",
            },
            {
                "wrapperType": "podcastEpisode",
                "kind": "podcast-episode",
                "trackId": 789,
                "trackName": "Episode 1",
                "description": "First episode",
                "releaseDate": "2024-01-15T10:00:00Z",
                "trackTimeMillis": 3600000,
                "episodeUrl": "https://example.com/ep1.mp3",
            },
            {
                "wrapperType": "podcastEpisode",
                "kind": "podcast-episode",
                "trackId": 790,
                "trackName": "Episode 2",
                "releaseDate": "2024-01-22T10:00:00Z",
                "trackTimeMillis": 125000,
                "episodeUrl": "https://example.com/ep2.mp3",
            },
        ],
    }
