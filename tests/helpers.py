"""Test doubles and factories shared across the suite."""

from typing import Any

from podcastdir.catalog.ids import PodcastId
from podcastdir.catalog.models import Episode, Podcast


class FakeClock:
    """Controllable epoch-seconds clock."""

    def __init__(self, now: float = 1_700_000_000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, hours: float = 0, seconds: float = 0) -> None:
        self.now += hours * 3600 + seconds


class InMemoryCatalogRepository:
    """CatalogRepository test double backed by dicts, counting calls."""

    def __init__(
        self,
        top: list[Podcast] | None = None,
        podcasts: dict[str, Podcast] | None = None,
        episodes: dict[str, list[Episode]] | None = None,
        error: Exception | None = None,
    ) -> None:
        self.top = top or []
        self.podcasts = podcasts or {}
        self.episodes = episodes or {}
        self.error = error
        self.calls: list[str] = []

    async def get_top_podcasts(self) -> list[Podcast]:
        self.calls.append("get_top_podcasts")
        if self.error:
            raise self.error
        return list(self.top)

    async def get_podcast_by_id(self, podcast_id: PodcastId) -> Podcast | None:
        self.calls.append("get_podcast_by_id")
        if self.error:
            raise self.error
        return self.podcasts.get(podcast_id.value)

    async def get_episodes_by_podcast_id(self, podcast_id: PodcastId) -> list[Episode]:
        self.calls.append("get_episodes_by_podcast_id")
        if self.error:
            raise self.error
        return list(self.episodes.get(podcast_id.value, []))

    async def get_episode_by_id(self, episode_id: str, podcast_id: PodcastId) -> Episode | None:
        self.calls.append("get_episode_by_id")
        episodes = await self.get_episodes_by_podcast_id(podcast_id)
        return next((e for e in episodes if e.id == episode_id), None)


def make_podcast(**overrides: Any) -> Podcast:
    data = {
        "id": "123456",
        "title": "JS Weekly",
        "author": "Alice",
        "description": "All things JavaScript",
        "image": "https://example.com/image55x55bb.jpg",
    }
    data.update(overrides)
    return Podcast.create(data)


def make_episode(**overrides: Any) -> Episode:
    data = {
        "id": "789",
        "title": "Episode 1",
        "description": "The first one",
        "audio_url": "https://example.com/ep1.mp3",
        "duration": 3661,
        "published_at": "2024-01-15T10:00:00Z",
        "podcast_id": "123456",
    }
    data.update(overrides)
    return Episode.create(data)


