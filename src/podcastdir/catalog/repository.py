"""Catalog repository port and the iTunes-backed implementation."""

import logging
from typing import Protocol

from podcastdir.catalog.http import HttpClient
from podcastdir.catalog.ids import PodcastId
from podcastdir.catalog.mapper import (
    LookupResult,
    map_lookup_response,
    map_top_podcasts_response,
)
from podcastdir.catalog.models import Episode, Podcast
from podcastdir.config.schema import CatalogConfig

logger = logging.getLogger(__name__)


class CatalogRepository(Protocol):
    """Read access to the podcast directory."""

    async def get_top_podcasts(self) -> list[Podcast]: ...

    async def get_podcast_by_id(self, podcast_id: PodcastId) -> Podcast | None: ...

    async def get_episodes_by_podcast_id(self, podcast_id: PodcastId) -> list[Episode]: ...

    async def get_episode_by_id(
        self, episode_id: str, podcast_id: PodcastId
    ) -> Episode | None: ...


class ItunesCatalogRepository:
    """CatalogRepository over the public iTunes directory API.

    Podcast metadata and episodes both come from the lookup endpoint, so
    each of the podcast/episode methods performs one lookup. Nothing is
    cached here and HTTP errors propagate unchanged.
    """

    def __init__(self, http: HttpClient, config: CatalogConfig | None = None) -> None:
        self.http = http
        self.config = config or CatalogConfig()

    async def get_top_podcasts(self) -> list[Podcast]:
        url = self.config.top_podcasts_url
        logger.info("Fetching top podcasts from %s", url)

        response = await self.http.get_json(url)
        return map_top_podcasts_response(response)

    async def get_podcast_by_id(self, podcast_id: PodcastId) -> Podcast | None:
        return (await self._lookup(podcast_id)).podcast

    async def get_episodes_by_podcast_id(self, podcast_id: PodcastId) -> list[Episode]:
        return (await self._lookup(podcast_id)).episodes

    async def get_episode_by_id(
        self, episode_id: str, podcast_id: PodcastId
    ) -> Episode | None:
        # No single-episode endpoint upstream
        episodes = await self.get_episodes_by_podcast_id(podcast_id)
        return next((e for e in episodes if e.id == episode_id), None)

    async def _lookup(self, podcast_id: PodcastId) -> LookupResult:
        params = {
            "id": podcast_id.value,
            "media": "podcast",
            "entity": "podcastEpisode",
            "limit": self.config.episode_limit,
        }
        logger.info("Looking up podcast %s", podcast_id)

        response = await self.http.get_json(self.config.lookup_url, params=params)
        return map_lookup_response(response, podcast_id.value)
