"""Facade consumed by the presentation layer."""

from collections.abc import Mapping, Sequence
from typing import Any, TypeVar

from podcastdir.catalog.models import matches_search
from podcastdir.directory.dto import EpisodeDTO, PodcastDetailDTO, PodcastListDTO
from podcastdir.directory.use_cases import (
    GetEpisodeDetails,
    GetPodcastDetails,
    GetTopPodcasts,
)

P = TypeVar("P")


def _field(podcast: Any, name: str) -> str:
    if isinstance(podcast, Mapping):
        value = podcast.get(name)
    else:
        value = getattr(podcast, name, None)
    return "" if value is None else str(value)


class PodcastService:
    """Entry point for listing, inspecting and searching podcasts."""

    def __init__(
        self,
        get_top_podcasts: GetTopPodcasts,
        get_podcast_details: GetPodcastDetails,
        get_episode_details: GetEpisodeDetails,
    ) -> None:
        self._get_top_podcasts = get_top_podcasts
        self._get_podcast_details = get_podcast_details
        self._get_episode_details = get_episode_details

    async def get_top_podcasts(self) -> list[PodcastListDTO]:
        return await self._get_top_podcasts.execute()

    async def get_podcast_details(self, podcast_id: str | int) -> PodcastDetailDTO:
        return await self._get_podcast_details.execute(podcast_id)

    async def get_episode_details(
        self, episode_id: str | int, podcast_id: str | int
    ) -> EpisodeDTO:
        return await self._get_episode_details.execute(episode_id, podcast_id)

    def filter_podcasts(self, podcasts: Sequence[P], search_term: str) -> list[P]:
        """Keep podcasts whose title or author contains the search term.

        Matching is case-insensitive. A blank term returns every podcast.

        Args:
            podcasts: DTOs (or mappings with title/author keys)
            search_term: Text typed by the user

        Returns:
            Matching podcasts in their original order
        """
        return [
            p
            for p in podcasts
            if matches_search(_field(p, "title"), _field(p, "author"), search_term)
        ]
