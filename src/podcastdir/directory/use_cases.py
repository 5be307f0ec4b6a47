"""Application use cases: cache-or-fetch over the catalog repository.

Every use case follows the same flow. It validates its input, then checks
the cache (an expired entry is evicted and treated as a miss). On a miss it
fetches from the repository, maps to DTOs, writes the result back with the
configured TTL and returns it. Cache failures are logged and never abort a
call that the network path can satisfy.
"""

import logging
from collections.abc import Awaitable, Callable
from typing import Any, Generic, TypeVar

from pydantic import TypeAdapter, ValidationError

from podcastdir.cache.base import DEFAULT_TTL_HOURS, CacheRepository
from podcastdir.catalog.ids import PodcastId
from podcastdir.catalog.models import Episode, Podcast
from podcastdir.catalog.repository import CatalogRepository
from podcastdir.directory.dto import EpisodeDTO, PodcastDetailDTO, PodcastListDTO
from podcastdir.directory.single_flight import SingleFlight
from podcastdir.utils.errors import EpisodeNotFoundError, PodcastNotFoundError

logger = logging.getLogger(__name__)

T = TypeVar("T")

TOP_PODCASTS_KEY = "top_podcasts"


def podcast_detail_key(podcast_id: PodcastId) -> str:
    return f"podcast_detail_{podcast_id.value}"


def episode_key(podcast_id: PodcastId, episode_id: str) -> str:
    return f"episode_{podcast_id.value}_{episode_id}"


def to_list_dto(podcast: Podcast) -> PodcastListDTO:
    return PodcastListDTO(
        id=podcast.id.value,
        title=podcast.title,
        author=podcast.author,
        image=podcast.best_image_url(),
        description=podcast.description,
    )


def to_episode_dto(episode: Episode) -> EpisodeDTO:
    return EpisodeDTO(
        id=episode.id,
        title=episode.title,
        description=episode.description,
        audio_url=episode.audio_url,
        duration=episode.formatted_duration(),
        duration_seconds=episode.duration,
        published_at=episode.formatted_date(),
        podcast_id=episode.podcast_id.value,
    )


def to_detail_dto(podcast: Podcast, episodes: list[Episode]) -> PodcastDetailDTO:
    return PodcastDetailDTO(
        **to_list_dto(podcast).model_dump(),
        episode_count=len(episodes),
        episodes=[to_episode_dto(e) for e in episodes],
    )


class CachedUseCase(Generic[T]):
    """Shared cache-or-fetch machinery for the use cases below."""

    adapter: TypeAdapter[Any]

    def __init__(
        self,
        repository: CatalogRepository,
        cache: CacheRepository,
        ttl_hours: float = DEFAULT_TTL_HOURS,
        single_flight: SingleFlight | None = None,
    ) -> None:
        """Initialize the use case.

        Args:
            repository: Catalog data source
            cache: Cache store shared across use cases
            ttl_hours: TTL for entries this use case writes
            single_flight: Optional table collapsing concurrent misses
        """
        self.repository = repository
        self.cache = cache
        self.ttl_hours = ttl_hours
        self.single_flight = single_flight

    async def _cached(self, key: str, loader: Callable[[], Awaitable[T]]) -> T:
        cached = await self._read_cache(key)
        if cached is not None:
            logger.debug("Cache hit for %s", key)
            return cached

        logger.debug("Cache miss for %s", key)
        if self.single_flight is None:
            return await self._load_and_store(key, loader)
        return await self.single_flight.do(key, lambda: self._load_and_store(key, loader))

    async def _load_and_store(self, key: str, loader: Callable[[], Awaitable[T]]) -> T:
        result = await loader()

        try:
            await self.cache.set(
                key, self.adapter.dump_python(result, mode="json"), self.ttl_hours
            )
        except Exception as e:
            logger.warning("Cache write for %s failed: %s", key, e)

        return result

    async def _read_cache(self, key: str) -> T | None:
        try:
            if await self.cache.is_expired(key):
                await self.cache.clear(key)
                return None
            raw = await self.cache.get(key)
        except Exception as e:
            logger.warning("Cache read for %s failed: %s", key, e)
            return None

        if raw is None:
            return None

        try:
            return self.adapter.validate_python(raw)
        except ValidationError:
            logger.warning("Cached value for %s has an unexpected shape, refetching", key)

        try:
            await self.cache.clear(key)
        except Exception as e:
            logger.warning("Cache eviction for %s failed: %s", key, e)
        return None


class GetTopPodcasts(CachedUseCase[list[PodcastListDTO]]):
    """List the directory's top podcasts."""

    adapter = TypeAdapter(list[PodcastListDTO])

    async def execute(self) -> list[PodcastListDTO]:
        return await self._cached(TOP_PODCASTS_KEY, self._fetch)

    async def _fetch(self) -> list[PodcastListDTO]:
        podcasts = await self.repository.get_top_podcasts()
        return [to_list_dto(p) for p in podcasts]


class GetPodcastDetails(CachedUseCase[PodcastDetailDTO]):
    """Podcast metadata plus its episode listing."""

    adapter = TypeAdapter(PodcastDetailDTO)

    async def execute(self, podcast_id: str | int) -> PodcastDetailDTO:
        """Get podcast details.

        Args:
            podcast_id: Raw podcast id

        Raises:
            InvalidIdError: If the id is malformed
            PodcastNotFoundError: If the catalog has no such podcast
        """
        pid = PodcastId.create(podcast_id)
        return await self._cached(podcast_detail_key(pid), lambda: self._fetch(pid))

    async def _fetch(self, pid: PodcastId) -> PodcastDetailDTO:
        podcast = await self.repository.get_podcast_by_id(pid)
        if podcast is None:
            raise PodcastNotFoundError(pid.value)

        episodes = await self.repository.get_episodes_by_podcast_id(pid)
        return to_detail_dto(podcast, episodes)


class GetEpisodeDetails(CachedUseCase[EpisodeDTO]):
    """A single episode of a podcast.

    Missing podcasts and episodes both raise; this use case never returns
    None.
    """

    adapter = TypeAdapter(EpisodeDTO)

    async def execute(self, episode_id: str | int, podcast_id: str | int) -> EpisodeDTO:
        """Get episode details.

        Args:
            episode_id: Episode (track) id
            podcast_id: Raw id of the owning podcast

        Raises:
            InvalidIdError: If the podcast id is malformed
            PodcastNotFoundError: If the podcast does not exist
            EpisodeNotFoundError: If the podcast has no such episode
        """
        pid = PodcastId.create(podcast_id)
        eid = str(episode_id).strip()
        return await self._cached(episode_key(pid, eid), lambda: self._fetch(eid, pid))

    async def _fetch(self, episode_id: str, pid: PodcastId) -> EpisodeDTO:
        podcast = await self.repository.get_podcast_by_id(pid)
        if podcast is None:
            raise PodcastNotFoundError(pid.value)

        episode = await self.repository.get_episode_by_id(episode_id, pid)
        if episode is None:
            raise EpisodeNotFoundError(episode_id, pid.value)

        return to_episode_dto(episode)
