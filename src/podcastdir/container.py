"""Composition root: builds the service graph from configuration.

Construct once at the entry point and pass the service down. There is
no global registry.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

from podcastdir.cache.base import CacheRepository
from podcastdir.cache.file import FileCacheRepository
from podcastdir.cache.memory import InMemoryCacheRepository
from podcastdir.catalog.http import HttpClient, HttpxClient
from podcastdir.catalog.repository import CatalogRepository, ItunesCatalogRepository
from podcastdir.config.schema import CacheConfig, GlobalConfig
from podcastdir.directory.service import PodcastService
from podcastdir.directory.single_flight import SingleFlight
from podcastdir.directory.use_cases import (
    GetEpisodeDetails,
    GetPodcastDetails,
    GetTopPodcasts,
)


def create_cache(config: CacheConfig) -> CacheRepository:
    """Create the configured cache backend."""
    if config.backend == "memory":
        return InMemoryCacheRepository(default_ttl_hours=config.ttl_hours)
    return FileCacheRepository(cache_dir=config.directory, default_ttl_hours=config.ttl_hours)


def create_service(
    repository: CatalogRepository,
    cache: CacheRepository,
    config: CacheConfig | None = None,
) -> PodcastService:
    """Wire the use cases and the service around a repository and cache.

    Args:
        repository: Catalog data source
        cache: Cache store shared by all use cases
        config: Cache settings (TTL, single-flight)

    Returns:
        Ready-to-use PodcastService
    """
    config = config or CacheConfig()
    single_flight = SingleFlight() if config.single_flight else None

    def wire(use_case_type: type[Any]) -> Any:
        return use_case_type(
            repository,
            cache,
            ttl_hours=config.ttl_hours,
            single_flight=single_flight,
        )

    return PodcastService(
        get_top_podcasts=wire(GetTopPodcasts),
        get_podcast_details=wire(GetPodcastDetails),
        get_episode_details=wire(GetEpisodeDetails),
    )


@asynccontextmanager
async def build_service(
    config: GlobalConfig,
    http: HttpClient | None = None,
    cache: CacheRepository | None = None,
) -> AsyncIterator[PodcastService]:
    """Build the full graph and release the HTTP client afterwards.

    Args:
        config: Global configuration
        http: HttpClient to use instead of a new HttpxClient
        cache: Cache to use instead of the configured backend

    Yields:
        PodcastService
    """
    owned_http = None
    if http is None:
        owned_http = HttpxClient(timeout=config.catalog.timeout_seconds)
        http = owned_http

    repository = ItunesCatalogRepository(http, config.catalog)
    service = create_service(repository, cache or create_cache(config.cache), config.cache)

    try:
        yield service
    finally:
        if owned_http is not None:
            await owned_http.aclose()
