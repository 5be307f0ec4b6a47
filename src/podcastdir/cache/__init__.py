"""Key-value caching with per-entry time-to-live."""

from podcastdir.cache.base import DEFAULT_TTL_HOURS, CacheRepository
from podcastdir.cache.file import FileCacheRepository
from podcastdir.cache.memory import InMemoryCacheRepository

__all__ = [
    "CacheRepository",
    "DEFAULT_TTL_HOURS",
    "FileCacheRepository",
    "InMemoryCacheRepository",
]
