"""Utility functions and helpers for podcastdir."""

from podcastdir.utils.errors import (
    CatalogConnectionError,
    CatalogError,
    CatalogHTTPError,
    ConfigError,
    DomainError,
    EpisodeNotFoundError,
    InvalidConfigError,
    InvalidIdError,
    NotFoundError,
    PodcastDirError,
    PodcastNotFoundError,
)
from podcastdir.utils.paths import get_cache_dir, get_config_dir, get_config_file

__all__ = [
    # Errors
    "PodcastDirError",
    "ConfigError",
    "InvalidConfigError",
    "DomainError",
    "InvalidIdError",
    "NotFoundError",
    "PodcastNotFoundError",
    "EpisodeNotFoundError",
    "CatalogError",
    "CatalogHTTPError",
    "CatalogConnectionError",
    # Paths
    "get_config_dir",
    "get_cache_dir",
    "get_config_file",
]
