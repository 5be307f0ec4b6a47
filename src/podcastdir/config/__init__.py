"""Configuration management for podcastdir."""

from podcastdir.config.manager import ConfigManager
from podcastdir.config.schema import CacheConfig, CatalogConfig, GlobalConfig

__all__ = ["ConfigManager", "GlobalConfig", "CatalogConfig", "CacheConfig"]
