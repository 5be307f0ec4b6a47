"""Configuration schema models using Pydantic."""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]
CacheBackend = Literal["file", "memory"]


class CatalogConfig(BaseModel):
    """Remote directory API configuration."""

    base_url: str = "https://itunes.apple.com"
    country: str = "us"
    genre: int = 1310  # Music
    top_limit: int = Field(default=100, gt=0)
    lookup_url: str = "https://itunes.apple.com/lookup"
    episode_limit: int = Field(default=20, gt=0)
    timeout_seconds: float = Field(default=30.0, gt=0)

    @property
    def top_podcasts_url(self) -> str:
        base = self.base_url.rstrip("/")
        return (
            f"{base}/{self.country}/rss/toppodcasts/"
            f"limit={self.top_limit}/genre={self.genre}/json"
        )


class CacheConfig(BaseModel):
    """Local cache configuration."""

    backend: CacheBackend = "file"
    ttl_hours: float = Field(default=24, gt=0)
    directory: Path | None = None  # Defaults to the XDG cache dir
    single_flight: bool = True  # Collapse concurrent fetches of one key


class GlobalConfig(BaseModel):
    """Global podcastdir configuration."""

    version: str = "1"
    log_level: LogLevel = "WARNING"

    catalog: CatalogConfig = Field(default_factory=CatalogConfig)
    cache: CacheConfig = Field(default_factory=CacheConfig)
