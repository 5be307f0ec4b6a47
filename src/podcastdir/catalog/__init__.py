"""Catalog domain: identifiers, entities, mapping and data access."""

from podcastdir.catalog.http import HttpClient, HttpxClient
from podcastdir.catalog.ids import PodcastId
from podcastdir.catalog.mapper import (
    LookupResult,
    map_lookup_response,
    map_top_podcasts_response,
)
from podcastdir.catalog.models import Episode, Podcast
from podcastdir.catalog.repository import CatalogRepository, ItunesCatalogRepository

__all__ = [
    "PodcastId",
    "Podcast",
    "Episode",
    "LookupResult",
    "map_top_podcasts_response",
    "map_lookup_response",
    "HttpClient",
    "HttpxClient",
    "CatalogRepository",
    "ItunesCatalogRepository",
]
