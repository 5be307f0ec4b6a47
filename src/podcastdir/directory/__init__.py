"""Directory use cases and the service facade built on them."""

from podcastdir.directory.dto import EpisodeDTO, PodcastDetailDTO, PodcastListDTO
from podcastdir.directory.service import PodcastService
from podcastdir.directory.single_flight import SingleFlight
from podcastdir.directory.use_cases import (
    GetEpisodeDetails,
    GetPodcastDetails,
    GetTopPodcasts,
)

__all__ = [
    "EpisodeDTO",
    "PodcastDetailDTO",
    "PodcastListDTO",
    "PodcastService",
    "SingleFlight",
    "GetTopPodcasts",
    "GetPodcastDetails",
    "GetEpisodeDetails",
]
