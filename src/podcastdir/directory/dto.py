"""Data shapes returned across the use-case boundary."""

from pydantic import BaseModel, Field


class EpisodeDTO(BaseModel):
    """Episode as shown to the presentation layer.

    ``duration`` is always the display string and ``duration_seconds``
    the raw value, whichever screen consumes it.
    """

    id: str
    title: str
    description: str
    audio_url: str | None = None
    duration: str
    duration_seconds: int | None = None
    published_at: str  # DD/MM/YYYY
    podcast_id: str


class PodcastListDTO(BaseModel):
    """Podcast row in the top list."""

    id: str
    title: str
    author: str
    image: str
    description: str


class PodcastDetailDTO(PodcastListDTO):
    """Podcast with its episode listing."""

    episode_count: int = 0
    episodes: list[EpisodeDTO] = Field(default_factory=list)
