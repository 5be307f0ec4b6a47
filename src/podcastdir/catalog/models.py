"""Domain entities for podcasts and episodes."""

import logging
from collections.abc import Mapping
from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict

from podcastdir.catalog.ids import PodcastId

logger = logging.getLogger(__name__)

LOW_RES_IMAGE_MARKER = "55x55bb"
HIGH_RES_IMAGE_MARKER = "600x600bb"
DURATION_PLACEHOLDER = "--:--"
DATE_PLACEHOLDER = "--/--/----"


def _clean(value: Any) -> str:
    """Trim a loosely-typed field into a string, mapping None to ''."""
    if value is None:
        return ""
    return str(value).strip()


def parse_published_at(value: Any) -> datetime | None:
    """Parse an ISO-8601 timestamp, returning None when unusable.

    Args:
        value: datetime, ISO string (``Z`` suffix allowed) or None

    Returns:
        Parsed datetime or None
    """
    if isinstance(value, datetime):
        return value

    text = _clean(value)
    if not text:
        return None

    if text.endswith("Z"):
        text = text[:-1] + "+00:00"

    try:
        return datetime.fromisoformat(text)
    except ValueError:
        logger.warning("Unparsable episode date %r, rendering placeholder", value)
        return None


def matches_search(title: str, author: str, search_term: str) -> bool:
    """Case-insensitive substring match on title or author.

    A blank term matches everything.
    """
    term = search_term.lower().strip()
    if not term:
        return True

    return term in title.lower() or term in author.lower()


class Podcast(BaseModel):
    """A podcast as listed in the directory."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    id: PodcastId
    title: str
    author: str
    description: str
    image: str
    episode_count: int = 0

    @classmethod
    def create(cls, data: Mapping[str, Any]) -> "Podcast":
        """Build a podcast from raw data.

        Args:
            data: Mapping with id, title, author, description, image and
                optionally episode_count

        Raises:
            InvalidIdError: If the id is empty or non-numeric
        """
        return cls(
            id=PodcastId.create(data.get("id", "")),
            title=_clean(data.get("title")),
            author=_clean(data.get("author")),
            description=_clean(data.get("description")),
            image=_clean(data.get("image")),
            episode_count=int(data.get("episode_count") or 0),
        )

    def best_image_url(self) -> str:
        """Return the artwork URL upgraded to the 600px rendition if possible."""
        return self.image.replace(LOW_RES_IMAGE_MARKER, HIGH_RES_IMAGE_MARKER)

    def matches(self, search_term: str) -> bool:
        return matches_search(self.title, self.author, search_term)

    def display_name(self) -> str:
        return f"{self.title} - {self.author}"

    def to_plain(self) -> dict[str, Any]:
        return {
            "id": self.id.value,
            "title": self.title,
            "author": self.author,
            "description": self.description,
            "image": self.image,
            "episode_count": self.episode_count,
        }


class Episode(BaseModel):
    """A single episode of a podcast."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    id: str
    title: str
    description: str
    audio_url: str | None = None
    duration: int | None = None  # seconds
    published_at: datetime | None = None
    podcast_id: PodcastId

    @classmethod
    def create(cls, data: Mapping[str, Any]) -> "Episode":
        """Build an episode from raw data.

        Empty audio URLs and non-positive durations become None. Dates
        that cannot be parsed are kept as None rather than rejected.

        Raises:
            InvalidIdError: If podcast_id is empty or non-numeric
        """
        duration = data.get("duration")
        if isinstance(duration, bool) or not isinstance(duration, (int, float)) or duration <= 0:
            duration = None

        return cls(
            id=_clean(data.get("id")),
            title=_clean(data.get("title")),
            description=_clean(data.get("description")),
            audio_url=_clean(data.get("audio_url")) or None,
            duration=int(duration) if duration is not None else None,
            published_at=parse_published_at(data.get("published_at")),
            podcast_id=PodcastId.create(data.get("podcast_id", "")),
        )

    def has_audio(self) -> bool:
        return bool(self.audio_url)

    def formatted_duration(self) -> str:
        """Render the duration as ``H:MM:SS`` or ``M:SS``."""
        if not self.duration:
            return DURATION_PLACEHOLDER

        hours, remainder = divmod(self.duration, 3600)
        minutes, seconds = divmod(remainder, 60)

        if hours > 0:
            return f"{hours}:{minutes:02d}:{seconds:02d}"
        return f"{minutes}:{seconds:02d}"

    def formatted_date(self) -> str:
        """Render the publish date as ``DD/MM/YYYY``."""
        if self.published_at is None:
            return DATE_PLACEHOLDER
        return self.published_at.strftime("%d/%m/%Y")

    def to_plain(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "audio_url": self.audio_url,
            "duration": self.duration,
            "published_at": self.published_at.isoformat() if self.published_at else None,
            "podcast_id": self.podcast_id.value,
        }
