"""Translate iTunes directory JSON into domain entities.

The iTunes payloads are loosely typed: most fields are optional and the
RSS-to-JSON feed wraps every scalar in a ``{"label": ...}`` object. The
mapper tolerates missing optional data; only id validation can fail it.
"""

from datetime import datetime, timezone
from typing import Any, NamedTuple

from podcastdir.catalog.models import Episode, Podcast

EPISODE_KIND = "podcast-episode"
PODCAST_KIND = "podcast"

# Preferred artwork heights, best first
PREFERRED_IMAGE_HEIGHTS = ("600", "170")


class LookupResult(NamedTuple):
    """Podcast metadata and episodes from a single lookup call."""

    podcast: Podcast | None
    episodes: list[Episode]


def _label(node: Any) -> str:
    """Extract ``label`` from an RSS-JSON node, tolerating absence."""
    if isinstance(node, dict):
        label = node.get("label")
        return "" if label is None else str(label)
    return ""


def _as_list(node: Any) -> list[Any]:
    """The feed collapses one-element arrays into a bare object."""
    if node is None:
        return []
    if isinstance(node, list):
        return node
    return [node]


def select_image_url(images: Any) -> str:
    """Pick the best artwork URL from an ``im:image`` array.

    Prefers an explicit 600px image, then 170px, then the last entry
    (the feed lists images in ascending size).

    Args:
        images: Raw ``im:image`` value

    Returns:
        Image URL or empty string
    """
    candidates = [image for image in _as_list(images) if isinstance(image, dict)]
    if not candidates:
        return ""

    for height in PREFERRED_IMAGE_HEIGHTS:
        for image in candidates:
            attributes = image.get("attributes") or {}
            if str(attributes.get("height", "")) == height and _label(image):
                return _label(image)

    return _label(candidates[-1])


def map_top_podcasts_response(raw: dict[str, Any]) -> list[Podcast]:
    """Map a top-podcasts feed to Podcast entities.

    Args:
        raw: Response shaped ``{"feed": {"entry": [...]}}``

    Returns:
        Podcasts in feed order

    Raises:
        InvalidIdError: If an entry carries a malformed id
    """
    feed = raw.get("feed") or {}
    podcasts = []

    for entry in _as_list(feed.get("entry")):
        entry_id = ((entry.get("id") or {}).get("attributes") or {}).get("im:id", "")
        podcasts.append(
            Podcast.create(
                {
                    "id": entry_id,
                    "title": _label(entry.get("im:name")),
                    "author": _label(entry.get("im:artist")),
                    "description": _label(entry.get("summary")),
                    "image": select_image_url(entry.get("im:image")),
                }
            )
        )

    return podcasts


def _map_episode(result: dict[str, Any], podcast_id: str) -> Episode:
    millis = result.get("trackTimeMillis")
    duration = millis // 1000 if isinstance(millis, (int, float)) and millis else None
    track_id = result.get("trackId")

    return Episode.create(
        {
            "id": "" if track_id is None else str(track_id),
            "title": result.get("trackName"),
            "description": result.get("description"),
            "audio_url": result.get("episodeUrl"),
            "duration": duration,
            "published_at": result.get("releaseDate") or datetime.now(timezone.utc),
            "podcast_id": podcast_id,
        }
    )


def map_lookup_response(raw: dict[str, Any], podcast_id: str) -> LookupResult:
    """Map a lookup response to a podcast and its episodes.

    The first result without a ``kind`` (or with ``kind == "podcast"``)
    describes the podcast; every ``podcast-episode`` result is an episode.

    Args:
        raw: Response shaped ``{"results": [...]}``
        podcast_id: Id the lookup was made for

    Returns:
        LookupResult, with podcast None when results are empty
    """
    results = [r for r in raw.get("results") or [] if isinstance(r, dict)]
    if not results:
        return LookupResult(podcast=None, episodes=[])

    podcast_result = next(
        (r for r in results if r.get("kind") in (None, PODCAST_KIND)),
        None,
    )
    episode_results = [r for r in results if r.get("kind") == EPISODE_KIND]

    podcast = None
    if podcast_result is not None:
        podcast = Podcast.create(
            {
                "id": podcast_id,
                "title": podcast_result.get("collectionName")
                or podcast_result.get("collectionCensoredName")
                or "",
                "author": podcast_result.get("artistName"),
                "description": podcast_result.get("description"),
                "image": podcast_result.get("artworkUrl600"),
                "episode_count": len(episode_results),
            }
        )

    episodes = [_map_episode(r, podcast_id) for r in episode_results]
    return LookupResult(podcast=podcast, episodes=episodes)
