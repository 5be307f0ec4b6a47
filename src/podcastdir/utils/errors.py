"""Custom exceptions for podcastdir."""


class PodcastDirError(Exception):
    """Base exception for all podcastdir errors."""

    pass


class ConfigError(PodcastDirError):
    """Configuration-related errors."""

    pass


class InvalidConfigError(ConfigError):
    """Invalid configuration data."""

    pass


class DomainError(PodcastDirError):
    """Errors raised by the catalog domain."""

    pass


class InvalidIdError(DomainError, ValueError):
    """Malformed or empty catalog identifier."""

    pass


class NotFoundError(DomainError):
    """Requested catalog record does not exist."""

    pass


class PodcastNotFoundError(NotFoundError):
    """No podcast with the given id in the catalog."""

    def __init__(self, podcast_id: str) -> None:
        self.podcast_id = podcast_id
        super().__init__(f"Podcast with ID {podcast_id} not found")


class EpisodeNotFoundError(NotFoundError):
    """Podcast exists but has no episode with the given id."""

    def __init__(self, episode_id: str, podcast_id: str | None = None) -> None:
        self.episode_id = episode_id
        self.podcast_id = podcast_id
        context = f" in podcast {podcast_id}" if podcast_id else ""
        super().__init__(f"Episode with ID {episode_id}{context} not found")


class CatalogError(PodcastDirError):
    """Errors talking to the remote catalog API."""

    pass


class CatalogHTTPError(CatalogError):
    """Catalog answered with a non-2xx status or an unreadable body."""

    def __init__(self, status_code: int, url: str, message: str | None = None) -> None:
        self.status_code = status_code
        self.url = url
        super().__init__(message or f"HTTP error! status: {status_code}")


class CatalogConnectionError(CatalogError):
    """Network failure before a response was received."""

    pass
