"""In-process cache store."""

import json
import logging
import time
from collections.abc import Callable
from typing import Any

from podcastdir.cache.base import DEFAULT_TTL_HOURS, TTL_KEY_SUFFIX, expiry_millis

logger = logging.getLogger(__name__)


class InMemoryCacheRepository:
    """CacheRepository keeping JSON strings in a dict.

    Mirrors a browser-style string store: values are serialized on write
    and parsed on read, so callers get copies rather than shared objects.
    An optional ``max_bytes`` quota makes writes that would exceed it fail
    softly, like a full storage quota.

    Example:
        >>> cache = InMemoryCacheRepository()
        >>> await cache.set("top_podcasts", [{"id": "1"}])
        >>> await cache.get("top_podcasts")
        [{'id': '1'}]
    """

    def __init__(
        self,
        default_ttl_hours: float = DEFAULT_TTL_HOURS,
        clock: Callable[[], float] = time.time,
        max_bytes: int | None = None,
    ) -> None:
        """Initialize the store.

        Args:
            default_ttl_hours: TTL used when ``set`` gets none
            clock: Returns current time in epoch seconds
            max_bytes: Optional quota on total stored characters
        """
        self.default_ttl_hours = default_ttl_hours
        self.clock = clock
        self.max_bytes = max_bytes
        self._store: dict[str, str] = {}

    async def get(self, key: str) -> Any | None:
        item = self._store.get(key)
        if item is None:
            return None

        try:
            return json.loads(item)
        except json.JSONDecodeError:
            logger.warning("Discarding unparsable cache value for %s", key)
            return None

    async def set(self, key: str, value: Any, ttl_hours: float | None = None) -> None:
        if ttl_hours is None:
            ttl_hours = self.default_ttl_hours

        try:
            payload = json.dumps(value)
            expires = str(expiry_millis(self.clock(), ttl_hours))
            self._check_quota(key, payload, expires)
        except (TypeError, ValueError, OverflowError) as e:
            logger.warning("Failed to cache %s: %s", key, e)
            return

        self._store[key] = payload
        self._store[key + TTL_KEY_SUFFIX] = expires

    async def is_expired(self, key: str) -> bool:
        expires = self._store.get(key + TTL_KEY_SUFFIX)
        if not expires:
            return True

        try:
            return self.clock() * 1000 >= int(expires)
        except ValueError:
            return True

    async def clear(self, key: str) -> None:
        self._store.pop(key, None)
        self._store.pop(key + TTL_KEY_SUFFIX, None)

    def __len__(self) -> int:
        """Number of logical entries held."""
        return sum(1 for k in self._store if not k.endswith(TTL_KEY_SUFFIX))

    def _check_quota(self, key: str, payload: str, expires: str) -> None:
        if self.max_bytes is None:
            return

        current = sum(
            len(v)
            for k, v in self._store.items()
            if k not in (key, key + TTL_KEY_SUFFIX)
        )
        if current + len(payload) + len(expires) > self.max_bytes:
            raise ValueError(f"cache quota of {self.max_bytes} bytes exceeded")
