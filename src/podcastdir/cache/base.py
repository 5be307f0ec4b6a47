"""Cache port shared by the use cases."""

import math
from typing import Any, Protocol

DEFAULT_TTL_HOURS = 24
TTL_KEY_SUFFIX = "_ttl"


class CacheRepository(Protocol):
    """Key-value store with a per-entry time-to-live.

    Every logical key owns two slots: the JSON value and its expiry
    instant. An entry without an expiry, or whose expiry has passed, is
    expired no matter what the value slot holds. ``is_expired`` never
    deletes; callers evict with ``clear``.

    Implementations never raise on storage failures: reads degrade to a
    miss and writes to a logged no-op.
    """

    async def get(self, key: str) -> Any | None:
        """Return the stored value, or None if absent or unreadable."""
        ...

    async def set(self, key: str, value: Any, ttl_hours: float | None = None) -> None:
        """Store a JSON-serializable value expiring after ``ttl_hours``."""
        ...

    async def is_expired(self, key: str) -> bool:
        """True if the key has no expiry record or it has passed."""
        ...

    async def clear(self, key: str) -> None:
        """Remove value and expiry records; missing keys are fine."""
        ...


def expiry_millis(now_seconds: float, ttl_hours: float) -> int:
    """Expiry instant in epoch milliseconds for an entry written now.

    Rounded up to a whole millisecond so an entry never expires early.
    """
    return math.ceil(now_seconds * 1000 + ttl_hours * 60 * 60 * 1000)
