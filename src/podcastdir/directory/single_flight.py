"""Collapse concurrent calls for the same key into one in-flight task."""

import asyncio
import logging
from collections.abc import Awaitable, Callable
from typing import Any, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class SingleFlight:
    """Per-key table of in-flight operations.

    The first caller for a key starts the operation; callers arriving
    while it runs await the same task. The key is released as soon as the
    task settles, so a failure is shared by current waiters but the next
    call starts fresh.

    Example:
        >>> flight = SingleFlight()
        >>> await asyncio.gather(flight.do("k", fetch), flight.do("k", fetch))
        # fetch ran once
    """

    def __init__(self) -> None:
        self._inflight: dict[str, asyncio.Task[Any]] = {}

    def __contains__(self, key: str) -> bool:
        return key in self._inflight

    def __len__(self) -> int:
        return len(self._inflight)

    async def do(self, key: str, operation: Callable[[], Awaitable[T]]) -> T:
        """Run ``operation`` unless one is already in flight for ``key``.

        Args:
            key: Deduplication key (the cache key)
            operation: Zero-argument coroutine factory

        Returns:
            Result of the shared operation
        """
        task = self._inflight.get(key)
        if task is None:
            task = asyncio.ensure_future(operation())
            self._inflight[key] = task
            task.add_done_callback(lambda t: self._release(key, t))
        else:
            logger.debug("Joining in-flight fetch for %s", key)

        # Shield so one waiter giving up does not cancel the others
        return await asyncio.shield(task)

    def _release(self, key: str, task: asyncio.Task[Any]) -> None:
        if self._inflight.get(key) is task:
            del self._inflight[key]
        if not task.cancelled():
            # Mark exception as retrieved when every waiter went away
            task.exception()
