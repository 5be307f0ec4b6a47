"""File-backed cache store.

Each logical key maps to two files in the cache directory: ``<hash>.json``
holding the value and ``<hash>.ttl`` holding the expiry instant in epoch
milliseconds. Writes go through a temp file and an atomic rename.
"""

import asyncio
import hashlib
import json
import logging
import time
from collections.abc import Callable
from pathlib import Path
from typing import Any

import aiofiles

from podcastdir.cache.base import DEFAULT_TTL_HOURS, expiry_millis
from podcastdir.utils.paths import get_cache_dir

logger = logging.getLogger(__name__)

VALUE_SUFFIX = ".json"
TTL_SUFFIX = ".ttl"


class FileCacheRepository:
    """CacheRepository persisting entries under the user cache directory.

    Survives process restarts, which gives the CLI the same behaviour as
    a browser's local storage: a second run within the TTL is served
    without touching the network.
    """

    def __init__(
        self,
        cache_dir: Path | None = None,
        default_ttl_hours: float = DEFAULT_TTL_HOURS,
        clock: Callable[[], float] = time.time,
    ) -> None:
        """Initialize cache.

        Args:
            cache_dir: Cache directory (defaults to XDG cache dir)
            default_ttl_hours: TTL used when ``set`` gets none
            clock: Returns current time in epoch seconds
        """
        if cache_dir is None:
            cache_dir = get_cache_dir() / "catalog"

        self.cache_dir = cache_dir
        self.default_ttl_hours = default_ttl_hours
        self.clock = clock

        self.cache_dir.mkdir(parents=True, exist_ok=True)

    async def get(self, key: str) -> Any | None:
        value_path = self._path(key, VALUE_SUFFIX)
        if not value_path.exists():
            return None

        try:
            async with aiofiles.open(value_path, "r", encoding="utf-8") as f:
                content = await f.read()
            return json.loads(content)
        except (json.JSONDecodeError, UnicodeDecodeError, OSError) as e:
            logger.warning("Discarding unreadable cache entry %s: %s", key, e)
            return None

    async def set(self, key: str, value: Any, ttl_hours: float | None = None) -> None:
        if ttl_hours is None:
            ttl_hours = self.default_ttl_hours

        try:
            payload = json.dumps(value)
        except (TypeError, ValueError) as e:
            logger.warning("Failed to cache %s: %s", key, e)
            return

        expires = str(expiry_millis(self.clock(), ttl_hours))

        try:
            await self._write(self._path(key, VALUE_SUFFIX), payload)
            await self._write(self._path(key, TTL_SUFFIX), expires)
        except OSError as e:
            logger.warning("Failed to write cache entry %s: %s", key, e)

    async def is_expired(self, key: str) -> bool:
        ttl_path = self._path(key, TTL_SUFFIX)
        if not ttl_path.exists():
            return True

        try:
            async with aiofiles.open(ttl_path, "r", encoding="utf-8") as f:
                expires = int((await f.read()).strip())
        except (ValueError, OSError):
            return True

        return self.clock() * 1000 >= expires

    async def clear(self, key: str) -> None:
        await asyncio.gather(
            self._delete_file(self._path(key, VALUE_SUFFIX)),
            self._delete_file(self._path(key, TTL_SUFFIX)),
        )

    async def clear_all(self) -> int:
        """Remove every cached entry.

        Returns:
            Number of logical entries deleted
        """
        value_files = list(self.cache_dir.glob(f"*{VALUE_SUFFIX}"))
        ttl_files = list(self.cache_dir.glob(f"*{TTL_SUFFIX}"))

        await asyncio.gather(*[self._delete_file(f) for f in value_files + ttl_files])
        return len(value_files)

    async def stats(self) -> dict[str, Any]:
        """Get cache statistics.

        Returns:
            Dict with total, expired and valid entry counts, size and location
        """
        value_files = list(self.cache_dir.glob(f"*{VALUE_SUFFIX}"))
        now_ms = self.clock() * 1000

        async def is_stale(value_file: Path) -> bool:
            ttl_file = value_file.with_suffix(TTL_SUFFIX)
            try:
                async with aiofiles.open(ttl_file, "r", encoding="utf-8") as f:
                    return now_ms >= int((await f.read()).strip())
            except (ValueError, OSError):
                return True

        stale = await asyncio.gather(*[is_stale(f) for f in value_files])
        sizes = await asyncio.gather(
            *[asyncio.to_thread(lambda p=f: p.stat().st_size) for f in value_files]
        )
        expired = sum(1 for s in stale if s)

        return {
            "total": len(value_files),
            "expired": expired,
            "valid": len(value_files) - expired,
            "size_bytes": sum(sizes),
            "cache_dir": str(self.cache_dir),
        }

    def _path(self, key: str, suffix: str) -> Path:
        digest = hashlib.sha256(key.encode("utf-8")).hexdigest()
        return self.cache_dir / f"{digest}{suffix}"

    async def _write(self, path: Path, content: str) -> None:
        temp_path = path.parent / f"{path.name}.tmp"
        try:
            async with aiofiles.open(temp_path, "w", encoding="utf-8") as f:
                await f.write(content)
            await asyncio.to_thread(temp_path.replace, path)
        except OSError:
            await self._delete_file(temp_path)
            raise

    async def _delete_file(self, path: Path) -> None:
        try:
            await asyncio.to_thread(path.unlink, missing_ok=True)
        except OSError as e:
            logger.debug("Could not delete %s: %s", path, e)
