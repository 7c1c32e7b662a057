"""
In-process stand-in for Redis, used when ``REDIS_ENABLED`` is false.

Sessions then live only as long as the process and are not shared between
workers, which is fine for development and tests.
"""

from asyncio import CancelledError, Lock, Task, create_task, sleep
from contextlib import suppress
from logging import getLogger
from time import monotonic
from typing import NamedTuple

from blog_cms.configs import file_logger

logger = file_logger(getLogger(__name__))

# Redis TTL reply codes
KEY_MISSING = -2
NO_EXPIRY = -1


class Entry(NamedTuple):
    value: str
    deadline: float | None


class MemoryClient:
    """
    Expiring key-value dict speaking the same async surface as ``RedisClient``.

    Expired keys vanish on the next read of that key, and a background task
    sweeps the rest every ``cleanup_interval`` seconds while started.
    """

    def __init__(self, cleanup_interval: int = 60) -> None:
        self._store: dict[str, Entry] = {}
        self._lock = Lock()
        self._cleanup_interval = cleanup_interval
        self._sweeper: Task[None] | None = None
        self.is_connected = True

    async def start_lifecycle(self) -> None:
        async with self._lock:
            self.is_connected = True
            if self._sweeper is None:
                self._sweeper = create_task(self._sweep_forever())
                logger.info("In-memory session store started")

    async def stop_lifecycle(self) -> None:
        self.is_connected = False
        if self._sweeper is not None:
            self._sweeper.cancel()
            with suppress(CancelledError):
                await self._sweeper
            self._sweeper = None
            logger.info("In-memory session store stopped")

    async def _sweep_forever(self) -> None:
        while self.is_connected:
            await sleep(self._cleanup_interval)
            async with self._lock:
                now = monotonic()
                stale = [key for key, entry in self._store.items() if _expired(entry, now)]
                for key in stale:
                    del self._store[key]
            if stale:
                logger.debug(f"Swept {len(stale)} expired session keys")

    def _live(self, key: str) -> Entry | None:
        entry = self._store.get(key)
        if entry is not None and _expired(entry, monotonic()):
            del self._store[key]
            return None
        return entry

    async def get(self, key: str) -> str | None:
        async with self._lock:
            entry = self._live(key)
            return entry.value if entry else None

    async def set(self, key: str, value: str, ex: int | None = None) -> bool:
        """Store ``value``; like Redis SET, omitting ``ex`` clears any TTL."""
        async with self._lock:
            self._store[key] = Entry(value, monotonic() + ex if ex else None)
            return True

    async def delete(self, *keys: str) -> int:
        async with self._lock:
            return sum(self._store.pop(key, None) is not None for key in keys)

    async def ttl(self, key: str) -> int:
        async with self._lock:
            entry = self._live(key)
            if entry is None:
                return KEY_MISSING
            if entry.deadline is None:
                return NO_EXPIRY
            return int(entry.deadline - monotonic())

    async def ping(self) -> bool:
        return self.is_connected


def _expired(entry: Entry, now: float) -> bool:
    return entry.deadline is not None and now >= entry.deadline
