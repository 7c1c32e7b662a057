"""Protocol definitions for key-value client implementations."""

from collections.abc import Awaitable
from typing import Protocol, runtime_checkable


@runtime_checkable
class KeyValueClientProtocol(Protocol):
    """
    Protocol for expiring key-value clients.

    Both RedisClient and MemoryClient conform to this protocol, so the
    session store can run against either without knowing which.
    """

    def get(self, key: str) -> Awaitable[str | None]:
        """Get a value, or None when missing or expired."""
        ...

    def set(self, key: str, value: str, ex: int | None = None) -> Awaitable[bool]:
        """Set a value with optional TTL in seconds."""
        ...

    def delete(self, *keys: str) -> Awaitable[int]:
        """Delete one or more keys."""
        ...

    def ttl(self, key: str) -> Awaitable[int]:
        """Get the remaining TTL of a key."""
        ...

    def ping(self) -> Awaitable[bool]:
        """Check if the store is reachable."""
        ...
