"""Refresh-session store backed by an expiring key-value client."""

from logging import getLogger

from redis.exceptions import RedisError

from blog_cms.clients.protocols import KeyValueClientProtocol
from blog_cms.configs import file_logger
from blog_cms.errors.session import SessionStoreError

logger = file_logger(getLogger(__name__))

# Key prefix for refresh sessions
SESSION_PREFIX = "refresh:"


class SessionStore:
    """
    One refresh-token record per owner, expired by the backing store.

    ``put`` overwrites unconditionally, so at most one live session exists
    per owner. Concurrent writers resolve as last write wins.
    """

    def __init__(self, client: KeyValueClientProtocol) -> None:
        """
        Initialize the session store.

        Args:
            client: Redis or in-memory client used for storage
        """
        self._client = client

    def _get_key(self, owner_id: str) -> str:
        """
        Generate the store key for an owner.

        Args:
            owner_id: Session owner id

        Returns:
            str: Store key
        """
        return f"{SESSION_PREFIX}{owner_id}"

    async def put(self, owner_id: str, token: str, ttl_seconds: int) -> None:
        """
        Store ``token`` as the owner's only session.

        Args:
            owner_id: Session owner id
            token: Opaque refresh token
            ttl_seconds: Lifetime enforced by the store

        Raises:
            SessionStoreError: If the store cannot be written
        """
        try:
            await self._client.set(self._get_key(owner_id), token, ex=ttl_seconds)
        except RedisError as e:
            logger.exception("Failed to store session for %s", owner_id)
            raise SessionStoreError from e
        logger.debug("Session for %s stored with TTL %d seconds", owner_id, ttl_seconds)

    async def get(self, owner_id: str) -> str | None:
        """
        Return the owner's stored token, or None when absent or expired.

        Raises:
            SessionStoreError: If the store cannot be read
        """
        try:
            return await self._client.get(self._get_key(owner_id))
        except RedisError as e:
            logger.exception("Failed to read session for %s", owner_id)
            raise SessionStoreError from e

    async def delete(self, owner_id: str) -> None:
        """
        Remove the owner's session.

        Raises:
            SessionStoreError: If the store cannot be written
        """
        try:
            await self._client.delete(self._get_key(owner_id))
        except RedisError as e:
            logger.exception("Failed to delete session for %s", owner_id)
            raise SessionStoreError from e


# Global instance - initialized in app startup
_session_store: SessionStore | None = None


def get_session_store() -> SessionStore:
    """
    Get the global session store instance.

    Returns:
        SessionStore: The global session store

    Raises:
        RuntimeError: If the store is not initialized
    """
    if _session_store is None:
        msg = "Session store not initialized. Call init_session_store() first."
        raise RuntimeError(msg)
    return _session_store


def init_session_store(client: KeyValueClientProtocol) -> SessionStore:
    """
    Initialize the global session store.

    Args:
        client: Key-value client to use for storage

    Returns:
        SessionStore: The initialized store
    """
    global _session_store  # noqa: PLW0603
    _session_store = SessionStore(client)
    logger.info(f"Session store initialized on {type(client).__name__}")
    return _session_store
