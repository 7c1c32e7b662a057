# blog_cms/clients/redis_client.py
"""Redis backend for refresh-token sessions."""

from collections.abc import Awaitable
from logging import getLogger
from typing import Any

from redis.asyncio import ConnectionPool, Redis
from redis.exceptions import ConnectionError as RedisConnectionError
from redis.exceptions import RedisError

from blog_cms.configs import file_logger, pool_kwargs

logger = file_logger(getLogger(__name__))


class RedisClient:
    """
    Thin async wrapper exposing the key-value subset the session store needs.

    Every command failure is logged and re-raised as ``RedisConnectionError``
    so callers handle a single exception family.
    """

    def __init__(self, config: dict[str, Any] | None = None) -> None:
        self.config = config or pool_kwargs
        self._redis: Redis | None = None

    @property
    def address(self) -> str:
        return f"{self.config.get('host')}:{self.config.get('port')}"

    async def connect(self) -> None:
        """
        Open the pool and verify the server answers.

        Raises:
            RedisConnectionError: If the server is unreachable
        """
        self._redis = Redis(connection_pool=ConnectionPool(**self.config))
        if not await self.ping():
            mssg = f"Redis at {self.address} did not answer PING"
            raise RedisConnectionError(mssg)
        logger.info(f"Session store connected to Redis at {self.address}")

    async def disconnect(self) -> None:
        if self._redis is not None:
            await self._redis.aclose()
            self._redis = None
            logger.info("Redis session connection closed")

    @property
    def client(self) -> Redis:
        if self._redis is None:
            mssg = "Redis client not initialized. Call connect() first."
            raise RuntimeError(mssg)
        return self._redis

    async def _run(self, command: str, call: Awaitable[Any]) -> Any:
        try:
            return await call
        except RedisError as e:
            logger.exception(f"Redis {command} failed against {self.address}")
            mssg = f"{command} failed: {e}"
            raise RedisConnectionError(mssg) from e

    async def get(self, key: str) -> str | None:
        return await self._run("GET", self.client.get(key))

    async def set(self, key: str, value: str, ex: int | None = None) -> bool:
        return bool(await self._run("SET", self.client.set(key, value, ex=ex)))

    async def delete(self, *keys: str) -> int:
        if not keys:
            return 0
        return await self._run("DEL", self.client.delete(*keys))

    async def ttl(self, key: str) -> int:
        return await self._run("TTL", self.client.ttl(key))

    async def ping(self) -> bool:
        result = self.client.ping()
        if isinstance(result, Awaitable):
            return bool(await self._run("PING", result))
        return bool(result)
