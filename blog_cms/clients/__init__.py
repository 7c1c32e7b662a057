from blog_cms.clients.memory_client import MemoryClient
from blog_cms.clients.protocols import KeyValueClientProtocol
from blog_cms.clients.redis_client import RedisClient

__all__ = ["KeyValueClientProtocol", "MemoryClient", "RedisClient"]
