"""Tests for the in-memory key-value client."""

from asyncio import sleep

from pytest import mark

from blog_cms.clients.memory_client import MemoryClient


@mark.asyncio
async def test_set_and_get(memory_client: MemoryClient) -> None:
    """Test setting and getting a value."""
    await memory_client.set("key", "value")
    assert await memory_client.get("key") == "value"


@mark.asyncio
async def test_get_non_existent(memory_client: MemoryClient) -> None:
    assert await memory_client.get("missing") is None


@mark.asyncio
async def test_delete(memory_client: MemoryClient) -> None:
    """Test deleting keys reports how many existed."""
    await memory_client.set("key", "value")
    assert await memory_client.delete("key", "missing") == 1
    assert await memory_client.get("key") is None


@mark.asyncio
async def test_ttl_and_expiration(memory_client: MemoryClient) -> None:
    """Test TTL and expiration of a key."""
    await memory_client.set("key", "value", ex=1)
    assert await memory_client.get("key") == "value"
    await sleep(1.1)
    assert await memory_client.get("key") is None


@mark.asyncio
async def test_ttl_codes(memory_client: MemoryClient) -> None:
    """Test Redis-compatible TTL return codes."""
    await memory_client.set("expiring", "v", ex=10)
    await memory_client.set("forever", "v")

    assert 8 < await memory_client.ttl("expiring") <= 10
    assert await memory_client.ttl("forever") == -1
    assert await memory_client.ttl("missing") == -2


@mark.asyncio
async def test_set_without_ex_clears_ttl(memory_client: MemoryClient) -> None:
    await memory_client.set("key", "v", ex=10)
    await memory_client.set("key", "v2")

    assert await memory_client.ttl("key") == -1


@mark.asyncio
async def test_background_cleanup(memory_client: MemoryClient) -> None:
    """Test that expired keys are purged without being read."""
    await memory_client.set("key", "value", ex=1)
    await sleep(2.2)
    assert "key" not in memory_client._store


@mark.asyncio
async def test_ping_follows_lifecycle() -> None:
    client = MemoryClient()
    await client.start_lifecycle()
    assert await client.ping() is True

    await client.stop_lifecycle()
    assert await client.ping() is False
