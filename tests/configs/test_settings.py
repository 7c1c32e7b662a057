"""Tests for derived configuration values."""

from pytest import mark

from blog_cms.configs.settings import limiter_storage_uri, settings


class TestLimiterStorageUri:
    """Test cases for limiter_storage_uri."""

    def test_memory_when_redis_disabled(self) -> None:
        config = settings.model_copy(update={"REDIS_ENABLED": False, "REDIS_PASSWORD": "secret"})

        assert limiter_storage_uri(config) == "memory://"

    @mark.parametrize(
        ("password", "expected"),
        [
            (None, "redis://cache:6380/2"),
            ("secret", "redis://:secret@cache:6380/2"),
            ("p@ss/word", "redis://:p%40ss%2Fword@cache:6380/2"),
        ],
    )
    def test_redis_uri_carries_password(self, password: str | None, expected: str) -> None:
        """Test that the limiter authenticates like the session client does."""
        config = settings.model_copy(
            update={
                "REDIS_ENABLED": True,
                "REDIS_HOST": "cache",
                "REDIS_PORT": 6380,
                "REDIS_DB": 2,
                "REDIS_PASSWORD": password,
            },
        )

        assert limiter_storage_uri(config) == expected
