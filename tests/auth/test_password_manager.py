"""Tests for admin password hashing."""

from passlib.hash import pbkdf2_sha256
from pytest import fixture, mark, raises

from blog_cms.managers.password_manager import PasswordHasher, verify_password


@fixture(scope="module")
def hasher() -> PasswordHasher:
    return PasswordHasher("low")


class TestPasswordHasher:
    """Test cases for PasswordHasher."""

    def test_hash_and_verify(self, hasher: PasswordHasher) -> None:
        hashed = hasher.hash("s3cret-passw0rd")

        assert hashed.startswith("$argon2id$")
        assert hasher.verify("s3cret-passw0rd", hashed)
        assert not hasher.verify("other-password", hashed)

    def test_legacy_pbkdf2_still_verifies(self, hasher: PasswordHasher) -> None:
        hashed = pbkdf2_sha256.using(rounds=1000).hash("s3cret-passw0rd")

        assert hasher.verify("s3cret-passw0rd", hashed)

    @mark.parametrize("stored", ["", "   ", "not-a-hash"])
    def test_unusable_hash_fails_closed(self, hasher: PasswordHasher, stored: str) -> None:
        assert hasher.verify("s3cret-passw0rd", stored) is False

    def test_empty_password_rejected(self, hasher: PasswordHasher) -> None:
        with raises(ValueError, match="Password cannot be empty"):
            hasher.hash("")

    def test_dummy_verify_always_fails(self, hasher: PasswordHasher) -> None:
        assert hasher.dummy_verify() is False


@mark.asyncio
async def test_verify_password_runs_off_loop(admin_password: str, admin_identity) -> None:
    """Test the executor-backed coroutine against the configured admin hash."""
    stored = admin_identity.password_hash.get_secret_value()

    assert await verify_password(admin_password, stored) is True
    assert await verify_password("wrong-password-123", stored) is False
