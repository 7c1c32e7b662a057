"""Tests for access token signing and refresh token minting."""

from datetime import timedelta

from jose import jwt
from pytest import raises

from blog_cms.configs import settings
from blog_cms.errors.auth import InvalidTokenError, TokenExpiredError
from blog_cms.managers.token_manager import (
    create_access_token,
    decode_access_token,
    generate_refresh_token,
)


class TestCreateAccessToken:
    """Test cases for create_access_token."""

    def test_round_trips_claims(self) -> None:
        """Test that decoded claims carry the subject and email."""
        token = create_access_token(subject_id="admin", email="admin@example.com")
        claims = decode_access_token(token)

        assert claims.subject_id == "admin"
        assert claims.email == "admin@example.com"
        assert claims.jti
        assert claims.expires_at > claims.issued_at

    def test_custom_expiration(self) -> None:
        """Test that the expiry follows expires_delta."""
        token = create_access_token("admin", "admin@example.com", timedelta(minutes=5))
        claims = decode_access_token(token)

        lifetime = claims.expires_at - claims.issued_at
        assert timedelta(minutes=4) < lifetime <= timedelta(minutes=5)

    def test_each_token_has_unique_jti(self) -> None:
        """Test that two tokens for the same subject differ."""
        first = decode_access_token(create_access_token("admin", "admin@example.com"))
        second = decode_access_token(create_access_token("admin", "admin@example.com"))

        assert first.jti != second.jti


class TestDecodeAccessToken:
    """Test cases for decode_access_token failures."""

    def test_expired_token(self) -> None:
        """Test that an expired token raises TokenExpiredError."""
        token = create_access_token("admin", "admin@example.com", timedelta(seconds=-1))

        with raises(TokenExpiredError):
            decode_access_token(token)

    def test_garbage_token(self) -> None:
        """Test that a malformed token raises InvalidTokenError."""
        with raises(InvalidTokenError):
            decode_access_token("not-a-jwt")

    def test_wrong_signature(self) -> None:
        """Test that a token signed with another key is rejected."""
        token = jwt.encode(
            {"sub": "admin", "email": "a@b.c", "jti": "x", "type": "access"},
            "another-secret",
            algorithm=settings.ALGORITHM,
        )

        with raises(InvalidTokenError):
            decode_access_token(token)

    def test_wrong_token_type(self) -> None:
        """Test that a correctly signed token of another type is rejected."""
        token = jwt.encode(
            {
                "sub": "admin",
                "email": "admin@example.com",
                "jti": "x",
                "iat": 0,
                "exp": 4102444800,
                "iss": settings.JWT_ISSUER,
                "aud": settings.JWT_AUDIENCE,
                "type": "refresh",
            },
            settings.SECRET_KEY.get_secret_value(),
            algorithm=settings.ALGORITHM,
        )

        with raises(InvalidTokenError):
            decode_access_token(token)


class TestGenerateRefreshToken:
    """Test cases for generate_refresh_token."""

    def test_tokens_are_opaque_and_unique(self) -> None:
        """Test that refresh tokens are random, URL-safe and not JWTs."""
        tokens = {generate_refresh_token() for _ in range(50)}

        assert len(tokens) == 50
        assert all("." not in token for token in tokens)
        assert all(len(token) >= 43 for token in tokens)
