"""Token manager for signing and verifying access tokens and minting refresh tokens."""

from datetime import UTC, datetime, timedelta
from secrets import token_urlsafe
from uuid import uuid4

from jose import ExpiredSignatureError, JWTError, jwt

from blog_cms.configs import settings
from blog_cms.errors.auth import InvalidTokenError, TokenExpiredError
from blog_cms.schemas.auth import AccessClaims

ACCESS_TOKEN_TYPE = "access"


def create_access_token(
    subject_id: str,
    email: str,
    expires_delta: timedelta | None = None,
) -> str:
    """
    Create a signed access token.

    Args:
        subject_id: Id of the identity the token is issued to
        email: Identity email, carried as a claim
        expires_delta: Optional expiration time delta

    Returns:
        str: Encoded JWT access token
    """
    now = datetime.now(UTC)
    if expires_delta:
        expire = now + expires_delta
    else:
        expire = now + timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)

    to_encode = {
        "sub": subject_id,
        "email": email,
        "jti": str(uuid4()),
        "iat": now,
        "exp": expire,
        "iss": settings.JWT_ISSUER,
        "aud": settings.JWT_AUDIENCE,
        "type": ACCESS_TOKEN_TYPE,
    }

    return jwt.encode(
        to_encode,
        settings.SECRET_KEY.get_secret_value(),
        algorithm=settings.ALGORITHM,
    )


def decode_access_token(token: str) -> AccessClaims:
    """
    Verify an access token's signature, expiry, issuer, audience and type.

    Args:
        token: JWT token string

    Returns:
        AccessClaims: Verified claims

    Raises:
        TokenExpiredError: If the token is past its expiry
        InvalidTokenError: If the token is malformed, forged or of the wrong type
    """
    try:
        payload = jwt.decode(
            token,
            settings.SECRET_KEY.get_secret_value(),
            algorithms=[settings.ALGORITHM],
            audience=settings.JWT_AUDIENCE,
            issuer=settings.JWT_ISSUER,
        )
    # ExpiredSignatureError subclasses JWTError
    except ExpiredSignatureError as e:
        raise TokenExpiredError from e
    except JWTError as e:
        raise InvalidTokenError from e

    subject_id: str | None = payload.get("sub")
    email: str | None = payload.get("email")
    jti: str | None = payload.get("jti")
    token_type: str | None = payload.get("type")
    issued_at = payload.get("iat")
    expires_at = payload.get("exp")

    if not subject_id or not email or not jti or token_type != ACCESS_TOKEN_TYPE:
        raise InvalidTokenError
    if issued_at is None or expires_at is None:
        raise InvalidTokenError

    return AccessClaims(
        subject_id=subject_id,
        email=email,
        jti=jti,
        issued_at=datetime.fromtimestamp(issued_at, tz=UTC),
        expires_at=datetime.fromtimestamp(expires_at, tz=UTC),
    )


def generate_refresh_token() -> str:
    """
    Mint an opaque, high-entropy refresh token.

    Returns:
        str: URL-safe random token; validity is decided by the session store
    """
    return token_urlsafe(settings.REFRESH_TOKEN_BYTES)
