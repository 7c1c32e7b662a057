"""Issue, verify, rotate and revoke the access/refresh token pair."""

from datetime import timedelta
from hmac import compare_digest
from logging import getLogger

from blog_cms.configs import file_logger, settings
from blog_cms.errors.auth import InvalidRefreshTokenError
from blog_cms.managers.session_store import SessionStore
from blog_cms.managers.token_manager import (
    create_access_token,
    decode_access_token,
    generate_refresh_token,
)
from blog_cms.schemas.auth import AccessClaims, AdminIdentity, TokenPair

logger = file_logger(getLogger(__name__))


class TokenService:
    """
    Owner of token formats and expiry policy.

    Access tokens are signed and stateless. Refresh tokens are opaque random
    strings whose only source of validity is the session store: one live
    refresh token per identity, replaced on every issue and rotation.
    """

    def __init__(
        self,
        store: SessionStore,
        access_ttl: timedelta | None = None,
        refresh_ttl_seconds: int | None = None,
    ) -> None:
        """
        Initialize the token service.

        Args:
            store: Session store holding the live refresh token per owner
            access_ttl: Access token lifetime (settings default when None)
            refresh_ttl_seconds: Refresh session lifetime (settings default when None)
        """
        self.store = store
        self.access_ttl = access_ttl or timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
        self.refresh_ttl_seconds = refresh_ttl_seconds or settings.refresh_token_ttl

    async def issue_tokens(self, identity: AdminIdentity) -> TokenPair:
        """
        Issue a fresh token pair, replacing any existing session.

        Args:
            identity: Identity the tokens are issued to

        Returns:
            TokenPair: New access and refresh tokens
        """
        access_token = create_access_token(
            subject_id=identity.id,
            email=str(identity.email),
            expires_delta=self.access_ttl,
        )
        refresh_token = generate_refresh_token()
        await self.store.put(identity.id, refresh_token, self.refresh_ttl_seconds)
        return TokenPair(access_token=access_token, refresh_token=refresh_token)

    def verify_access(self, token: str) -> AccessClaims:
        """
        Verify an access token without consulting the session store.

        Raises:
            TokenExpiredError: If the token is past its expiry
            InvalidTokenError: If the token is malformed or forged
        """
        return decode_access_token(token)

    async def _assert_current(self, owner_id: str, presented: str) -> None:
        stored = await self.store.get(owner_id)
        if stored is None or not compare_digest(stored.encode(), presented.encode()):
            raise InvalidRefreshTokenError

    async def rotate(self, presented: str, identity: AdminIdentity) -> TokenPair:
        """
        Exchange the current refresh token for a new pair.

        The presented token is invalidated by the overwrite, so each refresh
        token can be rotated at most once.

        Raises:
            InvalidRefreshTokenError: If ``presented`` is not the stored token
        """
        await self._assert_current(identity.id, presented)
        pair = await self.issue_tokens(identity)
        logger.info(f"Refresh session rotated for {identity.id}")
        return pair

    async def revoke(self, presented: str, owner_id: str) -> None:
        """
        Delete the owner's session if ``presented`` matches it.

        Raises:
            InvalidRefreshTokenError: If ``presented`` is not the stored token
        """
        await self._assert_current(owner_id, presented)
        await self.store.delete(owner_id)
        logger.info(f"Refresh session revoked for {owner_id}")
