"""Authentication service for the single admin identity."""

from logging import getLogger

from blog_cms.configs import file_logger
from blog_cms.schemas.auth import AdminIdentity, TokenPair
from blog_cms.services.credentials import CredentialVerifier
from blog_cms.services.token_service import TokenService

logger = file_logger(getLogger(__name__))


class AuthService:
    """Login, refresh and logout flows composed from the verifier and token service."""

    def __init__(
        self,
        identity: AdminIdentity,
        verifier: CredentialVerifier,
        tokens: TokenService,
    ) -> None:
        """
        Initialize the auth service.

        Args:
            identity: The configured admin identity
            verifier: Credential verifier bound to ``identity``
            tokens: Token service used to issue, rotate and revoke sessions
        """
        self.identity = identity
        self.verifier = verifier
        self.tokens = tokens

    async def login(self, email: str, password: str) -> TokenPair:
        """
        Verify credentials and start a new session.

        Raises:
            InvalidCredentialsError: If the credentials do not match
        """
        identity = await self.verifier.verify(email, password)
        pair = await self.tokens.issue_tokens(identity)
        logger.info(f"Admin {identity.id} logged in")
        return pair

    async def refresh(self, refresh_token: str) -> TokenPair:
        """
        Rotate the admin session.

        Raises:
            InvalidRefreshTokenError: If the token is not the live one
        """
        return await self.tokens.rotate(refresh_token, self.identity)

    async def logout(self, refresh_token: str) -> None:
        """
        End the admin session.

        Raises:
            InvalidRefreshTokenError: If the token is not the live one
        """
        await self.tokens.revoke(refresh_token, self.identity.id)
        logger.info(f"Admin {self.identity.id} logged out")
