"""Credential verification against the configured admin identity."""

from hmac import compare_digest

from blog_cms.errors.auth import InvalidCredentialsError
from blog_cms.managers.password_manager import dummy_verify, verify_password
from blog_cms.schemas.auth import AdminIdentity
from blog_cms.utils.helpers import normalize_email


class CredentialVerifier:
    """Check an email/password pair against one injected admin identity."""

    def __init__(self, identity: AdminIdentity) -> None:
        """
        Initialize the verifier.

        Args:
            identity: The administrator credentials are compared against
        """
        self.identity = identity

    async def verify(self, email: str, password: str) -> AdminIdentity:
        """
        Verify credentials.

        Both the unknown-email and wrong-password paths run one hash
        verification, so they take comparable time.

        Args:
            email: Presented email, compared after canonicalization
            password: Presented plaintext password

        Returns:
            AdminIdentity: The admin identity on success

        Raises:
            InvalidCredentialsError: If either value does not match
        """
        presented = normalize_email(email).encode()
        expected = normalize_email(str(self.identity.email)).encode()

        if not compare_digest(presented, expected):
            await dummy_verify()
            raise InvalidCredentialsError

        if not await verify_password(password, self.identity.password_hash.get_secret_value()):
            raise InvalidCredentialsError

        return self.identity
