"""Authentication errors."""

from logging import getLogger

from starlette.status import HTTP_401_UNAUTHORIZED

from blog_cms.configs import file_logger
from blog_cms.errors.base import BaseAppError, create_exception_handler

logger = file_logger(getLogger(__name__))


class AuthError(BaseAppError):
    """Base class for authentication errors."""

    def __init__(
        self,
        detail: str = "Authentication failed",
        status_code: int = HTTP_401_UNAUTHORIZED,
    ) -> None:
        super().__init__(detail, status_code)


class InvalidCredentialsError(AuthError):
    """Raised when the email/password pair does not match the admin identity."""

    def __init__(self) -> None:
        super().__init__("Invalid credentials")


class InvalidRefreshTokenError(AuthError):
    """Raised when a refresh token does not match the stored session."""

    def __init__(self) -> None:
        super().__init__("Invalid refresh token")


class TokenExpiredError(AuthError):
    """Raised when an access token is past its expiry."""

    def __init__(self) -> None:
        super().__init__("Token expired")


class InvalidTokenError(AuthError):
    """Raised when an access token fails signature or claim checks."""

    def __init__(self) -> None:
        super().__init__("Invalid token")


class UnauthorizedError(AuthError):
    """Raised when a protected route is called without a bearer token."""

    def __init__(self, detail: str = "Not authorized, no token") -> None:
        super().__init__(detail)


auth_exception_handler = create_exception_handler(logger)
