"""Errors raised by the refresh-session key-value store."""

from logging import getLogger

from starlette.status import HTTP_500_INTERNAL_SERVER_ERROR

from blog_cms.configs import file_logger
from blog_cms.errors.base import BaseAppError, create_exception_handler

logger = file_logger(getLogger(__name__))


class SessionStoreError(BaseAppError):
    """Raised when the session store cannot be read or written."""

    def __init__(self, detail: str = "Session store unavailable") -> None:
        super().__init__(detail, HTTP_500_INTERNAL_SERVER_ERROR)


session_store_exception_handler = create_exception_handler(logger)
