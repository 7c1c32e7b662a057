"""Persistence errors. Both render as 500 with a generic message."""

from logging import getLogger

from starlette.status import HTTP_500_INTERNAL_SERVER_ERROR

from blog_cms.configs import file_logger
from blog_cms.errors.base import BaseAppError, create_exception_handler

logger = file_logger(getLogger(__name__))


class DatabaseError(BaseAppError):
    """A statement failed for a reason other than a known content rule."""

    def __init__(self, detail: str = "Database Error") -> None:
        super().__init__(detail, HTTP_500_INTERNAL_SERVER_ERROR)


class DatabaseConnectionError(DatabaseError):
    """The database could not be reached or aborted the transaction."""

    def __init__(self, detail: str = "Content store unavailable") -> None:
        super().__init__(detail)


database_exception_handler = create_exception_handler(logger)
