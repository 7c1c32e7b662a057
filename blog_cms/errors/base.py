from collections.abc import Awaitable, Callable
from logging import Logger
from traceback import format_exception
from typing import Any

from fastapi import Request
from fastapi.responses import ORJSONResponse
from starlette.status import HTTP_500_INTERNAL_SERVER_ERROR

from blog_cms.configs.settings import DEFAULT_ERROR_MESSAGE, settings
from blog_cms.utils.helpers import host


class BaseAppError(Exception):
    """Base exception class for application errors."""

    def __init__(
        self,
        detail: str = "Internal Server Error",
        status_code: int = HTTP_500_INTERNAL_SERVER_ERROR,
        details: Any = None,
    ) -> None:
        super().__init__(detail)
        self.detail = detail
        self.status_code = status_code
        self.details = details

    def __str__(self) -> str:
        return self.detail


def error_body(detail: str, details: Any = None) -> dict[str, Any]:
    """Build the failure envelope returned by every error handler."""
    content: dict[str, Any] = {"success": False, "error": detail}
    if details:
        content["details"] = details
    return content


def create_exception_handler(
    logger: Logger,
) -> Callable[[Request, Exception], Awaitable[ORJSONResponse]]:
    """
    Create a standardized exception handler for the application.

    Args:
        logger: Logger instance to use for logging exceptions.

    Returns:
        A callable exception handler.
    """

    async def handler(request: Request, exc: Exception) -> ORJSONResponse:
        status_code = getattr(exc, "status_code", HTTP_500_INTERNAL_SERVER_ERROR)
        detail = getattr(exc, "detail", DEFAULT_ERROR_MESSAGE)
        details = getattr(exc, "details", None)

        message = f"{detail} for ip: {host(request)} for endpoint {request.url.path}"
        if status_code >= HTTP_500_INTERNAL_SERVER_ERROR:
            logger.error(message)
        else:
            logger.warning(message)

        return ORJSONResponse(content=error_body(detail, details), status_code=status_code)

    return handler


def create_unhandled_exception_handler(
    logger: Logger,
) -> Callable[[Request, Exception], Awaitable[ORJSONResponse]]:
    """
    Create the catch-all handler for exceptions no other handler claimed.

    The response never carries the exception message. Outside production the
    formatted traceback is attached as ``stack`` to help local debugging.
    """

    async def handler(request: Request, exc: Exception) -> ORJSONResponse:
        logger.exception(
            f"Unhandled error for ip: {host(request)} for endpoint {request.url.path}",
            exc_info=exc,
        )

        content = error_body(DEFAULT_ERROR_MESSAGE)
        if not settings.is_production:
            content["stack"] = "".join(format_exception(exc))

        return ORJSONResponse(content=content, status_code=HTTP_500_INTERNAL_SERVER_ERROR)

    return handler
