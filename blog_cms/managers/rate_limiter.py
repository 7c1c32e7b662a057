# blog_cms/managers/rate_limiter.py

"""Per-IP request throttling for the API, with a stricter limit on login."""

from logging import getLogger

from fastapi import Request
from fastapi.responses import ORJSONResponse
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address
from starlette.status import HTTP_429_TOO_MANY_REQUESTS

from blog_cms.configs import LimiterConfig, file_logger
from blog_cms.errors.base import error_body

logger = file_logger(getLogger(__name__))

TOO_MANY_REQUESTS = "Too many requests from this IP, please try again later"


def client_key(request: Request) -> str:
    """Bucket requests by client address."""
    return f"ip:{get_remote_address(request)}"


limiter = Limiter(**LimiterConfig().model_dump(), key_func=client_key)


async def rate_limit_exceeded_handler(request: Request, exc: Exception) -> ORJSONResponse:
    """
    Render a tripped limit with the standard failure envelope.

    Args:
        request: Throttled request
        exc: ``RateLimitExceeded`` raised by slowapi

    Returns:
        ORJSONResponse: 429 naming the limit that was hit
    """
    limit = exc.detail if isinstance(exc, RateLimitExceeded) else None
    key = client_key(request)
    logger.warning(f"Rate limit {limit} hit by {key} on {request.url.path}")
    return ORJSONResponse(
        status_code=HTTP_429_TOO_MANY_REQUESTS,
        content=error_body(TOO_MANY_REQUESTS, {"limit": limit}),
    )
