# blog_cms/middleware/middleware.py
"""
Middleware components for the blog CMS application.

This module contains middleware for security headers, request logging and
CORS handling, plus the lifespan event handler that opens the database and
the session store on startup and closes them on shutdown.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from logging import basicConfig, getLogger
from time import perf_counter

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from rich.logging import RichHandler
from rich.traceback import install
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

from blog_cms.clients import MemoryClient, RedisClient
from blog_cms.configs import file_logger, settings
from blog_cms.db import close_db, init_db
from blog_cms.managers.session_store import init_session_store
from blog_cms.utils.helpers import get_summary, host

# --- Logging Configuration ---
basicConfig(
    level="NOTSET",
    format="%(message)s",
    datefmt="%X",
    handlers=[RichHandler(rich_tracebacks=True)],
)
logger = file_logger(getLogger("rich"))

install()


async def open_session_backend(app: FastAPI) -> RedisClient | MemoryClient:
    """
    Open the key-value backend for refresh sessions and register the store.

    Redis is used when ``REDIS_ENABLED`` is set; otherwise an in-process
    store keeps sessions for the lifetime of the worker.
    """
    client: RedisClient | MemoryClient
    if settings.REDIS_ENABLED:
        client = RedisClient()
        await client.connect()
    else:
        client = MemoryClient()
        await client.start_lifecycle()
        logger.warning("REDIS_ENABLED is off; refresh sessions are kept in memory")

    init_session_store(client)
    app.state.session_client = client
    return client


async def close_session_backend(app: FastAPI) -> None:
    client = getattr(app.state, "session_client", None)
    if isinstance(client, RedisClient):
        await client.disconnect()
    elif isinstance(client, MemoryClient):
        await client.stop_lifecycle()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator:
    """
    Open the content database and the session backend, close both on exit.

    Outside production missing tables are created on startup; production
    schemas are managed by Alembic. A startup failure aborts the boot.
    """
    logger.info(f"Starting {app.title} ({settings.ENVIRONMENT})")
    try:
        if not settings.is_production:
            await init_db()
        backend = await open_session_backend(app)
    except Exception:
        logger.exception("Startup failed, the API will not serve requests")
        raise
    logger.info(f"Ready: content routes under /api, sessions in {type(backend).__name__}")

    yield

    logger.info(f"Stopping {app.title}")
    try:
        await close_session_backend(app)
    finally:
        await close_db()


def configure_cors(app: FastAPI) -> None:
    """Configure CORS middleware for the application."""
    allowed_origins: list[str] = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
    ]

    # Admin frontend origin
    if client_url := settings.CLIENT_URL:
        allowed_origins.append(client_url)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=allowed_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PATCH", "DELETE", "OPTIONS"],
        allow_headers=["*"],
    )


class LoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        """Log request summary and timing information."""

        start_time = perf_counter()
        summary = get_summary(request)

        route_info = summary or f"{request.method} {request.url.path}"
        logger.info(f"Request: {route_info}, from ip: {host(request)}")

        response = await call_next(request)
        duration = perf_counter() - start_time

        logger.info(
            f"Response: {response.status_code} for {request.method} {request.url.path} "
            f"in {duration:.2f}s",
        )

        return response


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        """Add security headers to all responses."""

        response = await call_next(request)
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"
        if settings.is_production:
            response.headers["Strict-Transport-Security"] = "max-age=31536000; includeSubDomains"
        return response
