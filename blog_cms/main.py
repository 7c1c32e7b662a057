# blog_cms/main.py

"""Blog CMS Backend - admin-managed posts, categories and tags over FastAPI."""

from logging import getLogger

from fastapi import APIRouter, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import ORJSONResponse
from redis.exceptions import RedisError
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware

from blog_cms.configs import file_logger, settings
from blog_cms.errors import (
    AuthError,
    ContentError,
    DatabaseError,
    SessionStoreError,
    ValidationError,
    auth_exception_handler,
    content_exception_handler,
    create_unhandled_exception_handler,
    custom_validation_exception_handler,
    database_exception_handler,
    session_store_exception_handler,
    validation_exception_handler,
)
from blog_cms.managers import limiter, rate_limit_exceeded_handler
from blog_cms.middleware import (
    LoggingMiddleware,
    SecurityHeadersMiddleware,
    configure_cors,
    lifespan,
)
from blog_cms.routes import auth_router, blog_router, category_router, tag_router
from blog_cms.schemas import HealthCheckResponse

logger = file_logger(getLogger(__name__))

app = FastAPI(
    title=settings.APP_NAME,
    description="Blog content-management API",
    version="1.0.0",
    lifespan=lifespan,
    swagger_ui_parameters={
        "docExpansion": "none",
        "operationsSorter": "method",
    },
)

configure_cors(app)

app.add_middleware(LoggingMiddleware)
app.add_middleware(SecurityHeadersMiddleware)
app.add_middleware(SlowAPIMiddleware)

api = APIRouter(prefix="/api")

routes = [
    auth_router,
    blog_router,
    category_router,
    tag_router,
]

_ = [api.include_router(router) for router in routes]
app.include_router(api)

errors = [
    (AuthError, auth_exception_handler),
    (ContentError, content_exception_handler),
    (ValidationError, custom_validation_exception_handler),
    (DatabaseError, database_exception_handler),
    (SessionStoreError, session_store_exception_handler),
    (RateLimitExceeded, rate_limit_exceeded_handler),
    (RequestValidationError, validation_exception_handler),
    (Exception, create_unhandled_exception_handler(logger)),
]

_ = [app.add_exception_handler(exc_type, handler) for exc_type, handler in errors]

app.state.limiter = limiter
limiter: Limiter = app.state.limiter


@app.get(
    "/health",
    tags=["🩺 Health"],
    summary="Health check endpoint",
    response_model=HealthCheckResponse,
    response_class=ORJSONResponse,
    responses={
        200: {
            "content": {
                "application/json": {
                    "example": {
                        "status": "ok",
                        "version": "1.0.0",
                        "environment": "development",
                        "session_store": "memory",
                    },
                },
            },
        },
    },
    operation_id="health_check",
)
@limiter.exempt
async def health_check(request: Request) -> HealthCheckResponse:
    """
    Health check endpoint.

    Parameters
    ----------
    request : Request
        Current request context.

    Returns
    -------
    HealthCheckResponse
        Service status and the session store backend in use.
    """
    client = getattr(request.app.state, "session_client", None)
    if client is None:
        session_store = "not_initialized"
    else:
        backend = "redis" if settings.REDIS_ENABLED else "memory"
        try:
            session_store = backend if await client.ping() else "unavailable"
        except RedisError:
            session_store = "unavailable"

    return HealthCheckResponse(
        status="ok",
        version=app.version,
        environment=settings.ENVIRONMENT,
        session_store=session_store,
    )
