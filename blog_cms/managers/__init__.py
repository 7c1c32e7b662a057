from blog_cms.managers.rate_limiter import limiter, rate_limit_exceeded_handler
from blog_cms.managers.session_store import (
    SessionStore,
    get_session_store,
    init_session_store,
)

__all__ = [
    "limiter",
    "rate_limit_exceeded_handler",
    "SessionStore",
    "get_session_store",
    "init_session_store",
]
