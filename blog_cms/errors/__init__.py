from blog_cms.errors.auth import (
    AuthError,
    InvalidCredentialsError,
    InvalidRefreshTokenError,
    InvalidTokenError,
    TokenExpiredError,
    UnauthorizedError,
    auth_exception_handler,
)
from blog_cms.errors.base import (
    BaseAppError,
    create_exception_handler,
    create_unhandled_exception_handler,
    error_body,
)
from blog_cms.errors.content import (
    CategoryCycleError,
    CategoryHasChildrenError,
    CategoryInUseError,
    ContentError,
    DanglingReferenceError,
    DuplicateSlugError,
    InvalidStatusTransitionError,
    NotFoundError,
    TagInUseError,
    content_exception_handler,
)
from blog_cms.errors.database import (
    DatabaseConnectionError,
    DatabaseError,
    database_exception_handler,
)
from blog_cms.errors.session import SessionStoreError, session_store_exception_handler
from blog_cms.errors.validation import (
    ValidationError,
    custom_validation_exception_handler,
    validation_exception_handler,
)

__all__ = [
    "AuthError",
    "InvalidCredentialsError",
    "InvalidRefreshTokenError",
    "InvalidTokenError",
    "TokenExpiredError",
    "UnauthorizedError",
    "auth_exception_handler",
    "BaseAppError",
    "create_exception_handler",
    "create_unhandled_exception_handler",
    "error_body",
    "CategoryCycleError",
    "CategoryHasChildrenError",
    "CategoryInUseError",
    "ContentError",
    "DanglingReferenceError",
    "DuplicateSlugError",
    "InvalidStatusTransitionError",
    "NotFoundError",
    "TagInUseError",
    "content_exception_handler",
    "DatabaseConnectionError",
    "DatabaseError",
    "database_exception_handler",
    "SessionStoreError",
    "session_store_exception_handler",
    "ValidationError",
    "custom_validation_exception_handler",
    "validation_exception_handler",
]
