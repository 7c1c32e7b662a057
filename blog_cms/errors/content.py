"""Errors raised by content operations on posts, categories and tags."""

from logging import getLogger

from starlette.status import HTTP_400_BAD_REQUEST, HTTP_404_NOT_FOUND

from blog_cms.configs import file_logger
from blog_cms.errors.base import BaseAppError, create_exception_handler

logger = file_logger(getLogger(__name__))


class ContentError(BaseAppError):
    """Base class for content errors."""

    def __init__(
        self,
        detail: str = "Content operation failed",
        status_code: int = HTTP_400_BAD_REQUEST,
    ) -> None:
        super().__init__(detail, status_code)


class NotFoundError(ContentError):
    """Raised when an id or slug does not resolve to an entity."""

    def __init__(self, entity: str = "Resource") -> None:
        super().__init__(f"{entity} not found", HTTP_404_NOT_FOUND)


class DuplicateSlugError(ContentError):
    """Raised when a name or title produces a slug another entity already owns."""

    def __init__(self, entity: str = "Resource", field: str = "name") -> None:
        super().__init__(f"{entity} with this {field} already exists")


class DanglingReferenceError(ContentError):
    """Raised when referenced category, tag or parent ids do not all exist."""

    def __init__(self, detail: str = "One or more references not found") -> None:
        super().__init__(detail)


class CategoryInUseError(ContentError):
    """Raised when deleting a category still referenced by a post."""

    def __init__(self) -> None:
        super().__init__("Cannot delete category used in blog posts")


class CategoryHasChildrenError(ContentError):
    """Raised when deleting a category that still has subcategories."""

    def __init__(self) -> None:
        super().__init__("Cannot delete category with subcategories")


class TagInUseError(ContentError):
    """Raised when deleting a tag still referenced by a post."""

    def __init__(self) -> None:
        super().__init__("Cannot delete tag used in blog posts")


class CategoryCycleError(ContentError):
    """Raised when a parent assignment would make a category its own ancestor."""

    def __init__(self) -> None:
        super().__init__("Category cannot be its own ancestor")


class InvalidStatusTransitionError(ContentError):
    """Raised when a post status change is not allowed."""

    def __init__(self, current: str, target: str) -> None:
        super().__init__(f"Cannot change status from {current} to {target}")


content_exception_handler = create_exception_handler(logger)
