"""Reference integrity checks run before content mutations."""

from collections.abc import Sequence
from uuid import UUID

from blog_cms.errors.content import (
    CategoryCycleError,
    CategoryHasChildrenError,
    CategoryInUseError,
    DanglingReferenceError,
    TagInUseError,
)
from blog_cms.repositories.blog import BlogRepository
from blog_cms.repositories.category import CategoryRepository
from blog_cms.repositories.tag import TagRepository


class ReferenceIntegrityGuard:
    """
    Gatekeeper for writes that could break references between entities.

    Storage enforces no foreign keys between posts, categories and tags, so
    every create, update and delete that touches a reference runs one of
    these checks first. Checks are advisory at write time only.
    """

    def __init__(
        self,
        categories: CategoryRepository,
        tags: TagRepository,
        blogs: BlogRepository,
    ) -> None:
        self.categories = categories
        self.tags = tags
        self.blogs = blogs

    async def assert_categories_exist(self, category_ids: Sequence[UUID]) -> None:
        """
        Require every id to resolve to a category.

        Compares the match count with the list length, so a duplicated id
        fails just like an unknown one.

        Raises:
            DanglingReferenceError: If the counts differ
        """
        if not category_ids:
            return
        if await self.categories.count_by_ids(category_ids) != len(category_ids):
            raise DanglingReferenceError("One or more categories not found")

    async def assert_tags_exist(self, tag_ids: Sequence[UUID]) -> None:
        """
        Require every id to resolve to a tag.

        Raises:
            DanglingReferenceError: If the counts differ
        """
        if not tag_ids:
            return
        if await self.tags.count_by_ids(tag_ids) != len(tag_ids):
            raise DanglingReferenceError("One or more tags not found")

    async def assert_valid_parent(self, category_id: UUID | None, parent_id: UUID) -> None:
        """
        Require ``parent_id`` to exist and not to descend from ``category_id``.

        Args:
            category_id: Category being updated, or None on create
            parent_id: Proposed parent

        Raises:
            CategoryCycleError: If the category would become its own ancestor
            DanglingReferenceError: If the parent does not exist
        """
        if category_id is not None and parent_id == category_id:
            raise CategoryCycleError
        if await self.categories.count_by_ids([parent_id]) != 1:
            raise DanglingReferenceError("Parent category not found")
        if category_id is None:
            return

        seen: set[UUID] = set()
        ancestor = await self.categories.get_parent_id(parent_id)
        while ancestor is not None and ancestor not in seen:
            if ancestor == category_id:
                raise CategoryCycleError
            seen.add(ancestor)
            ancestor = await self.categories.get_parent_id(ancestor)

    async def assert_category_deletable(self, category_id: UUID) -> None:
        """
        Require that no post references the category and no category is its child.

        Raises:
            CategoryInUseError: If a post references it
            CategoryHasChildrenError: If it has subcategories
        """
        if await self.blogs.count_referencing_category(category_id):
            raise CategoryInUseError
        if await self.categories.has_children(category_id):
            raise CategoryHasChildrenError

    async def assert_tag_deletable(self, tag_id: UUID) -> None:
        """
        Require that no post references the tag.

        Raises:
            TagInUseError: If a post references it
        """
        if await self.blogs.count_referencing_tag(tag_id):
            raise TagInUseError
