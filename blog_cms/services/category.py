"""Category service."""

from collections.abc import Sequence
from logging import getLogger
from uuid import UUID

from blog_cms.configs import file_logger
from blog_cms.errors.content import DuplicateSlugError, NotFoundError
from blog_cms.models.category import CategoryDB
from blog_cms.repositories.category import CategoryRepository
from blog_cms.schemas.category import CategoryCreate, CategoryResponse, CategoryUpdate
from blog_cms.schemas.common import RefSummary
from blog_cms.services.integrity import ReferenceIntegrityGuard
from blog_cms.services.slugs import derive_slug
from blog_cms.utils.helpers import parse_uuid, utc_now

logger = file_logger(getLogger(__name__))


class CategoryService:
    """
    Create, update, delete and look up categories.

    Categories form a forest through ``parent_id``. Parent assignments are
    checked for existence and cycles, and responses carry the parent resolved
    to its summary.
    """

    def __init__(self, repo: CategoryRepository, guard: ReferenceIntegrityGuard) -> None:
        self.repo = repo
        self.guard = guard

    async def _get_or_404(self, category_id: UUID) -> CategoryDB:
        category = await self.repo.get_by_id(category_id)
        if category is None:
            raise NotFoundError("Category")
        return category

    async def _to_responses(self, categories: Sequence[CategoryDB]) -> list[CategoryResponse]:
        parent_ids = {c.parent_id for c in categories if c.parent_id is not None}
        parents = {p.id: RefSummary.model_validate(p) for p in await self.repo.get_many(list(parent_ids))}
        return [
            CategoryResponse(
                id=c.id,
                name=c.name,
                slug=c.slug,
                description=c.description,
                parent_id=c.parent_id,
                parent=parents.get(c.parent_id) if c.parent_id is not None else None,
                created_at=c.created_at,
                updated_at=c.updated_at,
            )
            for c in categories
        ]

    async def _to_response(self, category: CategoryDB) -> CategoryResponse:
        return (await self._to_responses([category]))[0]

    async def create(self, body: CategoryCreate) -> CategoryResponse:
        """
        Create a category, optionally under an existing parent.

        Raises:
            ValidationError: If the name yields an empty slug
            DuplicateSlugError: If another category already owns the slug
            DanglingReferenceError: If the parent does not exist
        """
        slug = derive_slug(body.name)
        if await self.repo.slug_exists(slug):
            raise DuplicateSlugError("Category", "name")
        if body.parent_id is not None:
            await self.guard.assert_valid_parent(None, body.parent_id)

        category = await self.repo.add(
            CategoryDB(
                name=body.name,
                slug=slug,
                description=body.description,
                parent_id=body.parent_id,
            ),
        )
        logger.info(f"Category created: {category.slug}")
        return await self._to_response(category)

    async def update(self, category_id: UUID, body: CategoryUpdate) -> CategoryResponse:
        """
        Apply the fields present in ``body``.

        Raises:
            NotFoundError: If the category does not exist
            DuplicateSlugError: If the new slug belongs to another category
            DanglingReferenceError: If the new parent does not exist
            CategoryCycleError: If the new parent descends from this category
        """
        category = await self._get_or_404(category_id)
        fields = body.model_fields_set

        if body.name is not None:
            slug = derive_slug(body.name)
            if await self.repo.slug_exists(slug, exclude_id=category.id):
                raise DuplicateSlugError("Category", "name")
            category.name = body.name
            category.slug = slug

        if "description" in fields:
            category.description = body.description

        if "parent_id" in fields:
            if body.parent_id is not None:
                await self.guard.assert_valid_parent(category.id, body.parent_id)
            category.parent_id = body.parent_id

        category.updated_at = utc_now()
        category = await self.repo.add(category)
        logger.info(f"Category updated: {category.slug}")
        return await self._to_response(category)

    async def delete(self, category_id: UUID) -> None:
        """
        Delete a category that no post references and that has no children.

        Raises:
            NotFoundError: If the category does not exist
            CategoryInUseError: If any post references it
            CategoryHasChildrenError: If it has subcategories
        """
        category = await self._get_or_404(category_id)
        await self.guard.assert_category_deletable(category.id)
        await self.repo.delete(category)
        logger.info(f"Category deleted: {category.slug}")

    async def list_all(self) -> list[CategoryResponse]:
        return await self._to_responses(await self.repo.list_all())

    async def get(self, id_or_slug: str) -> CategoryResponse:
        """
        Look up a category by id, falling back to slug.

        Raises:
            NotFoundError: If neither lookup matches
        """
        category = None
        if (category_id := parse_uuid(id_or_slug)) is not None:
            category = await self.repo.get_by_id(category_id)
        if category is None:
            category = await self.repo.get_by_slug(id_or_slug)
        if category is None:
            raise NotFoundError("Category")
        return await self._to_response(category)
