"""Category repository for database operations."""

from uuid import UUID

from sqlalchemy import select

from blog_cms.models.category import CategoryDB
from blog_cms.repositories.base import BaseRepository


class CategoryRepository(BaseRepository[CategoryDB]):
    """Repository for Category entities and their parent links."""

    model = CategoryDB
    entity_name = "Category"
    slug_source = "name"

    async def list_all(self) -> list[CategoryDB]:
        """Return every category ordered by name."""
        result = await self.session.execute(select(CategoryDB).order_by(CategoryDB.name))
        return list(result.scalars().all())

    async def has_children(self, category_id: UUID) -> bool:
        """
        Check whether any category names ``category_id`` as its parent.

        Args:
            category_id: Candidate parent id

        Returns:
            bool: True if at least one child exists
        """
        return await self._exists_where("parent_id", category_id)

    async def get_parent_id(self, category_id: UUID) -> UUID | None:
        """Return the parent id of a category, or None for roots and unknown ids."""
        statement = select(CategoryDB.parent_id).where(CategoryDB.id == category_id)
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()
