"""Tag repository for database operations."""

from sqlalchemy import select

from blog_cms.models.tag import TagDB
from blog_cms.repositories.base import BaseRepository


class TagRepository(BaseRepository[TagDB]):
    """Repository for Tag entities."""

    model = TagDB
    entity_name = "Tag"
    slug_source = "name"

    async def list_all(self) -> list[TagDB]:
        """Return every tag ordered by name."""
        result = await self.session.execute(select(TagDB).order_by(TagDB.name))
        return list(result.scalars().all())
