"""Blog post repository for database operations."""

from logging import getLogger
from uuid import UUID

from sqlalchemy import ColumnElement, Select, func, literal_column, select
from sqlalchemy.dialects.postgresql import array
from sqlalchemy.orm import defer

from blog_cms.configs import file_logger
from blog_cms.models.blog import SEARCH_CONFIG, BlogPostDB
from blog_cms.repositories.base import BaseRepository

logger = file_logger(getLogger(__name__))

PUBLISHED = "published"


def search_document() -> ColumnElement:
    """Return the tsvector expression matching ``ix_blog_posts_search_gin``."""
    return func.to_tsvector(
        SEARCH_CONFIG,
        BlogPostDB.title + literal_column("' '") + BlogPostDB.excerpt,
    )


class BlogRepository(BaseRepository[BlogPostDB]):
    """
    Repository for BlogPost entities.

    Public read queries filter to published posts and defer the heavyweight
    ``content`` column, so callers must not touch ``content`` on their results.
    """

    model = BlogPostDB
    entity_name = "Blog"
    slug_source = "title"

    def _published(self, *, with_content: bool = False) -> Select[tuple[BlogPostDB]]:
        statement = select(BlogPostDB).where(BlogPostDB.status == PUBLISHED)
        if not with_content:
            statement = statement.options(defer(BlogPostDB.content))
        return statement

    def _newest_first(self, statement: Select[tuple[BlogPostDB]]) -> Select[tuple[BlogPostDB]]:
        return statement.order_by(
            BlogPostDB.published_at.desc().nulls_last(),
            BlogPostDB.created_at.desc(),
        )

    async def _all(self, statement: Select[tuple[BlogPostDB]]) -> list[BlogPostDB]:
        result = await self.session.execute(statement)
        return list(result.scalars().all())

    async def list_published(self) -> list[BlogPostDB]:
        """
        List published posts, newest publication first, without content.

        Returns:
            list[BlogPostDB]: Published posts
        """
        return await self._all(self._newest_first(self._published()))

    async def get_published(
        self,
        *,
        post_id: UUID | None = None,
        slug: str | None = None,
    ) -> BlogPostDB | None:
        """
        Get one published post, content included, by id or by slug.

        Args:
            post_id: Post UUID
            slug: Post slug, used when ``post_id`` is None

        Returns:
            BlogPostDB | None: Post if found and published
        """
        statement = self._published(with_content=True)
        if post_id is not None:
            statement = statement.where(BlogPostDB.id == post_id)
        else:
            statement = statement.where(BlogPostDB.slug == slug)
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def search(self, phrase: str, limit: int) -> list[BlogPostDB]:
        """
        Full-text phrase search over title and excerpt of published posts.

        Results are ranked by relevance, then by publication recency.

        Args:
            phrase: Normalized search phrase
            limit: Maximum number of posts to return

        Returns:
            list[BlogPostDB]: Matching posts without content
        """
        document = search_document()
        ts_query = func.phraseto_tsquery(SEARCH_CONFIG, phrase)
        statement = (
            self._published()
            .where(document.op("@@")(ts_query))
            .order_by(
                func.ts_rank(document, ts_query).desc(),
                BlogPostDB.published_at.desc().nulls_last(),
            )
            .limit(limit)
        )
        posts = await self._all(statement)
        logger.info(f"Search for {phrase!r} matched {len(posts)} posts")
        return posts

    async def find_by_tags(self, tag_ids: list[UUID]) -> list[BlogPostDB]:
        """
        List published posts referencing any of ``tag_ids``.

        Uses the GIN index on ``tags`` through the JSONB ``?|`` operator.
        """
        if not tag_ids:
            return []
        statement = self._published().where(
            BlogPostDB.tags.has_any(array([str(tag_id) for tag_id in tag_ids])),
        )
        return await self._all(self._newest_first(statement))

    async def find_by_categories(self, category_ids: list[UUID]) -> list[BlogPostDB]:
        """List published posts referencing any of ``category_ids``."""
        if not category_ids:
            return []
        statement = self._published().where(
            BlogPostDB.categories.has_any(array([str(cid) for cid in category_ids])),
        )
        return await self._all(self._newest_first(statement))

    async def count_referencing_category(self, category_id: UUID) -> int:
        """Count posts of any status whose ``categories`` contain ``category_id``."""
        statement = (
            select(func.count())
            .select_from(BlogPostDB)
            .where(BlogPostDB.categories.contains([str(category_id)]))
        )
        result = await self.session.execute(statement)
        return result.scalar() or 0

    async def count_referencing_tag(self, tag_id: UUID) -> int:
        """Count posts of any status whose ``tags`` contain ``tag_id``."""
        statement = (
            select(func.count())
            .select_from(BlogPostDB)
            .where(BlogPostDB.tags.contains([str(tag_id)]))
        )
        result = await self.session.execute(statement)
        return result.scalar() or 0
