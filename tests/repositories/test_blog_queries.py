"""Tests for the SQL emitted by the blog repository."""

from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

from pytest import fixture, mark
from sqlalchemy.dialects import postgresql

from blog_cms.models import BlogPostDB
from blog_cms.repositories import BlogRepository


@fixture
def session() -> AsyncMock:
    """Async session whose queries all return no rows."""
    result = MagicMock()
    result.scalars.return_value.all.return_value = []
    result.scalar_one_or_none.return_value = None
    result.scalar.return_value = 0
    mock = AsyncMock()
    mock.execute.return_value = result
    return mock


def emitted_sql(session: AsyncMock) -> str:
    statement = session.execute.call_args.args[0]
    return str(statement.compile(dialect=postgresql.dialect()))


class TestBlogQueries:
    """Test cases for BlogRepository statements."""

    @mark.asyncio
    async def test_list_published_filters_and_orders(self, session: AsyncMock) -> None:
        await BlogRepository(session).list_published()

        sql = emitted_sql(session)
        assert "blog_posts.status = " in sql
        assert "ORDER BY blog_posts.published_at DESC NULLS LAST" in sql

    @mark.asyncio
    async def test_search_uses_phrase_query(self, session: AsyncMock) -> None:
        await BlogRepository(session).search("hello ai", 5)

        sql = emitted_sql(session)
        assert "phraseto_tsquery('english'" in sql
        assert "to_tsvector('english', blog_posts.title ||" in sql
        assert "@@" in sql
        assert "LIMIT" in sql

    @mark.asyncio
    async def test_tag_filter_uses_any_key_operator(self, session: AsyncMock) -> None:
        await BlogRepository(session).find_by_tags([uuid4()])

        assert "blog_posts.tags ?| ARRAY" in emitted_sql(session)

    @mark.asyncio
    async def test_empty_filter_skips_query(self, session: AsyncMock) -> None:
        assert await BlogRepository(session).find_by_categories([]) == []
        session.execute.assert_not_called()

    @mark.asyncio
    async def test_reference_count_uses_containment(self, session: AsyncMock) -> None:
        assert await BlogRepository(session).count_referencing_tag(uuid4()) == 0

        assert "blog_posts.tags @> " in emitted_sql(session)


class TestBlogTable:
    """Test cases for the blog_posts table definition."""

    def test_metadata_column_name(self) -> None:
        assert "metadata" in BlogPostDB.__table__.c  # type: ignore[attr-defined]

    def test_indexes(self) -> None:
        names = {index.name for index in BlogPostDB.__table__.indexes}  # type: ignore[attr-defined]

        assert {
            "ix_blog_posts_categories_gin",
            "ix_blog_posts_tags_gin",
            "ix_blog_posts_status_published",
            "ix_blog_posts_search_gin",
        } <= names
