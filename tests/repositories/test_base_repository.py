"""Tests for write error mapping in the base repository."""

from unittest.mock import AsyncMock, MagicMock

from pytest import fixture, mark, raises
from sqlalchemy.exc import IntegrityError, OperationalError

from blog_cms.errors.content import DuplicateSlugError
from blog_cms.errors.database import DatabaseConnectionError, DatabaseError
from blog_cms.models import CategoryDB, TagDB
from blog_cms.repositories import CategoryRepository, TagRepository


@fixture
def session() -> AsyncMock:
    mock = AsyncMock()
    mock.add = MagicMock()
    return mock


def violation(message: str) -> IntegrityError:
    return IntegrityError("INSERT", {}, Exception(message))


class TestAdd:
    """Test cases for BaseRepository.add."""

    @mark.asyncio
    async def test_flushes_and_refreshes(self, session: AsyncMock) -> None:
        tag = TagDB(name="AI", slug="ai")

        assert await TagRepository(session).add(tag) is tag

        session.add.assert_called_once_with(tag)
        session.flush.assert_awaited_once()
        session.refresh.assert_awaited_once_with(tag)
        session.rollback.assert_not_awaited()

    @mark.asyncio
    async def test_slug_race_maps_to_duplicate(self, session: AsyncMock) -> None:
        """Test that the unique slug index backs up the read-then-write check."""
        session.flush.side_effect = violation(
            'duplicate key value violates unique constraint "ix_tags_slug"',
        )

        with raises(DuplicateSlugError, match="Tag with this name already exists"):
            await TagRepository(session).add(TagDB(name="AI", slug="ai"))

        session.rollback.assert_awaited_once()

    @mark.asyncio
    async def test_other_constraint_maps_to_database_error(self, session: AsyncMock) -> None:
        session.flush.side_effect = violation(
            'insert or update on table "categories" violates foreign key constraint '
            '"categories_parent_id_fkey"',
        )

        with raises(DatabaseError, match="Could not save category"):
            await CategoryRepository(session).add(CategoryDB(name="Tech", slug="tech"))

        session.rollback.assert_awaited_once()

    @mark.asyncio
    async def test_driver_failure(self, session: AsyncMock) -> None:
        session.flush.side_effect = OperationalError("INSERT", {}, Exception("connection reset"))

        with raises(DatabaseConnectionError):
            await TagRepository(session).add(TagDB(name="AI", slug="ai"))

        session.rollback.assert_awaited_once()
