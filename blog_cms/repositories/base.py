"""Base repository for database operations."""

from collections.abc import Sequence
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import SQLModel

from blog_cms.errors.content import DuplicateSlugError
from blog_cms.errors.database import DatabaseConnectionError, DatabaseError

type FilterValue = str | int | bool | UUID | None


class BaseRepository[ModelT: SQLModel]:
    """
    Base repository implementing the lookups shared by content entities.

    Subclasses set ``model`` plus the labels used in duplicate-slug errors.
    Writes only flush; the request-scoped transaction commits.

    Attributes:
        model: The SQLModel database model type.
        id_field: The name of the primary key field (default: "id").
        entity_name: Human-readable entity name used in error messages.
        slug_source: Field the slug is derived from, used in error messages.
    """

    model: type[ModelT]
    id_field: str = "id"
    entity_name: str = "Resource"
    slug_source: str = "name"

    def __init__(self, session: AsyncSession) -> None:
        """
        Initialize repository with database session.

        Args:
            session: Async database session
        """
        self.session = session

    async def get_by_id(self, record_id: UUID) -> ModelT | None:
        """
        Get a record by its ID.

        Args:
            record_id: Record UUID

        Returns:
            ModelT | None: Record if found, None otherwise
        """
        id_column = getattr(self.model, self.id_field)
        statement = select(self.model).where(id_column == record_id)
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def _first_where(self, field_name: str, value: FilterValue) -> ModelT | None:
        field = getattr(self.model, field_name)
        statement = select(self.model).where(field == value)
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def get_by_slug(self, slug: str) -> ModelT | None:
        """Get a record by its unique slug."""
        return await self._first_where("slug", slug)

    async def get_many(self, record_ids: Sequence[UUID]) -> list[ModelT]:
        """
        Fetch every record whose id is in ``record_ids`` in one query.

        Args:
            record_ids: Ids to fetch; unknown ids are simply absent from the result

        Returns:
            list[ModelT]: Matching records in no particular order
        """
        if not record_ids:
            return []
        id_column = getattr(self.model, self.id_field)
        statement = select(self.model).where(id_column.in_(list(record_ids)))
        result = await self.session.execute(statement)
        return list(result.scalars().all())

    async def count_by_ids(self, record_ids: Sequence[UUID]) -> int:
        """
        Count records whose id is in ``record_ids``.

        Args:
            record_ids: Ids to look up

        Returns:
            int: Number of distinct matching records
        """
        if not record_ids:
            return 0
        id_column = getattr(self.model, self.id_field)
        statement = (
            select(func.count()).select_from(self.model).where(id_column.in_(list(record_ids)))
        )
        result = await self.session.execute(statement)
        count = result.scalar()
        return count if count is not None else 0

    async def slug_exists(self, slug: str, exclude_id: UUID | None = None) -> bool:
        """
        Check whether another record already owns ``slug``.

        Args:
            slug: Slug to check
            exclude_id: Optional ID to exclude from check (for updates)

        Returns:
            bool: True if the slug is taken
        """
        return await self._exists_where("slug", slug, exclude_id)

    async def add(self, record: ModelT) -> ModelT:
        """
        Flush a new or modified record and return it refreshed.

        Raises:
            DuplicateSlugError: If the unique slug index rejects the row
            DatabaseError: For any other constraint violation
            DatabaseConnectionError: If the statement could not run
        """
        try:
            self.session.add(record)
            await self.session.flush()
            await self.session.refresh(record)
        except IntegrityError as e:
            await self.session.rollback()
            if "slug" in str(e.orig or e).lower():
                raise DuplicateSlugError(self.entity_name, self.slug_source) from e
            raise DatabaseError(detail=f"Could not save {self.entity_name.lower()}") from e
        except SQLAlchemyError as e:
            await self.session.rollback()
            raise DatabaseConnectionError from e
        return record

    async def delete(self, record: ModelT) -> None:
        """
        Delete a loaded record.

        Args:
            record: Record to delete
        """
        await self.session.delete(record)
        await self.session.flush()

    async def _exists_where(
        self,
        field_name: str,
        value: FilterValue,
        exclude_id: UUID | None = None,
    ) -> bool:
        field = getattr(self.model, field_name)
        statement = select(1).where(field == value)

        if exclude_id is not None:
            id_column = getattr(self.model, self.id_field)
            statement = statement.where(id_column != exclude_id)

        statement = statement.limit(1)
        result = await self.session.execute(statement)
        return result.scalar_one_or_none() is not None
