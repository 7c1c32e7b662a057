"""
Postgres engine and per-request transactions.

Every request that touches content gets one session from ``get_session``.
Repositories only flush; the commit happens once, when the route returns,
so a post create that fails its reference checks leaves nothing behind.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from logging import getLogger

from sqlalchemy import event
from sqlalchemy.exc import DBAPIError, IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession as SQLModelAsyncSession

from blog_cms.configs import file_logger, settings
from blog_cms.errors.database import DatabaseConnectionError, DatabaseError

logger = file_logger(getLogger(__name__))

# Applied to statements and lock waits alike
STATEMENT_TIMEOUT_MS = 30000


def build_engine(url: str | None = None) -> AsyncEngine:
    """
    Create the asyncpg engine with pool limits and server-side timeouts.

    Args:
        url: Database URL, defaults to ``settings.DATABASE_URL``

    Returns:
        AsyncEngine: Configured engine
    """
    new_engine = create_async_engine(
        url or settings.DATABASE_URL,
        echo=settings.DATABASE_ECHO,
        pool_size=settings.POOL_SIZE,
        max_overflow=settings.MAX_OVERFLOW,
        pool_timeout=settings.POOL_TIMEOUT,
        pool_recycle=settings.POOL_RECYCLE,
        pool_pre_ping=True,
        connect_args={
            "command_timeout": STATEMENT_TIMEOUT_MS / 1000,
            "server_settings": {
                "application_name": settings.APP_NAME,
                "statement_timeout": str(STATEMENT_TIMEOUT_MS),
                "lock_timeout": str(STATEMENT_TIMEOUT_MS),
            },
        },
    )
    if settings.DEBUG:

        @event.listens_for(new_engine.sync_engine, "connect")
        def on_connect(dbapi_connection: object, connection_record: object) -> None:
            logger.debug("Opened Postgres connection")

    return new_engine


engine: AsyncEngine = build_engine()

async_session_maker: async_sessionmaker[SQLModelAsyncSession] = async_sessionmaker(
    engine,
    class_=SQLModelAsyncSession,
    expire_on_commit=False,
    autoflush=False,
)


@asynccontextmanager
async def transaction() -> AsyncGenerator[AsyncSession]:
    """
    Open a session that commits on success and rolls back on any error.

    Driver failures that escape the repositories surface as
    ``DatabaseConnectionError``; application errors pass through untouched.

    Yields:
        AsyncSession: Session bound to one transaction
    """
    async with async_session_maker() as session:
        try:
            yield session
            await session.commit()
        except IntegrityError as e:
            await session.rollback()
            raise DatabaseError(detail="Write rejected by a database constraint") from e
        except DBAPIError as e:
            await session.rollback()
            logger.error(f"Transaction aborted by the database: {e.__class__.__name__}")
            raise DatabaseConnectionError from e
        except SQLAlchemyError as e:
            await session.rollback()
            raise DatabaseError(detail="Transaction failed") from e
        except Exception:
            await session.rollback()
            raise


async def get_session() -> AsyncGenerator[AsyncSession]:
    """
    Request-scoped session dependency.

    Yields:
        AsyncSession: Session whose work commits after the handler returns
    """
    async with transaction() as session:
        yield session


async def init_db() -> None:
    """Create any missing tables and indexes. Development only; Alembic owns production."""
    from blog_cms.models import BlogPostDB, CategoryDB, TagDB  # noqa: F401, PLC0415

    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    logger.info("Blog tables ready")


async def close_db() -> None:
    """Dispose of the connection pool on shutdown."""
    await engine.dispose()
    logger.info("Database pool closed")
