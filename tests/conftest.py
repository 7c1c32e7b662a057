# tests/conftest.py
"""Root pytest configuration and shared fixtures."""

import os

from passlib.hash import pbkdf2_sha256

# Settings are read at import time, so the environment must be in place
# before anything from blog_cms is imported.
ADMIN_EMAIL = "admin@example.com"
ADMIN_PASSWORD = "correct-horse-battery"

os.environ["ENVIRONMENT"] = "test"
os.environ["LOG_TO_FILE"] = "false"
os.environ["REDIS_ENABLED"] = "false"
os.environ["SECRET_KEY"] = "test-secret-key-with-enough-entropy-for-hs256"
os.environ["ADMIN_ID"] = "admin"
os.environ["ADMIN_EMAIL"] = ADMIN_EMAIL
os.environ["ADMIN_HASHED_PASSWORD"] = pbkdf2_sha256.using(rounds=1000).hash(ADMIN_PASSWORD)
os.environ["PASSWORD_SECURITY_LEVEL"] = "low"

from collections.abc import AsyncGenerator, Sequence  # noqa: E402
from datetime import datetime  # noqa: E402
from typing import Any  # noqa: E402
from uuid import UUID  # noqa: E402

from pytest import fixture  # noqa: E402

from blog_cms.clients.memory_client import MemoryClient  # noqa: E402
from blog_cms.errors.content import DuplicateSlugError  # noqa: E402
from blog_cms.managers.session_store import SessionStore  # noqa: E402
from blog_cms.models import BlogPostDB, CategoryDB, TagDB  # noqa: E402
from blog_cms.schemas.auth import AdminIdentity  # noqa: E402
from blog_cms.services import (  # noqa: E402
    BlogService,
    CategoryService,
    ReferenceIntegrityGuard,
    TagService,
)

PUBLISHED = "published"


class InMemoryRepository:
    """Dict-backed stand-in for the SQL repositories, same async surface."""

    entity_name = "Resource"
    slug_source = "name"

    def __init__(self) -> None:
        self.records: dict[UUID, Any] = {}

    async def get_by_id(self, record_id: UUID) -> Any:
        return self.records.get(record_id)

    async def get_by_slug(self, slug: str) -> Any:
        return next((r for r in self.records.values() if r.slug == slug), None)

    async def get_many(self, record_ids: Sequence[UUID]) -> list[Any]:
        return [self.records[i] for i in dict.fromkeys(record_ids) if i in self.records]

    async def count_by_ids(self, record_ids: Sequence[UUID]) -> int:
        return sum(1 for i in set(record_ids) if i in self.records)

    async def slug_exists(self, slug: str, exclude_id: UUID | None = None) -> bool:
        return any(r.slug == slug and r.id != exclude_id for r in self.records.values())

    async def add(self, record: Any) -> Any:
        if await self.slug_exists(record.slug, exclude_id=record.id):
            raise DuplicateSlugError(self.entity_name, self.slug_source)
        self.records[record.id] = record
        return record

    async def delete(self, record: Any) -> None:
        self.records.pop(record.id, None)


class InMemoryTagRepository(InMemoryRepository):
    entity_name = "Tag"

    async def list_all(self) -> list[TagDB]:
        return sorted(self.records.values(), key=lambda t: t.name)


class InMemoryCategoryRepository(InMemoryRepository):
    entity_name = "Category"

    async def list_all(self) -> list[CategoryDB]:
        return sorted(self.records.values(), key=lambda c: c.name)

    async def has_children(self, category_id: UUID) -> bool:
        return any(c.parent_id == category_id for c in self.records.values())

    async def get_parent_id(self, category_id: UUID) -> UUID | None:
        category = self.records.get(category_id)
        return category.parent_id if category is not None else None


def _newest_first(posts: list[BlogPostDB]) -> list[BlogPostDB]:
    oldest = datetime.min
    return sorted(
        posts,
        key=lambda p: (
            (p.published_at.replace(tzinfo=None) if p.published_at else oldest),
            p.created_at.replace(tzinfo=None),
        ),
        reverse=True,
    )


class InMemoryBlogRepository(InMemoryRepository):
    entity_name = "Blog"
    slug_source = "title"

    def _published(self) -> list[BlogPostDB]:
        return [p for p in self.records.values() if p.status == PUBLISHED]

    async def list_published(self) -> list[BlogPostDB]:
        return _newest_first(self._published())

    async def get_published(
        self,
        *,
        post_id: UUID | None = None,
        slug: str | None = None,
    ) -> BlogPostDB | None:
        for post in self._published():
            if (post_id is not None and post.id == post_id) or (
                post_id is None and post.slug == slug
            ):
                return post
        return None

    async def search(self, phrase: str, limit: int) -> list[BlogPostDB]:
        needle = phrase.lower()
        hits = [p for p in self._published() if needle in f"{p.title} {p.excerpt}".lower()]
        return _newest_first(hits)[:limit]

    async def find_by_tags(self, tag_ids: list[UUID]) -> list[BlogPostDB]:
        wanted = {str(t) for t in tag_ids}
        return _newest_first([p for p in self._published() if wanted & set(p.tags)])

    async def find_by_categories(self, category_ids: list[UUID]) -> list[BlogPostDB]:
        wanted = {str(c) for c in category_ids}
        return _newest_first([p for p in self._published() if wanted & set(p.categories)])

    async def count_referencing_category(self, category_id: UUID) -> int:
        return sum(1 for p in self.records.values() if str(category_id) in p.categories)

    async def count_referencing_tag(self, tag_id: UUID) -> int:
        return sum(1 for p in self.records.values() if str(tag_id) in p.tags)


@fixture
def admin_password() -> str:
    """Plaintext password matching ADMIN_HASHED_PASSWORD."""
    return ADMIN_PASSWORD


@fixture
def admin_identity() -> AdminIdentity:
    """Admin identity as built from the test environment."""
    return AdminIdentity(
        id="admin",
        email=ADMIN_EMAIL,
        password_hash=os.environ["ADMIN_HASHED_PASSWORD"],
    )


@fixture
async def memory_client() -> AsyncGenerator[MemoryClient]:
    """In-memory key-value client with its cleanup task running."""
    client = MemoryClient(cleanup_interval=1)
    await client.start_lifecycle()
    yield client
    await client.stop_lifecycle()


@fixture
def session_store(memory_client: MemoryClient) -> SessionStore:
    return SessionStore(memory_client)


@fixture
def tag_repo() -> InMemoryTagRepository:
    return InMemoryTagRepository()


@fixture
def category_repo() -> InMemoryCategoryRepository:
    return InMemoryCategoryRepository()


@fixture
def blog_repo() -> InMemoryBlogRepository:
    return InMemoryBlogRepository()


@fixture
def guard(
    category_repo: InMemoryCategoryRepository,
    tag_repo: InMemoryTagRepository,
    blog_repo: InMemoryBlogRepository,
) -> ReferenceIntegrityGuard:
    return ReferenceIntegrityGuard(category_repo, tag_repo, blog_repo)  # type: ignore[arg-type]


@fixture
def tag_service(tag_repo: InMemoryTagRepository, guard: ReferenceIntegrityGuard) -> TagService:
    return TagService(tag_repo, guard)  # type: ignore[arg-type]


@fixture
def category_service(
    category_repo: InMemoryCategoryRepository,
    guard: ReferenceIntegrityGuard,
) -> CategoryService:
    return CategoryService(category_repo, guard)  # type: ignore[arg-type]


@fixture
def blog_service(
    blog_repo: InMemoryBlogRepository,
    category_repo: InMemoryCategoryRepository,
    tag_repo: InMemoryTagRepository,
    guard: ReferenceIntegrityGuard,
) -> BlogService:
    return BlogService(blog_repo, category_repo, tag_repo, guard)  # type: ignore[arg-type]
