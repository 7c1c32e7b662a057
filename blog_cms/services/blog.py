"""Blog post service: writes, status transitions and public read paths."""

from collections.abc import Sequence
from logging import getLogger
from typing import Any, cast
from uuid import UUID

from blog_cms.configs import file_logger, settings
from blog_cms.errors.content import (
    DuplicateSlugError,
    InvalidStatusTransitionError,
    NotFoundError,
)
from blog_cms.errors.validation import ValidationError
from blog_cms.models.blog import BlogPostDB
from blog_cms.repositories.blog import BlogRepository
from blog_cms.repositories.category import CategoryRepository
from blog_cms.repositories.tag import TagRepository
from blog_cms.schemas.blog import (
    AuthorSnapshot,
    BlogCreate,
    BlogMetadata,
    BlogResponse,
    BlogSummaryResponse,
    BlogUpdate,
)
from blog_cms.schemas.common import RefSummary
from blog_cms.services.integrity import ReferenceIntegrityGuard
from blog_cms.services.slugs import derive_slug
from blog_cms.utils.helpers import parse_uuid, split_ids, utc_now

logger = file_logger(getLogger(__name__))

ALLOWED_TRANSITIONS: dict[str, frozenset[str]] = {
    "draft": frozenset({"published", "archived"}),
    "published": frozenset({"archived"}),
    "archived": frozenset({"published"}),
}


def check_transition(current: str, target: str) -> None:
    """
    Allow ``current -> target`` when the status machine permits it.

    Same-status changes are no-ops.

    Raises:
        InvalidStatusTransitionError: For any other change
    """
    if current == target:
        return
    if target not in ALLOWED_TRANSITIONS.get(current, frozenset()):
        raise InvalidStatusTransitionError(current, target)


def dump_json(model: Any) -> dict[str, Any]:
    return model.model_dump(mode="json", by_alias=True, exclude_none=True)


def parse_id_list(raw: str, param: str) -> list[UUID]:
    """
    Parse a comma-separated id list from a query parameter.

    Raises:
        ValidationError: If the list is empty or holds a non-UUID entry
    """
    parts = split_ids(raw)
    if not parts:
        raise ValidationError(
            f"{param} is required",
            [{"field": param, "message": "Provide at least one id"}],
        )
    ids = []
    for part in parts:
        parsed = parse_uuid(part)
        if parsed is None:
            raise ValidationError(
                f"Invalid id in {param}",
                [{"field": param, "message": f"'{part}' is not a valid id"}],
            )
        ids.append(parsed)
    return ids


class BlogService:
    """
    Blog post operations.

    Posts store their category and tag references as id lists. Every read
    resolves them to ``{id, name, slug}`` summaries with one batched fetch per
    entity type, skipping ids that no longer resolve.
    """

    def __init__(
        self,
        repo: BlogRepository,
        categories: CategoryRepository,
        tags: TagRepository,
        guard: ReferenceIntegrityGuard,
        search_limit: int | None = None,
    ) -> None:
        self.repo = repo
        self.categories = categories
        self.tags = tags
        self.guard = guard
        self.search_limit = search_limit or settings.SEARCH_RESULT_LIMIT

    async def _get_or_404(self, post_id: UUID) -> BlogPostDB:
        post = await self.repo.get_by_id(post_id)
        if post is None:
            raise NotFoundError("Blog")
        return post

    async def _populate(
        self,
        posts: Sequence[BlogPostDB],
        *,
        with_content: bool = False,
    ) -> list[BlogSummaryResponse]:
        category_ids = {cid for post in posts for cid in post.categories}
        tag_ids = {tid for post in posts for tid in post.tags}

        category_map = {
            str(c.id): RefSummary.model_validate(c)
            for c in await self.categories.get_many(_as_uuids(category_ids))
        }
        tag_map = {
            str(t.id): RefSummary.model_validate(t)
            for t in await self.tags.get_many(_as_uuids(tag_ids))
        }

        responses: list[BlogSummaryResponse] = []
        for post in posts:
            fields: dict[str, Any] = {
                "id": post.id,
                "title": post.title,
                "slug": post.slug,
                "excerpt": post.excerpt,
                "author": AuthorSnapshot.model_validate(post.author),
                "categories": [category_map[c] for c in post.categories if c in category_map],
                "tags": [tag_map[t] for t in post.tags if t in tag_map],
                "meta": BlogMetadata.model_validate(post.meta or {}),
                "status": post.status,
                "created_at": post.created_at,
                "updated_at": post.updated_at,
                "published_at": post.published_at,
            }
            if with_content:
                responses.append(BlogResponse(**fields, content=post.content))
            else:
                responses.append(BlogSummaryResponse(**fields))
        return responses

    async def _to_response(self, post: BlogPostDB) -> BlogResponse:
        responses = await self._populate([post], with_content=True)
        return cast(BlogResponse, responses[0])

    async def create(self, body: BlogCreate) -> BlogResponse:
        """
        Create a post.

        The slug is derived from the title, references are checked before
        anything is written, and the author snapshot is stamped with the
        creation time. ``publishedAt`` is kept only for published posts.

        Raises:
            ValidationError: If the title yields an empty slug
            DuplicateSlugError: If another post already owns the slug
            DanglingReferenceError: If any category or tag id does not exist
        """
        slug = derive_slug(body.title, field="title")
        if await self.repo.slug_exists(slug):
            raise DuplicateSlugError("Blog", "title")

        await self.guard.assert_categories_exist(body.categories)
        await self.guard.assert_tags_exist(body.tags)

        now = utc_now()
        author = AuthorSnapshot(
            **body.author.model_dump(),
            created_at=now,
            updated_at=now,
        )
        published_at = None
        if body.status == "published":
            published_at = body.published_at or now

        post = BlogPostDB(
            title=body.title,
            slug=slug,
            excerpt=body.excerpt,
            content=body.content,
            author=dump_json(author),
            categories=[str(cid) for cid in body.categories],
            tags=[str(tid) for tid in body.tags],
            meta=dump_json(body.meta),
            status=body.status,
            created_at=now,
            updated_at=now,
            published_at=published_at,
        )
        post = await self.repo.add(post)
        logger.info(f"Blog created: {post.slug} ({post.status})")
        return await self._to_response(post)

    async def update(self, post_id: UUID, body: BlogUpdate) -> BlogResponse:
        """
        Apply the fields present in ``body`` to a post.

        ``metadata`` keys are merged into the stored metadata; an explicit
        null removes that key.

        Raises:
            NotFoundError: If the post does not exist
            DuplicateSlugError: If the new title's slug belongs to another post
            DanglingReferenceError: If any new category or tag id does not exist
            InvalidStatusTransitionError: If the status change is not allowed
        """
        post = await self._get_or_404(post_id)
        now = utc_now()

        if body.title is not None:
            slug = derive_slug(body.title, field="title")
            if await self.repo.slug_exists(slug, exclude_id=post.id):
                raise DuplicateSlugError("Blog", "title")
            post.title = body.title
            post.slug = slug

        if body.excerpt is not None:
            post.excerpt = body.excerpt

        if body.categories is not None:
            await self.guard.assert_categories_exist(body.categories)
            post.categories = [str(cid) for cid in body.categories]

        if body.tags is not None:
            await self.guard.assert_tags_exist(body.tags)
            post.tags = [str(tid) for tid in body.tags]

        if body.meta is not None:
            changes = body.meta.model_dump(mode="json", by_alias=True, exclude_unset=True)
            merged = {**(post.meta or {}), **changes}
            post.meta = {key: value for key, value in merged.items() if value is not None}

        if body.status is not None:
            check_transition(post.status, body.status)
            if body.status == "published" and post.published_at is None:
                post.published_at = body.published_at or now
            post.status = body.status

        post.updated_at = now
        post = await self.repo.add(post)
        logger.info(f"Blog updated: {post.slug} ({post.status})")
        return await self._to_response(post)

    async def delete(self, post_id: UUID) -> None:
        """
        Delete a post.

        Raises:
            NotFoundError: If the post does not exist
        """
        post = await self._get_or_404(post_id)
        await self.repo.delete(post)
        logger.info(f"Blog deleted: {post.slug}")

    async def list_published(self) -> list[BlogSummaryResponse]:
        return await self._populate(await self.repo.list_published())

    async def get_published(self, id_or_slug: str) -> BlogResponse:
        """
        Get a published post by id, falling back to slug.

        Raises:
            NotFoundError: If no published post matches
        """
        post = None
        if (post_id := parse_uuid(id_or_slug)) is not None:
            post = await self.repo.get_published(post_id=post_id)
        if post is None:
            post = await self.repo.get_published(slug=id_or_slug)
        if post is None:
            raise NotFoundError("Blog")
        return await self._to_response(post)

    async def search(self, query: str) -> list[BlogSummaryResponse]:
        """
        Phrase search over published posts' title and excerpt.

        Raises:
            ValidationError: If the query is blank
        """
        phrase = " ".join(query.split())
        if not phrase:
            raise ValidationError(
                "Search query is required",
                [{"field": "query", "message": "Must not be blank"}],
            )
        return await self._populate(await self.repo.search(phrase, self.search_limit))

    async def filter_by_tags(self, raw_ids: str) -> list[BlogSummaryResponse]:
        """
        List published posts carrying any of the comma-separated tag ids.

        Raises:
            ValidationError: If the list is empty or malformed
            DanglingReferenceError: If any tag does not exist
        """
        tag_ids = parse_id_list(raw_ids, "tagIds")
        await self.guard.assert_tags_exist(tag_ids)
        return await self._populate(await self.repo.find_by_tags(tag_ids))

    async def filter_by_categories(self, raw_ids: str) -> list[BlogSummaryResponse]:
        """
        List published posts in any of the comma-separated category ids.

        Raises:
            ValidationError: If the list is empty or malformed
            DanglingReferenceError: If any category does not exist
        """
        category_ids = parse_id_list(raw_ids, "categoryIds")
        await self.guard.assert_categories_exist(category_ids)
        return await self._populate(await self.repo.find_by_categories(category_ids))


def _as_uuids(raw_ids: set[str]) -> list[UUID]:
    return [uid for raw in raw_ids if (uid := parse_uuid(raw)) is not None]

