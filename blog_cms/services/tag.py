"""Tag service."""

from logging import getLogger
from uuid import UUID

from blog_cms.configs import file_logger
from blog_cms.errors.content import DuplicateSlugError, NotFoundError
from blog_cms.models.tag import TagDB
from blog_cms.repositories.tag import TagRepository
from blog_cms.schemas.tag import TagCreate, TagResponse, TagUpdate
from blog_cms.services.integrity import ReferenceIntegrityGuard
from blog_cms.services.slugs import derive_slug
from blog_cms.utils.helpers import parse_uuid, utc_now

logger = file_logger(getLogger(__name__))


def to_response(tag: TagDB) -> TagResponse:
    return TagResponse(
        id=tag.id,
        name=tag.name,
        slug=tag.slug,
        created_at=tag.created_at,
        updated_at=tag.updated_at,
    )


class TagService:
    """Create, rename, delete and look up tags."""

    def __init__(self, repo: TagRepository, guard: ReferenceIntegrityGuard) -> None:
        self.repo = repo
        self.guard = guard

    async def _get_or_404(self, tag_id: UUID) -> TagDB:
        tag = await self.repo.get_by_id(tag_id)
        if tag is None:
            raise NotFoundError("Tag")
        return tag

    async def create(self, body: TagCreate) -> TagResponse:
        """
        Create a tag with a slug derived from its name.

        Raises:
            ValidationError: If the name yields an empty slug
            DuplicateSlugError: If another tag already owns the slug
        """
        slug = derive_slug(body.name)
        if await self.repo.slug_exists(slug):
            raise DuplicateSlugError("Tag", "name")

        tag = await self.repo.add(TagDB(name=body.name, slug=slug))
        logger.info(f"Tag created: {tag.slug}")
        return to_response(tag)

    async def update(self, tag_id: UUID, body: TagUpdate) -> TagResponse:
        """
        Rename a tag; the slug follows the name.

        Raises:
            NotFoundError: If the tag does not exist
            DuplicateSlugError: If the new slug belongs to another tag
        """
        tag = await self._get_or_404(tag_id)

        if body.name is not None:
            slug = derive_slug(body.name)
            if await self.repo.slug_exists(slug, exclude_id=tag.id):
                raise DuplicateSlugError("Tag", "name")
            tag.name = body.name
            tag.slug = slug

        tag.updated_at = utc_now()
        tag = await self.repo.add(tag)
        logger.info(f"Tag updated: {tag.slug}")
        return to_response(tag)

    async def delete(self, tag_id: UUID) -> None:
        """
        Delete a tag no post references.

        Raises:
            NotFoundError: If the tag does not exist
            TagInUseError: If any post references it
        """
        tag = await self._get_or_404(tag_id)
        await self.guard.assert_tag_deletable(tag.id)
        await self.repo.delete(tag)
        logger.info(f"Tag deleted: {tag.slug}")

    async def list_all(self) -> list[TagResponse]:
        return [to_response(tag) for tag in await self.repo.list_all()]

    async def get(self, id_or_slug: str) -> TagResponse:
        """
        Look up a tag by id, falling back to slug.

        Raises:
            NotFoundError: If neither lookup matches
        """
        tag = None
        if (tag_id := parse_uuid(id_or_slug)) is not None:
            tag = await self.repo.get_by_id(tag_id)
        if tag is None:
            tag = await self.repo.get_by_slug(id_or_slug)
        if tag is None:
            raise NotFoundError("Tag")
        return to_response(tag)
