"""
Blog post schemas.

Request bodies validate shape only; slug derivation, reference checks and
status transitions are applied by the blog service. ``content`` is an opaque
document tree whose top-level node must be tagged ``root``.
"""

from datetime import datetime
from typing import Any, Literal
from uuid import UUID

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

from blog_cms.configs.settings import MAX_EXCERPT_LENGTH, MAX_NAME_LENGTH, MAX_TITLE_LENGTH
from blog_cms.schemas.common import RefSummary

PostStatus = Literal["draft", "published", "archived"]

ROOT_NODE_TYPE = "root"


class SocialLinks(BaseModel):
    """Author social profile links."""

    twitter: str | None = None
    github: str | None = None
    linkedin: str | None = None
    website: str | None = None


class AuthorInput(BaseModel):
    """Author snapshot as supplied on post creation."""

    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True)

    id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1, max_length=MAX_NAME_LENGTH)
    username: str = Field(..., min_length=1, max_length=MAX_NAME_LENGTH)
    email: EmailStr | None = None
    avatar_url: str | None = Field(default=None, alias="avatarUrl")
    bio: str | None = Field(default=None, max_length=500)
    social: SocialLinks | None = None


class AuthorSnapshot(AuthorInput):
    """Author snapshot as stored on the post, stamped at creation."""

    created_at: datetime = Field(alias="createdAt")
    updated_at: datetime = Field(alias="updatedAt")


class BlogMetadata(BaseModel):
    """SEO and reading metadata. Every key is optional."""

    model_config = ConfigDict(populate_by_name=True)

    title: str | None = None
    description: str | None = None
    keywords: list[str] | None = None
    cover_image: str | None = Field(default=None, alias="coverImage")
    og_image: str | None = Field(default=None, alias="ogImage")
    canonical_url: str | None = Field(default=None, alias="canonicalUrl")
    reading_time_minutes: int | None = Field(default=None, ge=0, alias="readingTimeMinutes")
    word_count: int | None = Field(default=None, ge=0, alias="wordCount")
    language: str | None = None


def check_root_node(content: dict[str, Any]) -> dict[str, Any]:
    """Accept a document tree only when its top-level node is ``root``."""
    if content.get("type") != ROOT_NODE_TYPE:
        mssg = "Content must be a document tree with a 'root' node"
        raise ValueError(mssg)
    children = content.get("children", [])
    if not isinstance(children, list):
        mssg = "Content 'children' must be a list"
        raise ValueError(mssg)
    return content


class BlogCreate(BaseModel):
    """Blog creation body (slug and timestamps are derived server-side)."""

    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True, extra="forbid")

    title: str = Field(..., min_length=1, max_length=MAX_TITLE_LENGTH, examples=["Hello AI"])
    excerpt: str = Field(..., min_length=1, max_length=MAX_EXCERPT_LENGTH)
    content: dict[str, Any] = Field(
        ...,
        examples=[{"type": "root", "children": [{"type": "paragraph", "children": []}]}],
    )
    author: AuthorInput
    categories: list[UUID] = Field(default_factory=list)
    tags: list[UUID] = Field(default_factory=list)
    meta: BlogMetadata = Field(default_factory=BlogMetadata, alias="metadata")
    status: PostStatus = "draft"
    published_at: datetime | None = Field(default=None, alias="publishedAt")

    @field_validator("content")
    @classmethod
    def validate_content(cls, value: dict[str, Any]) -> dict[str, Any]:
        return check_root_node(value)


class BlogUpdate(BaseModel):
    """
    Partial blog update body.

    ``content`` and ``author`` are immutable after creation and rejected here.
    ``metadata`` is merged key by key into the stored metadata.
    """

    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True, extra="forbid")

    title: str | None = Field(default=None, min_length=1, max_length=MAX_TITLE_LENGTH)
    excerpt: str | None = Field(default=None, min_length=1, max_length=MAX_EXCERPT_LENGTH)
    categories: list[UUID] | None = None
    tags: list[UUID] | None = None
    meta: BlogMetadata | None = Field(default=None, alias="metadata")
    status: PostStatus | None = None
    published_at: datetime | None = Field(default=None, alias="publishedAt")


class BlogSummaryResponse(BaseModel):
    """Blog post as listed: references resolved, content omitted."""

    model_config = ConfigDict(populate_by_name=True)

    id: UUID
    title: str
    slug: str
    excerpt: str
    author: AuthorSnapshot
    categories: list[RefSummary]
    tags: list[RefSummary]
    meta: BlogMetadata = Field(alias="metadata")
    status: PostStatus
    created_at: datetime = Field(alias="createdAt")
    updated_at: datetime = Field(alias="updatedAt")
    published_at: datetime | None = Field(default=None, alias="publishedAt")


class BlogResponse(BlogSummaryResponse):
    """Single blog post including its content tree."""

    content: dict[str, Any]
