"""Blog post database model using SQLModel."""

from datetime import datetime
from typing import Any, cast
from uuid import UUID, uuid4

from sqlalchemy import DateTime, Index, Text, literal_column, text
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import declared_attr
from sqlmodel import Column, Field, SQLModel, String

from blog_cms.configs.settings import MAX_TITLE_LENGTH
from blog_cms.utils.helpers import utc_now

# Text search configuration, rendered as a literal so Postgres resolves it as regconfig
SEARCH_CONFIG = literal_column("'english'")


class BlogPostDB(SQLModel, table=True):
    """
    Blog post database model for PostgreSQL.

    ``content``, ``author`` and ``meta`` are embedded JSONB documents.
    ``categories`` and ``tags`` hold referenced ids as JSONB string arrays
    resolved at read time. ``meta`` maps to the ``metadata`` column because
    the attribute name is reserved on declarative models.
    """

    __tablename__ = cast("declared_attr[str]", "blog_posts")

    __table_args__ = (
        Index("ix_blog_posts_categories_gin", "categories", postgresql_using="gin"),
        Index("ix_blog_posts_tags_gin", "tags", postgresql_using="gin"),
        Index("ix_blog_posts_status_published", "status", "published_at"),
        Index(
            "ix_blog_posts_search_gin",
            text("to_tsvector('english', title || ' ' || excerpt)"),
            postgresql_using="gin",
        ),
    )

    id: UUID = Field(
        default_factory=uuid4,
        primary_key=True,
        nullable=False,
        description="Blog post ID",
    )
    title: str = Field(
        sa_column=Column(String(MAX_TITLE_LENGTH), nullable=False),
        description="Blog title",
    )
    slug: str = Field(
        sa_column=Column(String(MAX_TITLE_LENGTH), unique=True, nullable=False, index=True),
        description="URL-friendly slug derived from the title (unique)",
    )
    excerpt: str = Field(
        sa_column=Column(Text, nullable=False),
        description="Short summary shown in listings",
    )
    content: dict[str, Any] = Field(
        sa_column=Column(JSONB, nullable=False),
        description="Structured document tree with a 'root' node",
    )
    author: dict[str, Any] = Field(
        sa_column=Column(JSONB, nullable=False),
        description="Author snapshot taken at creation",
    )
    categories: list[str] = Field(
        default_factory=list,
        sa_column=Column(JSONB, nullable=False),
        description="Referenced category ids",
    )
    tags: list[str] = Field(
        default_factory=list,
        sa_column=Column(JSONB, nullable=False),
        description="Referenced tag ids",
    )
    meta: dict[str, Any] = Field(
        default_factory=dict,
        sa_column=Column("metadata", JSONB, nullable=False),
        description="SEO and reading metadata",
    )
    status: str = Field(
        default="draft",
        sa_column=Column(String(20), nullable=False, index=True),
        description="Post status (draft, published, archived)",
    )
    created_at: datetime = Field(
        default_factory=utc_now,
        sa_column=Column(DateTime(timezone=True), nullable=False),
        description="Creation timestamp",
    )
    updated_at: datetime = Field(
        default_factory=utc_now,
        sa_column=Column(DateTime(timezone=True), nullable=False),
        description="Last update timestamp",
    )
    published_at: datetime | None = Field(
        default=None,
        sa_column=Column(DateTime(timezone=True), nullable=True, index=True),
        description="First publication timestamp",
    )
