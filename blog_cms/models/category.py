"""Category database model using SQLModel."""

from datetime import datetime
from typing import cast
from uuid import UUID, uuid4

from sqlalchemy import DateTime, Uuid
from sqlalchemy.orm import declared_attr
from sqlmodel import Column, Field, SQLModel, String

from blog_cms.configs.settings import MAX_DESCRIPTION_LENGTH, MAX_NAME_LENGTH
from blog_cms.utils.helpers import utc_now


class CategoryDB(SQLModel, table=True):
    """
    Category database model.

    Categories form a forest through ``parent_id``. The column carries no
    foreign key: parent existence and deletion of parents are checked by
    the reference integrity guard before any write.
    """

    __tablename__ = cast("declared_attr[str]", "categories")

    id: UUID = Field(
        default_factory=uuid4,
        primary_key=True,
        nullable=False,
        description="Category ID",
    )
    name: str = Field(
        sa_column=Column(String(MAX_NAME_LENGTH), nullable=False),
        description="Category name",
    )
    slug: str = Field(
        sa_column=Column(String(MAX_NAME_LENGTH), unique=True, nullable=False, index=True),
        description="URL-friendly slug derived from the name (unique)",
    )
    description: str | None = Field(
        default=None,
        sa_column=Column(String(MAX_DESCRIPTION_LENGTH)),
        description="Optional description",
    )
    parent_id: UUID | None = Field(
        default=None,
        sa_column=Column(Uuid, nullable=True, index=True),
        description="Parent category ID",
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
