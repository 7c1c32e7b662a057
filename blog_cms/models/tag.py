"""Tag database model using SQLModel."""

from datetime import datetime
from typing import cast
from uuid import UUID, uuid4

from sqlalchemy import DateTime
from sqlalchemy.orm import declared_attr
from sqlmodel import Column, Field, SQLModel, String

from blog_cms.configs.settings import MAX_NAME_LENGTH
from blog_cms.utils.helpers import utc_now


class TagDB(SQLModel, table=True):
    """Tag database model. Posts reference tags by id from a JSONB array."""

    __tablename__ = cast("declared_attr[str]", "tags")

    id: UUID = Field(
        default_factory=uuid4,
        primary_key=True,
        nullable=False,
        description="Tag ID",
    )
    name: str = Field(
        sa_column=Column(String(MAX_NAME_LENGTH), nullable=False),
        description="Tag name",
    )
    slug: str = Field(
        sa_column=Column(String(MAX_NAME_LENGTH), unique=True, nullable=False, index=True),
        description="URL-friendly slug derived from the name (unique)",
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
