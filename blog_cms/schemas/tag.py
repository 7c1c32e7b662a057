from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from blog_cms.configs.settings import MAX_NAME_LENGTH


class TagCreate(BaseModel):
    """Tag creation body."""

    model_config = ConfigDict(str_strip_whitespace=True, extra="forbid")

    name: str = Field(..., min_length=1, max_length=MAX_NAME_LENGTH, examples=["AI"])


class TagUpdate(BaseModel):
    """Partial tag update body."""

    model_config = ConfigDict(str_strip_whitespace=True, extra="forbid")

    name: str | None = Field(default=None, min_length=1, max_length=MAX_NAME_LENGTH)


class TagResponse(BaseModel):
    """Tag as returned by the API."""

    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    id: UUID
    name: str
    slug: str
    created_at: datetime = Field(alias="createdAt")
    updated_at: datetime = Field(alias="updatedAt")
