from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from blog_cms.configs.settings import MAX_DESCRIPTION_LENGTH, MAX_NAME_LENGTH
from blog_cms.schemas.common import RefSummary


class CategoryCreate(BaseModel):
    """Category creation body."""

    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True, extra="forbid")

    name: str = Field(..., min_length=1, max_length=MAX_NAME_LENGTH, examples=["Tech"])
    description: str | None = Field(default=None, max_length=MAX_DESCRIPTION_LENGTH)
    parent_id: UUID | None = Field(default=None, alias="parentId")


class CategoryUpdate(BaseModel):
    """
    Partial category update body.

    Only fields present in the body are applied. An explicit ``"parentId": null``
    detaches the category from its parent.
    """

    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True, extra="forbid")

    name: str | None = Field(default=None, min_length=1, max_length=MAX_NAME_LENGTH)
    description: str | None = Field(default=None, max_length=MAX_DESCRIPTION_LENGTH)
    parent_id: UUID | None = Field(default=None, alias="parentId")


class CategoryResponse(BaseModel):
    """Category as returned by the API, with its parent resolved."""

    model_config = ConfigDict(populate_by_name=True)

    id: UUID
    name: str
    slug: str
    description: str | None = None
    parent_id: UUID | None = Field(default=None, alias="parentId")
    parent: RefSummary | None = None
    created_at: datetime = Field(alias="createdAt")
    updated_at: datetime = Field(alias="updatedAt")
