"""Tag routes: admin writes and public lookups."""

from uuid import UUID

from fastapi import APIRouter
from fastapi.responses import ORJSONResponse
from starlette.status import HTTP_201_CREATED

from blog_cms.dependencies import AdminDep, TagServiceDep
from blog_cms.schemas import DataResponse, MessageResponse, TagCreate, TagResponse, TagUpdate

router = APIRouter(prefix="/tags", tags=["🏷️ Tags"])

TAG_EXAMPLE = {
    "id": "9c1d2e3f-4a5b-4c6d-8e7f-0a1b2c3d4e5f",
    "name": "AI",
    "slug": "ai",
    "createdAt": "2026-01-01T00:00:00Z",
    "updatedAt": "2026-01-01T00:00:00Z",
}

NOT_FOUND = {
    "description": "Not found",
    "content": {"application/json": {"example": {"success": False, "error": "Tag not found"}}},
}


@router.post(
    "",
    response_class=ORJSONResponse,
    response_model=DataResponse[TagResponse],
    status_code=HTTP_201_CREATED,
    summary="Create tag",
    responses={
        201: {"content": {"application/json": {"example": {"success": True, "data": TAG_EXAMPLE}}}},
        400: {
            "description": "Bad Request",
            "content": {
                "application/json": {
                    "example": {"success": False, "error": "Tag with this name already exists"},
                },
            },
        },
    },
    operation_id="tags_create",
)
async def create_tag(body: TagCreate, service: TagServiceDep, admin: AdminDep) -> DataResponse[TagResponse]:
    """
    Create a tag.

    Raises
    ------
    DuplicateSlugError
        If another tag already has this name's slug.
    """
    return DataResponse(data=await service.create(body))


@router.patch(
    "/{tag_id}",
    response_class=ORJSONResponse,
    response_model=DataResponse[TagResponse],
    summary="Rename tag",
    responses={404: NOT_FOUND},
    operation_id="tags_update",
)
async def update_tag(
    tag_id: UUID,
    body: TagUpdate,
    service: TagServiceDep,
    admin: AdminDep,
) -> DataResponse[TagResponse]:
    """Rename a tag; its slug follows the new name."""
    return DataResponse(data=await service.update(tag_id, body))


@router.delete(
    "/{tag_id}",
    response_class=ORJSONResponse,
    response_model=MessageResponse,
    summary="Delete tag",
    responses={
        400: {
            "description": "Bad Request",
            "content": {
                "application/json": {
                    "example": {"success": False, "error": "Cannot delete tag used in blog posts"},
                },
            },
        },
        404: NOT_FOUND,
    },
    operation_id="tags_delete",
)
async def delete_tag(tag_id: UUID, service: TagServiceDep, admin: AdminDep) -> MessageResponse:
    """
    Delete a tag.

    Raises
    ------
    TagInUseError
        If a post references the tag.
    """
    await service.delete(tag_id)
    return MessageResponse(message="Tag deleted successfully")


@router.get(
    "",
    response_class=ORJSONResponse,
    response_model=DataResponse[list[TagResponse]],
    summary="List tags",
    operation_id="tags_list",
)
async def list_tags(service: TagServiceDep) -> DataResponse[list[TagResponse]]:
    return DataResponse(data=await service.list_all())


@router.get(
    "/{id_or_slug}",
    response_class=ORJSONResponse,
    response_model=DataResponse[TagResponse],
    summary="Get tag",
    description="Get a tag by id or slug.",
    responses={404: NOT_FOUND},
    operation_id="tags_get",
)
async def get_tag(id_or_slug: str, service: TagServiceDep) -> DataResponse[TagResponse]:
    return DataResponse(data=await service.get(id_or_slug))
