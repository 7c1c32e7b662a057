"""Category routes: admin writes and public lookups."""

from uuid import UUID

from fastapi import APIRouter
from fastapi.responses import ORJSONResponse
from starlette.status import HTTP_201_CREATED

from blog_cms.dependencies import AdminDep, CategoryServiceDep
from blog_cms.schemas import (
    CategoryCreate,
    CategoryResponse,
    CategoryUpdate,
    DataResponse,
    MessageResponse,
)

router = APIRouter(prefix="/categories", tags=["🗂️ Categories"])

CATEGORY_EXAMPLE = {
    "id": "5e0b6f0c-1d2e-4c3b-9a8f-7e6d5c4b3a21",
    "name": "Machine Learning",
    "slug": "machine-learning",
    "description": "Models and training",
    "parentId": "1a2b3c4d-5e6f-4a7b-8c9d-0e1f2a3b4c5d",
    "parent": {"id": "1a2b3c4d-5e6f-4a7b-8c9d-0e1f2a3b4c5d", "name": "Tech", "slug": "tech"},
    "createdAt": "2026-01-01T00:00:00Z",
    "updatedAt": "2026-01-01T00:00:00Z",
}

NOT_FOUND = {
    "description": "Not found",
    "content": {
        "application/json": {"example": {"success": False, "error": "Category not found"}},
    },
}


@router.post(
    "",
    response_class=ORJSONResponse,
    response_model=DataResponse[CategoryResponse],
    status_code=HTTP_201_CREATED,
    summary="Create category",
    responses={
        201: {
            "content": {
                "application/json": {"example": {"success": True, "data": CATEGORY_EXAMPLE}},
            },
        },
        400: {
            "description": "Bad Request",
            "content": {
                "application/json": {
                    "example": {
                        "success": False,
                        "error": "Category with this name already exists",
                    },
                },
            },
        },
    },
    operation_id="categories_create",
)
async def create_category(
    body: CategoryCreate,
    service: CategoryServiceDep,
    admin: AdminDep,
) -> DataResponse[CategoryResponse]:
    """
    Create a category.

    Raises
    ------
    DuplicateSlugError
        If another category already has this name's slug.
    DanglingReferenceError
        If ``parentId`` does not exist.
    """
    return DataResponse(data=await service.create(body))


@router.patch(
    "/{category_id}",
    response_class=ORJSONResponse,
    response_model=DataResponse[CategoryResponse],
    summary="Update category",
    description='Partial update. Send `"parentId": null` to detach from the parent.',
    responses={
        400: {
            "description": "Bad Request",
            "content": {
                "application/json": {
                    "example": {"success": False, "error": "Category cannot be its own ancestor"},
                },
            },
        },
        404: NOT_FOUND,
    },
    operation_id="categories_update",
)
async def update_category(
    category_id: UUID,
    body: CategoryUpdate,
    service: CategoryServiceDep,
    admin: AdminDep,
) -> DataResponse[CategoryResponse]:
    """Update a category."""
    return DataResponse(data=await service.update(category_id, body))


@router.delete(
    "/{category_id}",
    response_class=ORJSONResponse,
    response_model=MessageResponse,
    summary="Delete category",
    responses={
        400: {
            "description": "Bad Request",
            "content": {
                "application/json": {
                    "example": {
                        "success": False,
                        "error": "Cannot delete category used in blog posts",
                    },
                },
            },
        },
        404: NOT_FOUND,
    },
    operation_id="categories_delete",
)
async def delete_category(
    category_id: UUID,
    service: CategoryServiceDep,
    admin: AdminDep,
) -> MessageResponse:
    """
    Delete a category.

    Raises
    ------
    CategoryInUseError
        If a post references the category.
    CategoryHasChildrenError
        If the category has subcategories.
    """
    await service.delete(category_id)
    return MessageResponse(message="Category deleted successfully")


@router.get(
    "",
    response_class=ORJSONResponse,
    response_model=DataResponse[list[CategoryResponse]],
    summary="List categories",
    operation_id="categories_list",
)
async def list_categories(service: CategoryServiceDep) -> DataResponse[list[CategoryResponse]]:
    return DataResponse(data=await service.list_all())


@router.get(
    "/{id_or_slug}",
    response_class=ORJSONResponse,
    response_model=DataResponse[CategoryResponse],
    summary="Get category",
    description="Get a category by id or slug.",
    responses={404: NOT_FOUND},
    operation_id="categories_get",
)
async def get_category(id_or_slug: str, service: CategoryServiceDep) -> DataResponse[CategoryResponse]:
    return DataResponse(data=await service.get(id_or_slug))
