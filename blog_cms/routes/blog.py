# blog_cms/routes/blog.py

"""
Blog Routes.

Provides admin CRUD endpoints and public read paths for blog posts.

Summary
-------
Endpoints include:
  - Create blog (admin)
  - Update blog (admin)
  - Delete blog (admin)
  - List published blogs
  - Search published blogs
  - Filter published blogs by tags or categories
  - Get published blog by id or slug

Public reads never return drafts or archived posts. List, search and filter
results omit ``content``; the single-post read includes it.
"""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Query
from fastapi.responses import ORJSONResponse
from starlette.status import HTTP_201_CREATED

from blog_cms.dependencies import AdminDep, BlogServiceDep
from blog_cms.schemas import (
    BlogCreate,
    BlogResponse,
    BlogSummaryResponse,
    BlogUpdate,
    DataResponse,
    MessageResponse,
)

router = APIRouter(prefix="/blogs", tags=["📝 Blogs"])

BLOG_EXAMPLE = {
    "id": "0b8f8a5e-8a0f-4bb0-9a6b-2c4a2f0f6d11",
    "title": "Hello AI",
    "slug": "hello-ai",
    "excerpt": "A first look at language models.",
    "author": {"id": "admin", "name": "Admin", "username": "admin"},
    "categories": [{"id": "5e0b...", "name": "Tech", "slug": "tech"}],
    "tags": [{"id": "9c1d...", "name": "AI", "slug": "ai"}],
    "metadata": {"readingTimeMinutes": 4},
    "status": "published",
    "createdAt": "2026-01-01T00:00:00Z",
    "updatedAt": "2026-01-01T00:00:00Z",
    "publishedAt": "2026-01-01T00:00:00Z",
}

NOT_FOUND = {
    "description": "Not found",
    "content": {"application/json": {"example": {"success": False, "error": "Blog not found"}}},
}

UNAUTHORIZED = {
    "description": "Unauthorized",
    "content": {
        "application/json": {
            "example": {"success": False, "error": "Not authorized, no token"},
        },
    },
}


@router.post(
    "",
    response_class=ORJSONResponse,
    response_model=DataResponse[BlogResponse],
    status_code=HTTP_201_CREATED,
    summary="Create blog",
    description="Create a blog post. The slug is derived from the title.",
    responses={
        201: {"content": {"application/json": {"example": {"success": True, "data": BLOG_EXAMPLE}}}},
        400: {
            "description": "Bad Request",
            "content": {
                "application/json": {
                    "example": {"success": False, "error": "One or more categories not found"},
                },
            },
        },
        401: UNAUTHORIZED,
    },
    operation_id="blogs_create",
)
async def create_blog(
    body: BlogCreate,
    service: BlogServiceDep,
    admin: AdminDep,
) -> DataResponse[BlogResponse]:
    """
    Create a blog post.

    Parameters
    ----------
    body : BlogCreate
        Post fields, including the author snapshot and reference ids.
    service : BlogService
        Blog service dependency.
    admin : AccessClaims
        Verified admin claims.

    Returns
    -------
    DataResponse[BlogResponse]
        The created post with references resolved.

    Raises
    ------
    DuplicateSlugError
        If another post already has this title's slug.
    DanglingReferenceError
        If a category or tag id does not exist.
    """
    return DataResponse(data=await service.create(body))


@router.patch(
    "/{post_id}",
    response_class=ORJSONResponse,
    response_model=DataResponse[BlogResponse],
    summary="Update blog",
    description="Apply a partial update. Content and author cannot be changed.",
    responses={
        200: {"content": {"application/json": {"example": {"success": True, "data": BLOG_EXAMPLE}}}},
        400: {
            "description": "Bad Request",
            "content": {
                "application/json": {
                    "example": {
                        "success": False,
                        "error": "Cannot change status from published to draft",
                    },
                },
            },
        },
        401: UNAUTHORIZED,
        404: NOT_FOUND,
    },
    operation_id="blogs_update",
)
async def update_blog(
    post_id: UUID,
    body: BlogUpdate,
    service: BlogServiceDep,
    admin: AdminDep,
) -> DataResponse[BlogResponse]:
    """
    Update a blog post.

    Raises
    ------
    NotFoundError
        If the post does not exist.
    InvalidStatusTransitionError
        If the status change is not allowed.
    """
    return DataResponse(data=await service.update(post_id, body))


@router.delete(
    "/{post_id}",
    response_class=ORJSONResponse,
    response_model=MessageResponse,
    summary="Delete blog",
    responses={
        200: {
            "content": {
                "application/json": {
                    "example": {"success": True, "message": "Blog deleted successfully"},
                },
            },
        },
        401: UNAUTHORIZED,
        404: NOT_FOUND,
    },
    operation_id="blogs_delete",
)
async def delete_blog(post_id: UUID, service: BlogServiceDep, admin: AdminDep) -> MessageResponse:
    """Delete a blog post regardless of its status."""
    await service.delete(post_id)
    return MessageResponse(message="Blog deleted successfully")


@router.get(
    "",
    response_class=ORJSONResponse,
    response_model=DataResponse[list[BlogSummaryResponse]],
    summary="List published blogs",
    description="List published posts, newest publication first, without content.",
    operation_id="blogs_list",
)
async def list_blogs(service: BlogServiceDep) -> DataResponse[list[BlogSummaryResponse]]:
    """List published posts."""
    return DataResponse(data=await service.list_published())


@router.get(
    "/search",
    response_class=ORJSONResponse,
    response_model=DataResponse[list[BlogSummaryResponse]],
    summary="Search blogs",
    description="Phrase search over title and excerpt of published posts.",
    responses={
        400: {
            "description": "Bad Request",
            "content": {
                "application/json": {
                    "example": {"success": False, "error": "Search query is required"},
                },
            },
        },
    },
    operation_id="blogs_search",
)
async def search_blogs(
    query: Annotated[str, Query(min_length=1, max_length=200, description="Search phrase")],
    service: BlogServiceDep,
) -> DataResponse[list[BlogSummaryResponse]]:
    """
    Search published posts.

    Parameters
    ----------
    query : str
        Phrase to match; whitespace is collapsed before searching.
    service : BlogService
        Blog service dependency.

    Returns
    -------
    DataResponse[list[BlogSummaryResponse]]
        Best-ranked matches, most relevant first.
    """
    return DataResponse(data=await service.search(query))


@router.get(
    "/tags",
    response_class=ORJSONResponse,
    response_model=DataResponse[list[BlogSummaryResponse]],
    summary="Filter blogs by tags",
    description="List published posts carrying any of the given tag ids.",
    responses={
        400: {
            "description": "Bad Request",
            "content": {
                "application/json": {
                    "example": {"success": False, "error": "One or more tags not found"},
                },
            },
        },
    },
    operation_id="blogs_by_tags",
)
async def blogs_by_tags(
    service: BlogServiceDep,
    tag_ids: Annotated[str, Query(alias="tagIds", description="Comma-separated tag ids")] = "",
) -> DataResponse[list[BlogSummaryResponse]]:
    """List published posts by tags."""
    return DataResponse(data=await service.filter_by_tags(tag_ids))


@router.get(
    "/categories",
    response_class=ORJSONResponse,
    response_model=DataResponse[list[BlogSummaryResponse]],
    summary="Filter blogs by categories",
    description="List published posts in any of the given category ids.",
    responses={
        400: {
            "description": "Bad Request",
            "content": {
                "application/json": {
                    "example": {"success": False, "error": "One or more categories not found"},
                },
            },
        },
    },
    operation_id="blogs_by_categories",
)
async def blogs_by_categories(
    service: BlogServiceDep,
    category_ids: Annotated[
        str,
        Query(alias="categoryIds", description="Comma-separated category ids"),
    ] = "",
) -> DataResponse[list[BlogSummaryResponse]]:
    """List published posts by categories."""
    return DataResponse(data=await service.filter_by_categories(category_ids))


@router.get(
    "/{id_or_slug}",
    response_class=ORJSONResponse,
    response_model=DataResponse[BlogResponse],
    summary="Get blog",
    description="Get a published post by id or slug, content included.",
    responses={
        200: {"content": {"application/json": {"example": {"success": True, "data": BLOG_EXAMPLE}}}},
        404: NOT_FOUND,
    },
    operation_id="blogs_get",
)
async def get_blog(id_or_slug: str, service: BlogServiceDep) -> DataResponse[BlogResponse]:
    """
    Get a published post.

    An identifier that parses as a UUID is tried as an id first, then as a slug.

    Raises
    ------
    NotFoundError
        If no published post matches.
    """
    return DataResponse(data=await service.get_published(id_or_slug))
