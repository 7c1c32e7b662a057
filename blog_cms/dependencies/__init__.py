# blog_cms/dependencies/__init__.py

from blog_cms.dependencies.dependencies import (
    AdminDep,
    AdminIdentityDep,
    AuthServiceDep,
    BlogRepoDep,
    BlogServiceDep,
    CategoryRepoDep,
    CategoryServiceDep,
    GuardDep,
    SessionDep,
    TagRepoDep,
    TagServiceDep,
    TokenServiceDep,
    get_admin_identity,
    get_auth_service,
    get_blog_repository,
    get_blog_service,
    get_category_repository,
    get_category_service,
    get_current_admin,
    get_integrity_guard,
    get_store,
    get_tag_repository,
    get_tag_service,
    get_token_service,
)

__all__ = [
    "AdminDep",
    "AdminIdentityDep",
    "AuthServiceDep",
    "BlogRepoDep",
    "BlogServiceDep",
    "CategoryRepoDep",
    "CategoryServiceDep",
    "GuardDep",
    "SessionDep",
    "TagRepoDep",
    "TagServiceDep",
    "TokenServiceDep",
    "get_admin_identity",
    "get_auth_service",
    "get_blog_repository",
    "get_blog_service",
    "get_category_repository",
    "get_category_service",
    "get_current_admin",
    "get_integrity_guard",
    "get_store",
    "get_tag_repository",
    "get_tag_service",
    "get_token_service",
]
