# blog_cms/dependencies/dependencies.py

"""Application dependencies: admin identity, services and bearer authentication."""

from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from blog_cms.configs import settings
from blog_cms.db import get_session
from blog_cms.errors.auth import UnauthorizedError
from blog_cms.managers.session_store import SessionStore, get_session_store
from blog_cms.repositories import BlogRepository, CategoryRepository, TagRepository
from blog_cms.schemas.auth import AccessClaims, AdminIdentity
from blog_cms.services import (
    AuthService,
    BlogService,
    CategoryService,
    CredentialVerifier,
    ReferenceIntegrityGuard,
    TagService,
    TokenService,
)

bearer_scheme = HTTPBearer(auto_error=False)


def get_admin_identity() -> AdminIdentity:
    """
    Build the single admin identity from settings.

    Returns
    -------
    AdminIdentity
        Identity whose credentials every login is checked against.
    """
    return AdminIdentity(
        id=settings.ADMIN_ID,
        email=settings.ADMIN_EMAIL,
        password_hash=settings.ADMIN_HASHED_PASSWORD,
    )


AdminIdentityDep = Annotated[AdminIdentity, Depends(get_admin_identity)]


def get_store() -> SessionStore:
    """Resolve the process-wide session store initialized at startup."""
    return get_session_store()


def get_token_service(store: Annotated[SessionStore, Depends(get_store)]) -> TokenService:
    """
    Resolve the `TokenService` dependency.

    Parameters
    ----------
    store : SessionStore
        Session store holding the live refresh token.

    Returns
    -------
    TokenService
        Token service bound to the store.
    """
    return TokenService(store)


TokenServiceDep = Annotated[TokenService, Depends(get_token_service)]


def get_auth_service(identity: AdminIdentityDep, tokens: TokenServiceDep) -> AuthService:
    """Dependency to get AuthService for the configured admin."""
    return AuthService(identity, CredentialVerifier(identity), tokens)


AuthServiceDep = Annotated[AuthService, Depends(get_auth_service)]


async def get_current_admin(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)],
    tokens: TokenServiceDep,
) -> AccessClaims:
    """
    Authenticate the request from its ``Authorization: Bearer`` header.

    Parameters
    ----------
    credentials : HTTPAuthorizationCredentials | None
        Parsed header, None when absent or not a bearer scheme.
    tokens : TokenService
        Token service used to verify the access token.

    Returns
    -------
    AccessClaims
        Verified claims of the access token.

    Raises
    ------
    UnauthorizedError
        If no bearer token was sent.
    TokenExpiredError
        If the token has expired.
    InvalidTokenError
        If the token is malformed or its signature does not verify.
    """
    if credentials is None or not credentials.credentials:
        raise UnauthorizedError
    return tokens.verify_access(credentials.credentials)


AdminDep = Annotated[AccessClaims, Depends(get_current_admin)]

# Function scope: the transaction commits before the response is sent
SessionDep = Annotated[AsyncSession, Depends(get_session, scope="function")]


def get_blog_repository(
    session: SessionDep,
) -> BlogRepository:
    """
    Resolve the `BlogRepository` dependency.

    Parameters
    ----------
    session : AsyncSession
        Database session.

    Returns
    -------
    BlogRepository
        Repository instance bound to the session.
    """
    return BlogRepository(session)


def get_category_repository(
    session: SessionDep,
) -> CategoryRepository:
    """Resolve the `CategoryRepository` dependency."""
    return CategoryRepository(session)


def get_tag_repository(
    session: SessionDep,
) -> TagRepository:
    """Resolve the `TagRepository` dependency."""
    return TagRepository(session)


BlogRepoDep = Annotated[BlogRepository, Depends(get_blog_repository)]
CategoryRepoDep = Annotated[CategoryRepository, Depends(get_category_repository)]
TagRepoDep = Annotated[TagRepository, Depends(get_tag_repository)]


def get_integrity_guard(
    categories: CategoryRepoDep,
    tags: TagRepoDep,
    blogs: BlogRepoDep,
) -> ReferenceIntegrityGuard:
    """Resolve the `ReferenceIntegrityGuard` over the request's repositories."""
    return ReferenceIntegrityGuard(categories, tags, blogs)


GuardDep = Annotated[ReferenceIntegrityGuard, Depends(get_integrity_guard)]


def get_tag_service(repo: TagRepoDep, guard: GuardDep) -> TagService:
    return TagService(repo, guard)


def get_category_service(repo: CategoryRepoDep, guard: GuardDep) -> CategoryService:
    return CategoryService(repo, guard)


def get_blog_service(
    repo: BlogRepoDep,
    categories: CategoryRepoDep,
    tags: TagRepoDep,
    guard: GuardDep,
) -> BlogService:
    """
    Resolve the `BlogService` dependency.

    All repositories share the request's session, so one request is one
    transaction.
    """
    return BlogService(repo, categories, tags, guard)


TagServiceDep = Annotated[TagService, Depends(get_tag_service)]
CategoryServiceDep = Annotated[CategoryService, Depends(get_category_service)]
BlogServiceDep = Annotated[BlogService, Depends(get_blog_service)]
