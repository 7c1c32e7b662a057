# tests/routes/conftest.py
"""Pytest fixtures for route tests."""

from collections.abc import AsyncGenerator

from httpx import ASGITransport, AsyncClient
from pytest import fixture

from blog_cms.dependencies import (
    get_blog_repository,
    get_category_repository,
    get_store,
    get_tag_repository,
)
from blog_cms.main import app
from blog_cms.managers.rate_limiter import limiter
from blog_cms.managers.session_store import SessionStore


@fixture
async def client(
    session_store: SessionStore,
    blog_repo,
    category_repo,
    tag_repo,
) -> AsyncGenerator[AsyncClient]:
    """HTTP client bound to the app with in-memory repositories and sessions."""
    limiter.enabled = False
    app.dependency_overrides[get_store] = lambda: session_store
    app.dependency_overrides[get_blog_repository] = lambda: blog_repo
    app.dependency_overrides[get_category_repository] = lambda: category_repo
    app.dependency_overrides[get_tag_repository] = lambda: tag_repo

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()
    limiter.enabled = True


@fixture
async def tokens(client: AsyncClient, admin_password: str) -> dict[str, str]:
    """Log in as the admin and return the token pair."""
    response = await client.post(
        "/api/auth/login",
        json={"email": "admin@example.com", "password": admin_password},
    )
    assert response.status_code == 200
    return response.json()


@fixture
def auth_headers(tokens: dict[str, str]) -> dict[str, str]:
    """Create auth headers with a valid access token."""
    return {"Authorization": f"Bearer {tokens['accessToken']}"}
