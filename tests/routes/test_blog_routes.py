"""End-to-end tests for the content routes."""

from typing import Any

from httpx import AsyncClient
from pytest import fixture, mark

CONTENT = {"type": "root", "children": [{"type": "paragraph", "children": []}]}


def post_body(title: str, **fields: Any) -> dict[str, Any]:
    return {
        "title": title,
        "excerpt": fields.pop("excerpt", "Models and more"),
        "content": CONTENT,
        "author": {"id": "a1", "name": "Ann", "username": "ann", "avatarUrl": "https://x/a.png"},
        **fields,
    }


@fixture
async def taxonomy(client: AsyncClient, auth_headers: dict[str, str]) -> dict[str, str]:
    """Create tag ``AI`` and category ``Tech`` and return their ids."""
    tag = await client.post("/api/tags", json={"name": "AI"}, headers=auth_headers)
    category = await client.post("/api/categories", json={"name": "Tech"}, headers=auth_headers)
    assert tag.status_code == 201
    assert category.status_code == 201
    return {"tag": tag.json()["data"]["id"], "category": category.json()["data"]["id"]}


class TestBlogLifecycle:
    """Test the draft to published flow through the public endpoints."""

    @mark.asyncio
    async def test_publish_flow(
        self,
        client: AsyncClient,
        auth_headers: dict[str, str],
        taxonomy: dict[str, str],
    ) -> None:
        created = await client.post(
            "/api/blogs",
            json=post_body("Hello AI", categories=[taxonomy["category"]], tags=[taxonomy["tag"]]),
            headers=auth_headers,
        )
        assert created.status_code == 201
        post = created.json()["data"]
        assert post["slug"] == "hello-ai"
        assert post["status"] == "draft"
        assert post["publishedAt"] is None

        listed = await client.get("/api/blogs")
        assert listed.json()["data"] == []
        hidden = await client.get("/api/blogs/hello-ai")
        assert hidden.status_code == 404

        published = await client.patch(
            f"/api/blogs/{post['id']}",
            json={"status": "published"},
            headers=auth_headers,
        )
        assert published.status_code == 200
        assert published.json()["data"]["publishedAt"] is not None

        listed = (await client.get("/api/blogs")).json()["data"]
        assert [p["slug"] for p in listed] == ["hello-ai"]
        assert listed[0]["categories"] == [
            {"id": taxonomy["category"], "name": "Tech", "slug": "tech"},
        ]
        assert listed[0]["tags"][0]["name"] == "AI"
        assert "content" not in listed[0]

        single = (await client.get("/api/blogs/hello-ai")).json()["data"]
        assert single["content"] == CONTENT
        assert single["author"]["avatarUrl"] == "https://x/a.png"

        by_id = await client.get(f"/api/blogs/{post['id']}")
        assert by_id.json()["data"]["slug"] == "hello-ai"

        by_tag = (await client.get("/api/blogs/tags", params={"tagIds": taxonomy["tag"]})).json()
        assert [p["slug"] for p in by_tag["data"]] == ["hello-ai"]

        by_category = await client.get(
            "/api/blogs/categories",
            params={"categoryIds": taxonomy["category"]},
        )
        assert len(by_category.json()["data"]) == 1

        found = (await client.get("/api/blogs/search", params={"query": "hello"})).json()
        assert [p["slug"] for p in found["data"]] == ["hello-ai"]

    @mark.asyncio
    async def test_referenced_taxonomy_cannot_be_deleted(
        self,
        client: AsyncClient,
        auth_headers: dict[str, str],
        taxonomy: dict[str, str],
    ) -> None:
        created = await client.post(
            "/api/blogs",
            json=post_body("Pinned", tags=[taxonomy["tag"]], categories=[taxonomy["category"]]),
            headers=auth_headers,
        )
        post_id = created.json()["data"]["id"]

        tag = await client.delete(f"/api/tags/{taxonomy['tag']}", headers=auth_headers)
        assert tag.status_code == 400
        assert tag.json()["error"] == "Cannot delete tag used in blog posts"

        category = await client.delete(
            f"/api/categories/{taxonomy['category']}",
            headers=auth_headers,
        )
        assert category.status_code == 400

        deleted = await client.delete(f"/api/blogs/{post_id}", headers=auth_headers)
        assert deleted.json() == {"success": True, "message": "Blog deleted successfully"}

        tag = await client.delete(f"/api/tags/{taxonomy['tag']}", headers=auth_headers)
        assert tag.json() == {"success": True, "message": "Tag deleted successfully"}


class TestBlogErrors:
    """Test error envelopes on the blog routes."""

    @mark.asyncio
    async def test_dangling_reference(self, client: AsyncClient, auth_headers: dict[str, str]) -> None:
        response = await client.post(
            "/api/blogs",
            json=post_body("Orphan", tags=["00000000-0000-0000-0000-000000000001"]),
            headers=auth_headers,
        )

        assert response.status_code == 400
        assert response.json() == {"success": False, "error": "One or more tags not found"}

    @mark.asyncio
    async def test_duplicate_title(self, client: AsyncClient, auth_headers: dict[str, str]) -> None:
        await client.post("/api/blogs", json=post_body("Same"), headers=auth_headers)

        response = await client.post("/api/blogs", json=post_body("same"), headers=auth_headers)

        assert response.status_code == 400
        assert response.json()["error"] == "Blog with this title already exists"

    @mark.asyncio
    async def test_content_update_rejected(
        self,
        client: AsyncClient,
        auth_headers: dict[str, str],
    ) -> None:
        created = await client.post("/api/blogs", json=post_body("Fixed"), headers=auth_headers)
        post_id = created.json()["data"]["id"]

        response = await client.patch(
            f"/api/blogs/{post_id}",
            json={"content": CONTENT},
            headers=auth_headers,
        )

        assert response.status_code == 400
        assert response.json()["details"][0]["field"] == "content"

    @mark.asyncio
    async def test_bad_filter_ids(self, client: AsyncClient) -> None:
        response = await client.get("/api/blogs/tags", params={"tagIds": "nope"})

        assert response.status_code == 400
        assert response.json()["details"] == [
            {"field": "tagIds", "message": "'nope' is not a valid id"},
        ]

    @mark.asyncio
    async def test_search_requires_query(self, client: AsyncClient) -> None:
        response = await client.get("/api/blogs/search")

        assert response.status_code == 400

    @mark.asyncio
    async def test_unknown_post(self, client: AsyncClient) -> None:
        response = await client.get("/api/blogs/missing")

        assert response.status_code == 404
        assert response.json() == {"success": False, "error": "Blog not found"}


class TestCategoryRoutes:
    """Test the category hierarchy over HTTP."""

    @mark.asyncio
    async def test_parent_resolution_and_detach(
        self,
        client: AsyncClient,
        auth_headers: dict[str, str],
    ) -> None:
        parent = await client.post("/api/categories", json={"name": "Tech"}, headers=auth_headers)
        parent_id = parent.json()["data"]["id"]

        child = await client.post(
            "/api/categories",
            json={"name": "Machine Learning", "parentId": parent_id},
            headers=auth_headers,
        )
        child_data = child.json()["data"]
        assert child_data["slug"] == "machine-learning"
        assert child_data["parent"] == {"id": parent_id, "name": "Tech", "slug": "tech"}

        blocked = await client.delete(f"/api/categories/{parent_id}", headers=auth_headers)
        assert blocked.json()["error"] == "Cannot delete category with subcategories"

        detached = await client.patch(
            f"/api/categories/{child_data['id']}",
            json={"parentId": None},
            headers=auth_headers,
        )
        assert detached.json()["data"]["parentId"] is None

        deleted = await client.delete(f"/api/categories/{parent_id}", headers=auth_headers)
        assert deleted.status_code == 200

        fetched = await client.get("/api/categories/machine-learning")
        assert fetched.json()["data"]["parent"] is None
