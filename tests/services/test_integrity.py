"""Tests for the reference integrity guard."""

from collections.abc import Sequence
from uuid import uuid4

from pytest import mark, raises

from blog_cms.errors.content import (
    CategoryCycleError,
    CategoryHasChildrenError,
    CategoryInUseError,
    DanglingReferenceError,
    TagInUseError,
)
from blog_cms.models import BlogPostDB, CategoryDB, TagDB
from blog_cms.services import ReferenceIntegrityGuard


def make_category(repo, name: str, parent: CategoryDB | None = None) -> CategoryDB:
    category = CategoryDB(name=name, slug=name.lower(), parent_id=parent.id if parent else None)
    repo.records[category.id] = category
    return category


def make_post(
    repo,
    *,
    categories: Sequence[CategoryDB] = (),
    tags: Sequence[TagDB] = (),
) -> BlogPostDB:
    post = BlogPostDB(
        title="Post",
        slug=f"post-{uuid4().hex[:8]}",
        excerpt="Excerpt",
        content={"type": "root", "children": []},
        author={"id": "a", "name": "A", "username": "a"},
        categories=[str(c.id) for c in categories],
        tags=[str(t.id) for t in tags],
    )
    repo.records[post.id] = post
    return post


class TestReferenceChecks:
    """Test cases for existence checks on referenced ids."""

    @mark.asyncio
    async def test_empty_lists_pass(self, guard: ReferenceIntegrityGuard) -> None:
        """Test that no references means nothing to check."""
        await guard.assert_categories_exist([])
        await guard.assert_tags_exist([])

    @mark.asyncio
    async def test_existing_ids_pass(self, guard: ReferenceIntegrityGuard, category_repo) -> None:
        """Test that known ids are accepted."""
        tech = make_category(category_repo, "Tech")

        await guard.assert_categories_exist([tech.id])

    @mark.asyncio
    async def test_unknown_category(self, guard: ReferenceIntegrityGuard, category_repo) -> None:
        """Test that one unknown id fails the whole list."""
        tech = make_category(category_repo, "Tech")

        with raises(DanglingReferenceError, match="One or more categories not found"):
            await guard.assert_categories_exist([tech.id, uuid4()])

    @mark.asyncio
    async def test_unknown_tag(self, guard: ReferenceIntegrityGuard) -> None:
        """Test that an unknown tag id is rejected."""
        with raises(DanglingReferenceError, match="One or more tags not found"):
            await guard.assert_tags_exist([uuid4()])

    @mark.asyncio
    async def test_duplicate_ids_fail(self, guard: ReferenceIntegrityGuard, tag_repo) -> None:
        """Test that a repeated id is treated as a dangling reference."""
        tag = TagDB(name="AI", slug="ai")
        tag_repo.records[tag.id] = tag

        with raises(DanglingReferenceError):
            await guard.assert_tags_exist([tag.id, tag.id])


class TestDeletionChecks:
    """Test cases for deletion guards."""

    @mark.asyncio
    async def test_category_in_use(
        self,
        guard: ReferenceIntegrityGuard,
        category_repo,
        blog_repo,
    ) -> None:
        """Test that a category referenced by any post cannot be deleted."""
        tech = make_category(category_repo, "Tech")
        make_post(blog_repo, categories=[tech])

        with raises(CategoryInUseError):
            await guard.assert_category_deletable(tech.id)

    @mark.asyncio
    async def test_category_with_children(self, guard: ReferenceIntegrityGuard, category_repo) -> None:
        """Test that a parent category cannot be deleted."""
        tech = make_category(category_repo, "Tech")
        make_category(category_repo, "ML", parent=tech)

        with raises(CategoryHasChildrenError):
            await guard.assert_category_deletable(tech.id)

    @mark.asyncio
    async def test_tag_in_use(self, guard: ReferenceIntegrityGuard, tag_repo, blog_repo) -> None:
        """Test that a tag referenced by a draft post cannot be deleted."""
        tag = TagDB(name="AI", slug="ai")
        tag_repo.records[tag.id] = tag
        post = make_post(blog_repo, tags=[tag])
        post.status = "draft"

        with raises(TagInUseError):
            await guard.assert_tag_deletable(tag.id)

    @mark.asyncio
    async def test_unreferenced_pass(self, guard: ReferenceIntegrityGuard, category_repo) -> None:
        """Test that unreferenced leaf entities are deletable."""
        tech = make_category(category_repo, "Tech")

        await guard.assert_category_deletable(tech.id)
        await guard.assert_tag_deletable(uuid4())


class TestParentChecks:
    """Test cases for assert_valid_parent."""

    @mark.asyncio
    async def test_missing_parent(self, guard: ReferenceIntegrityGuard) -> None:
        """Test that an unknown parent is a dangling reference."""
        with raises(DanglingReferenceError, match="Parent category not found"):
            await guard.assert_valid_parent(None, uuid4())

    @mark.asyncio
    async def test_self_parent(self, guard: ReferenceIntegrityGuard, category_repo) -> None:
        """Test that a category cannot be its own parent."""
        tech = make_category(category_repo, "Tech")

        with raises(CategoryCycleError):
            await guard.assert_valid_parent(tech.id, tech.id)

    @mark.asyncio
    async def test_descendant_parent(self, guard: ReferenceIntegrityGuard, category_repo) -> None:
        """Test that a grandchild cannot become the parent."""
        tech = make_category(category_repo, "Tech")
        ml = make_category(category_repo, "ML", parent=tech)
        nlp = make_category(category_repo, "NLP", parent=ml)

        with raises(CategoryCycleError):
            await guard.assert_valid_parent(tech.id, nlp.id)

    @mark.asyncio
    async def test_sibling_parent(self, guard: ReferenceIntegrityGuard, category_repo) -> None:
        """Test that moving under an unrelated branch is allowed."""
        tech = make_category(category_repo, "Tech")
        ml = make_category(category_repo, "ML", parent=tech)
        life = make_category(category_repo, "Life")

        await guard.assert_valid_parent(ml.id, life.id)
