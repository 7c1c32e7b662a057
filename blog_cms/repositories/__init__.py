"""Repository layer for database operations."""

from blog_cms.repositories.blog import BlogRepository
from blog_cms.repositories.category import CategoryRepository
from blog_cms.repositories.tag import TagRepository

__all__ = ["BlogRepository", "CategoryRepository", "TagRepository"]
