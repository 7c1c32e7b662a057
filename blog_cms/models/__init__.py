"""Database models for the application."""

from blog_cms.models.blog import SEARCH_CONFIG, BlogPostDB
from blog_cms.models.category import CategoryDB
from blog_cms.models.tag import TagDB

__all__ = ["BlogPostDB", "CategoryDB", "TagDB", "SEARCH_CONFIG"]
