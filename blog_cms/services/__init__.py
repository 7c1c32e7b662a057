"""Service layer for business logic."""

from blog_cms.services.auth import AuthService
from blog_cms.services.blog import BlogService
from blog_cms.services.category import CategoryService
from blog_cms.services.credentials import CredentialVerifier
from blog_cms.services.integrity import ReferenceIntegrityGuard
from blog_cms.services.tag import TagService
from blog_cms.services.token_service import TokenService

__all__ = [
    "AuthService",
    "BlogService",
    "CategoryService",
    "CredentialVerifier",
    "ReferenceIntegrityGuard",
    "TagService",
    "TokenService",
]
