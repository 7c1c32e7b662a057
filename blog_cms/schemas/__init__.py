from blog_cms.schemas.auth import (
    AccessClaims,
    AdminIdentity,
    LoginRequest,
    RefreshTokenRequest,
    TokenPair,
    TokenResponse,
)
from blog_cms.schemas.blog import (
    AuthorInput,
    AuthorSnapshot,
    BlogCreate,
    BlogMetadata,
    BlogResponse,
    BlogSummaryResponse,
    BlogUpdate,
    PostStatus,
)
from blog_cms.schemas.category import CategoryCreate, CategoryResponse, CategoryUpdate
from blog_cms.schemas.common import (
    DataResponse,
    ErrorResponse,
    HealthCheckResponse,
    MessageResponse,
    RefSummary,
)
from blog_cms.schemas.tag import TagCreate, TagResponse, TagUpdate

__all__ = [
    "AccessClaims",
    "AdminIdentity",
    "LoginRequest",
    "RefreshTokenRequest",
    "TokenPair",
    "TokenResponse",
    "AuthorInput",
    "AuthorSnapshot",
    "BlogCreate",
    "BlogMetadata",
    "BlogResponse",
    "BlogSummaryResponse",
    "BlogUpdate",
    "PostStatus",
    "CategoryCreate",
    "CategoryResponse",
    "CategoryUpdate",
    "DataResponse",
    "ErrorResponse",
    "HealthCheckResponse",
    "MessageResponse",
    "RefSummary",
    "TagCreate",
    "TagResponse",
    "TagUpdate",
]
