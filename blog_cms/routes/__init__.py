from blog_cms.routes.auth import router as auth_router
from blog_cms.routes.blog import router as blog_router
from blog_cms.routes.category import router as category_router
from blog_cms.routes.tag import router as tag_router

__all__ = [
    "auth_router",
    "blog_router",
    "category_router",
    "tag_router",
]
