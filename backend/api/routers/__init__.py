"""API routers."""

from .cleanup import router as cleanup_router
from .comments import comment_router
from .comments import router as session_comments_router
from .health import router as health_router
from .screenshots import router as screenshots_router
from .sessions import router as sessions_router

__all__ = [
    "cleanup_router",
    "comment_router",
    "health_router",
    "screenshots_router",
    "session_comments_router",
    "sessions_router",
]
