"""Service orchestrators."""

from .cleanup_service import CleanupService
from .comment_service import CommentService
from .screenshot_service import ScreenshotService
from .session_service import SessionService

__all__ = [
    "CleanupService",
    "CommentService",
    "ScreenshotService",
    "SessionService",
]
