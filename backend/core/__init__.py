"""
Core business logic module.

Contains the exception hierarchy, the target URL guard, comment export
rendering and the annotation canvas interaction model. Nothing in here
performs I/O except the optional DNS lookup of the URL guard.
"""

from backend.core.exceptions import (
    AccessRestrictedError,
    AnnotationException,
    CommentNotFoundError,
    ScreenshotServiceError,
    ScreenshotServiceNotConfiguredError,
    SessionNotFoundError,
    StorageError,
    ValidationError,
)

__all__ = [
    "AccessRestrictedError",
    "AnnotationException",
    "CommentNotFoundError",
    "ScreenshotServiceError",
    "ScreenshotServiceNotConfiguredError",
    "SessionNotFoundError",
    "StorageError",
    "ValidationError",
]
