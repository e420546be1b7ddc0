"""Dependency injection for FastAPI routes."""

from .dependencies import (
    get_cleanup_service,
    get_comment_service,
    get_repositories_dependency,
    get_screenshot_service,
    get_service_cache,
    get_session_service,
    get_settings_dependency,
)

__all__ = [
    "get_cleanup_service",
    "get_comment_service",
    "get_repositories_dependency",
    "get_screenshot_service",
    "get_service_cache",
    "get_session_service",
    "get_settings_dependency",
]
