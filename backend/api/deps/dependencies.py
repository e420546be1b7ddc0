"""
Dependency injection container.

Factory functions for FastAPI dependencies.

Dependencies: backend.configs, backend.application, backend.boundary
System role: DI container for service injection
"""

from functools import lru_cache

from fastapi import Depends

from backend.application.services import (
    CleanupService,
    CommentService,
    ScreenshotService,
    SessionService,
)
from backend.boundary.aws.s3_client import S3ScreenshotClient
from backend.boundary.repositories import Repositories, get_repositories
from backend.boundary.screenshot.screenshot_client import ScreenshotServiceClient
from backend.configs import Settings, get_settings


class ServiceCache:
    """Container for cached boundary clients."""

    def __init__(self):
        self._s3_client = None
        self._screenshot_client = None

    @property
    def s3_client(self) -> S3ScreenshotClient:
        """Get cached S3 screenshot client."""
        if self._s3_client is None:
            s3 = get_settings().s3_screenshots
            self._s3_client = S3ScreenshotClient(
                bucket=s3.bucket,
                region=s3.region,
                public_base_url=s3.resolved_public_base_url,
            )
        return self._s3_client

    @property
    def screenshot_client(self) -> ScreenshotServiceClient | None:
        """Get cached screenshot service client, None when no URL is configured."""
        if self._screenshot_client is None:
            screenshot = get_settings().screenshot
            if not screenshot.service_url:
                return None
            self._screenshot_client = ScreenshotServiceClient(
                screenshot.service_url,
                timeout=screenshot.request_timeout,
            )
        return self._screenshot_client

    def clear(self) -> None:
        """Clear all cached instances."""
        self._s3_client = None
        self._screenshot_client = None


# Global service cache
_service_cache = ServiceCache()


def get_service_cache() -> ServiceCache:
    """Get service cache singleton."""
    return _service_cache


@lru_cache
def get_settings_dependency() -> Settings:
    """Get settings singleton."""
    return get_settings()


def get_repositories_dependency() -> Repositories:
    """Get repositories for the configured storage backend."""
    return get_repositories()


def get_session_service(
    repositories: Repositories = Depends(get_repositories_dependency),
    settings: Settings = Depends(get_settings_dependency),
) -> SessionService:
    """
    Get session service instance.

    Args:
        repositories: Storage adapters (injected via Depends)
        settings: Application settings (injected via Depends)

    Returns:
        SessionService: Session service instance
    """
    return SessionService(
        repositories.sessions,
        default_canvas_height=settings.annotation.default_canvas_height,
        canvas_height_increment=settings.annotation.canvas_height_increment,
        resolve_dns=settings.screenshot.resolve_dns,
    )


def get_comment_service(
    repositories: Repositories = Depends(get_repositories_dependency),
) -> CommentService:
    """Get comment service instance."""
    return CommentService(repositories.sessions, repositories.comments)


def get_screenshot_service(
    settings: Settings = Depends(get_settings_dependency),
) -> ScreenshotService:
    """Get screenshot service instance."""
    cache = get_service_cache()
    return ScreenshotService(
        cache.screenshot_client,
        cache.s3_client,
        resolve_dns=settings.screenshot.resolve_dns,
        upload_expires_in=settings.s3_screenshots.upload_expires_in,
    )


def get_cleanup_service(
    repositories: Repositories = Depends(get_repositories_dependency),
    settings: Settings = Depends(get_settings_dependency),
) -> CleanupService:
    """Get cleanup service instance."""
    return CleanupService(
        repositories.sessions,
        storage=get_service_cache().s3_client,
        retention_days=settings.cleanup.retention_days,
    )
