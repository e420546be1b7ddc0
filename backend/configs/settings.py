"""
Unified application settings.

Aggregates all configuration modules into a single Settings class.
Provides dependency injection factory for FastAPI.

Dependencies: All config modules
System role: Central configuration aggregator for the application
"""

from functools import lru_cache

from backend.configs.annotation import AnnotationSettings
from backend.configs.base import BaseSettings
from backend.configs.cleanup import CleanupSettings
from backend.configs.database import DatabaseSettings
from backend.configs.s3_screenshots import S3ScreenshotsSettings
from backend.configs.screenshot import ScreenshotSettings
from backend.configs.storage import StorageSettings


class Settings(BaseSettings):
    """Unified application settings aggregating all config modules."""

    # Aggregated settings
    database: DatabaseSettings = DatabaseSettings()
    storage: StorageSettings = StorageSettings()
    annotation: AnnotationSettings = AnnotationSettings()
    screenshot: ScreenshotSettings = ScreenshotSettings()
    s3_screenshots: S3ScreenshotsSettings = S3ScreenshotsSettings()
    cleanup: CleanupSettings = CleanupSettings()


@lru_cache
def get_settings() -> Settings:
    """
    Get application settings singleton.

    Returns Settings instance, cached for dependency injection.
    Environment variables loaded once at startup.

    Returns:
        Settings: Application settings instance

    Usage:
        from backend.configs import get_settings
        settings = get_settings()
    """
    return Settings()
