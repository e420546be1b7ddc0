"""
Retention sweep configuration.

Dependencies: pydantic_settings
System role: Session retention policy
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class CleanupSettings(BaseSettings):
    """Retention window for the periodic session cleanup."""

    model_config = SettingsConfigDict(
        env_prefix="CLEANUP_",
        case_sensitive=False,
        extra="ignore",
    )

    retention_days: int = Field(default=30, description="Sessions older than this are deleted")
