"""
S3 screenshots bucket configuration.

Settings for user-uploaded screenshot storage and presigned URL generation.

Dependencies: pydantic_settings
System role: S3 screenshots bucket configuration
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class S3ScreenshotsSettings(BaseSettings):
    """Settings for S3 screenshot bucket operations."""

    model_config = SettingsConfigDict(
        env_prefix="S3_SCREENSHOTS_",
        case_sensitive=False,
        extra="ignore",
    )

    bucket: str = Field(
        default="pagepin-dev-screenshots",
        description="S3 bucket for uploaded screenshots",
    )
    region: str = Field(
        default="us-east-1",
        description="AWS region for S3 bucket",
    )
    public_base_url: str | None = Field(
        default=None,
        description="Public URL prefix of the bucket (defaults to the virtual-hosted S3 URL)",
    )
    upload_expires_in: int = Field(
        default=3600,
        description="Presigned upload URL lifetime in seconds",
    )

    @property
    def resolved_public_base_url(self) -> str:
        """Public URL prefix objects are served from, without trailing slash."""
        if self.public_base_url:
            return self.public_base_url.rstrip("/")
        return f"https://{self.bucket}.s3.{self.region}.amazonaws.com"
