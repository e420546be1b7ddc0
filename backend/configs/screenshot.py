"""
Screenshot capture configuration.

Settings shared by the screenshot proxy (API side) and the screenshot
microservice (Playwright side).

Dependencies: pydantic_settings
System role: Screenshot capture configuration
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ScreenshotSettings(BaseSettings):
    """Screenshot service location and capture parameters."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="SCREENSHOT_",
        case_sensitive=False,
        extra="ignore",
    )

    service_url: str | None = Field(
        default=None,
        description="Base URL of the screenshot microservice (e.g. http://localhost:3001)",
    )
    request_timeout: float = Field(default=60.0, description="Proxy request timeout in seconds")

    desktop_width: int = Field(default=1280, description="Desktop viewport width in px")
    mobile_width: int = Field(default=375, description="Mobile viewport width in px")
    initial_height: int = Field(default=800, description="Viewport height used while loading")
    max_height: int = Field(default=3000, description="Maximum captured page height in px")
    navigation_timeout_ms: int = Field(default=30000, description="Page navigation timeout in ms")
    jpeg_quality: int = Field(default=60, description="JPEG quality of captured screenshots")

    resolve_dns: bool = Field(
        default=False,
        description="Resolve target hostnames and reject private addresses they map to",
    )
