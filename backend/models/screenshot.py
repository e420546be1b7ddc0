"""
Screenshot request/response schemas.

Dependencies: pydantic
System role: Screenshot proxy and upload API contracts
"""

from pydantic import Field

from backend.models.comment import Viewport
from backend.models.common import CamelModel


class ScreenshotRequest(CamelModel):
    """Request a capture of target_url rendered at the given viewport."""

    target_url: str | None = None
    viewport: Viewport = Viewport.DESKTOP


class ScreenshotResponse(CamelModel):
    """Captured page image plus framing hints."""

    screenshot: str = Field(description="base64 JPEG data URI")
    is_iframe_allowed: bool
    width: int
    height: int


class UploadUrlRequest(CamelModel):
    """Request a presigned upload URL for a user-supplied screenshot."""

    folder: str = Field(default="misc", pattern=r"^[A-Za-z0-9_-]{1,64}$")


class UploadUrlResponse(CamelModel):
    """Presigned PUT URL and the public URL the object will be served from."""

    signed_url: str
    public_url: str
    path: str


class CleanupResponse(CamelModel):
    """Outcome of a retention sweep."""

    message: str
    deleted_count: int
    deleted_files: int = 0
