"""
Session domain models and schemas.

An annotation session is one campaign of comments against one target URL.

Dependencies: pydantic
System role: Session API contracts
"""

import uuid
from datetime import datetime

from pydantic import Field

from backend.models.common import CamelModel


class AnnotationSession(CamelModel):
    """Annotation session as stored by every repository adapter."""

    id: uuid.UUID
    target_url: str
    created_at: datetime
    canvas_height: int = 3000
    screenshot_desktop_url: str | None = None
    screenshot_mobile_url: str | None = None


class CreateSessionRequest(CamelModel):
    """Request schema for creating a new session."""

    target_url: str | None = Field(default=None, description="Absolute http(s) URL to annotate")


class UpdateSessionRequest(CamelModel):
    """Partial update of a session."""

    canvas_height: int | None = Field(default=None, gt=0, description="Virtual canvas height in px")
    screenshot_desktop_url: str | None = None
    screenshot_mobile_url: str | None = None
