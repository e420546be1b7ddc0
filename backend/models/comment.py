"""
Comment domain models and schemas.

Positions and sizes are normalized fractions of the canvas surface, so a
comment renders at the same spot whatever the on-screen size of the canvas.

Dependencies: pydantic
System role: Comment API contracts and canonical comment schema
"""

import enum
import uuid
from datetime import datetime

from pydantic import Field, model_validator

from backend.models.common import CamelModel


class CommentCategory(str, enum.Enum):
    """Which team a comment is addressed to."""

    CODING = "coding"
    DESIGN = "design"


class CommentStatus(str, enum.Enum):
    """Review progress of a comment."""

    PENDING = "pending"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"


class Viewport(str, enum.Enum):
    """Rendering mode a comment was authored against."""

    DESKTOP = "desktop"
    MOBILE = "mobile"


def _check_size_pair(width: float | None, height: float | None) -> None:
    if (width is None) != (height is None):
        raise ValueError("width and height must be provided together")


class Comment(CamelModel):
    """
    A pin (point) or area (rectangle) annotation attached to a session.

    Attributes:
        pos_x, pos_y: Anchor point of a pin, or top-left corner of an area
        width, height: Present together only for area comments
        is_completed: Legacy completion flag kept in sync with status
    """

    id: uuid.UUID
    session_id: uuid.UUID
    message: str
    author_name: str | None = None
    category: CommentCategory = CommentCategory.CODING
    status: CommentStatus = CommentStatus.PENDING
    viewport: Viewport | None = Viewport.DESKTOP
    pos_x: float
    pos_y: float
    width: float | None = None
    height: float | None = None
    is_completed: bool = False
    created_at: datetime

    @property
    def completed(self) -> bool:
        """A comment is done when either the status or the legacy flag says so."""
        return self.status == CommentStatus.COMPLETED or self.is_completed

    @property
    def is_area(self) -> bool:
        return self.width is not None and self.height is not None

    @property
    def effective_viewport(self) -> Viewport:
        return self.viewport or Viewport.DESKTOP


class CommentDraft(CamelModel):
    """Request schema for creating a comment."""

    message: str = Field(..., min_length=1, description="Comment text")
    author_name: str | None = Field(default=None, max_length=255)
    category: CommentCategory = CommentCategory.CODING
    status: CommentStatus = CommentStatus.PENDING
    viewport: Viewport = Viewport.DESKTOP
    pos_x: float = Field(..., ge=0.0, le=1.0)
    pos_y: float = Field(..., ge=0.0, le=1.0)
    width: float | None = Field(default=None, gt=0.0, le=1.0)
    height: float | None = Field(default=None, gt=0.0, le=1.0)

    @model_validator(mode="after")
    def _size_pair(self) -> "CommentDraft":
        _check_size_pair(self.width, self.height)
        if not self.message.strip():
            raise ValueError("message cannot be blank")
        return self

    def to_fields(self) -> dict:
        """Stored field values of a new comment, completion flag included."""
        fields = self.model_dump(by_alias=False)
        fields["is_completed"] = self.status == CommentStatus.COMPLETED
        return fields


class CommentUpdate(CamelModel):
    """Partial update of a comment; only fields explicitly sent are applied."""

    message: str | None = Field(default=None, min_length=1)
    category: CommentCategory | None = None
    status: CommentStatus | None = None
    is_completed: bool | None = None
    pos_x: float | None = Field(default=None, ge=0.0, le=1.0)
    pos_y: float | None = Field(default=None, ge=0.0, le=1.0)
    width: float | None = Field(default=None, gt=0.0, le=1.0)
    height: float | None = Field(default=None, gt=0.0, le=1.0)

    def changes(self) -> dict:
        """Fields the caller actually set, keyed by attribute name."""
        return self.model_dump(exclude_unset=True, by_alias=False)


class CommentListResponse(CamelModel):
    """Envelope for a session's comments."""

    comments: list[Comment]


class CompletionFilter(str, enum.Enum):
    """Completion criterion of a comment list."""

    OPEN = "open"
    COMPLETED = "completed"
    ALL = "all"


class CommentFilterParams(CamelModel):
    """List filter over a session's comments; every criterion must match."""

    viewport: Viewport | None = None
    category: CommentCategory | None = None
    status: CommentStatus | None = None
    completion: CompletionFilter = CompletionFilter.ALL


def sync_completion(current: Comment, changes: dict) -> dict:
    """
    Return `changes` with status and the legacy completion flag agreeing.

    status is canonical. Setting is_completed alone moves status to completed,
    or back to pending when a completed comment is reopened. Setting status
    alone rewrites the flag to match. When both are sent, status wins.
    """
    merged = dict(changes)
    if "status" in merged and merged["status"] is not None:
        status = CommentStatus(merged["status"])
        merged["status"] = status
        merged["is_completed"] = status == CommentStatus.COMPLETED
    elif "is_completed" in merged and merged["is_completed"] is not None:
        if merged["is_completed"]:
            merged["status"] = CommentStatus.COMPLETED
        elif current.completed:
            merged["status"] = CommentStatus.PENDING
    return merged
