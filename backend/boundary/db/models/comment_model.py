"""
Comment ORM model.

Dependencies: sqlalchemy, backend.boundary.db.base, backend.models.comment
System role: Comment persistence for the SQL repository adapter
"""

import uuid

from sqlalchemy import Boolean, Enum, Float, ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from backend.boundary.db.base import Base, TimestampMixin, UUIDMixin
from backend.models.comment import CommentCategory, CommentStatus, Viewport


def _enum_column(enum_cls: type, name: str) -> Enum:
    # Store the wire value ("in-progress"), not the member name
    return Enum(
        enum_cls,
        name=name,
        native_enum=False,
        length=32,
        values_callable=lambda members: [m.value for m in members],
    )


class CommentModel(Base, UUIDMixin, TimestampMixin):
    """
    Comment ORM model for pins and areas.

    Attributes:
        session_id: Owning session (cascade on delete)
        pos_x, pos_y: Normalized anchor / top-left corner
        width, height: Normalized size, NULL for pins
        viewport: NULL on rows written before viewports existed
    """

    __tablename__ = "comments"

    session_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("sessions.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    message: Mapped[str] = mapped_column(Text, nullable=False)
    author_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    category: Mapped[CommentCategory] = mapped_column(
        _enum_column(CommentCategory, "comment_category"),
        nullable=False,
        default=CommentCategory.CODING,
    )
    status: Mapped[CommentStatus] = mapped_column(
        _enum_column(CommentStatus, "comment_status"),
        nullable=False,
        default=CommentStatus.PENDING,
    )
    viewport: Mapped[Viewport | None] = mapped_column(
        _enum_column(Viewport, "comment_viewport"),
        nullable=True,
        default=Viewport.DESKTOP,
    )
    pos_x: Mapped[float] = mapped_column(Float, nullable=False)
    pos_y: Mapped[float] = mapped_column(Float, nullable=False)
    width: Mapped[float | None] = mapped_column(Float, nullable=True)
    height: Mapped[float | None] = mapped_column(Float, nullable=True)
    is_completed: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    session = relationship("SessionModel", back_populates="comments")
