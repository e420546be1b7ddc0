"""
Session ORM model.

Represents one annotation session against a single target URL.

Dependencies: sqlalchemy, backend.boundary.db.base
System role: Session persistence for the SQL repository adapter
"""

from sqlalchemy import Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from backend.boundary.db.base import Base, TimestampMixin, UUIDMixin


class SessionModel(Base, UUIDMixin, TimestampMixin):
    """
    Session ORM model.

    Cascade delete ensures a session's comments go with it.

    Attributes:
        id: UUID primary key (auto-generated)
        target_url: Page being annotated
        canvas_height: Virtual canvas height in px
        screenshot_desktop_url, screenshot_mobile_url: Public URLs of stored screenshots
        comments: CommentModel rows for this session (cascading delete)
    """

    __tablename__ = "sessions"

    target_url: Mapped[str] = mapped_column(String(2048), nullable=False)
    canvas_height: Mapped[int] = mapped_column(Integer, nullable=False, default=3000)
    screenshot_desktop_url: Mapped[str | None] = mapped_column(Text, nullable=True, default=None)
    screenshot_mobile_url: Mapped[str | None] = mapped_column(Text, nullable=True, default=None)

    comments = relationship(
        "CommentModel",
        back_populates="session",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
