"""
Comment service orchestrator.

Coordinates listing, creation, partial update and export of a session's
comments.

Dependencies: backend.boundary.repositories, backend.core
System role: Comment use case orchestration
"""

import logging
from uuid import UUID

from backend.boundary.repositories.base import CommentRepository, SessionRepository
from backend.core.canvas.visibility import SidebarFilter
from backend.core.comment_export import render_export
from backend.core.exceptions import CommentNotFoundError, SessionNotFoundError, ValidationError
from backend.models.comment import (
    Comment,
    CommentDraft,
    CommentFilterParams,
    CommentUpdate,
    sync_completion,
)
from backend.models.session import AnnotationSession

logger = logging.getLogger(__name__)

# Fields that may not be cleared by sending null
_REQUIRED_FIELDS = ("message", "category", "status", "is_completed", "pos_x", "pos_y")


class CommentService:
    """Comment service orchestrator."""

    def __init__(self, sessions: SessionRepository, comments: CommentRepository) -> None:
        """
        Initialize comment service.

        Args:
            sessions: Session repository (ownership checks)
            comments: Comment repository
        """
        self.sessions = sessions
        self.comments = comments

    async def _require_session(self, session_id: UUID) -> AnnotationSession:
        session = await self.sessions.get(session_id)
        if session is None:
            raise SessionNotFoundError(str(session_id))
        return session

    async def list_comments(
        self,
        session_id: UUID,
        filters: CommentFilterParams | None = None,
    ) -> list[Comment]:
        """
        List a session's comments in creation order.

        Raises:
            SessionNotFoundError: If the session does not exist
        """
        await self._require_session(session_id)
        comments = await self.comments.list_by_session(session_id)
        if filters is None:
            return comments
        return SidebarFilter.from_params(filters).apply(comments)

    async def create_comment(self, session_id: UUID, draft: CommentDraft) -> Comment:
        """
        Create a pin or area comment.

        Raises:
            SessionNotFoundError: If the session does not exist
        """
        await self._require_session(session_id)
        comment = await self.comments.create(session_id, draft)
        logger.info(
            "Comment created",
            extra={
                "session_id": str(session_id),
                "comment_id": str(comment.id),
                "kind": "area" if comment.is_area else "pin",
                "viewport": comment.effective_viewport.value,
            },
        )
        return comment

    async def update_comment(
        self,
        comment_id: UUID,
        changes: CommentUpdate,
        session_id: UUID | None = None,
    ) -> Comment:
        """
        Apply a partial update to a comment.

        Args:
            comment_id: Comment to update
            changes: Fields explicitly sent by the caller
            session_id: When given, the comment must belong to this session

        Raises:
            CommentNotFoundError: If the comment is missing or owned by another session
            ValidationError: If a required field is cleared, or the result
                would carry only one of width/height
        """
        current = await self.comments.get(comment_id)
        if current is None or (session_id is not None and current.session_id != session_id):
            raise CommentNotFoundError(str(comment_id))

        fields = changes.changes()
        for name in _REQUIRED_FIELDS:
            if name in fields and fields[name] is None:
                raise ValidationError(f"{name} cannot be null", field=name)

        width = fields.get("width", current.width)
        height = fields.get("height", current.height)
        if (width is None) != (height is None):
            raise ValidationError(
                "width and height must be provided together",
                field="width" if width is None else "height",
            )

        fields = sync_completion(current, fields)
        if not fields:
            return current

        updated = await self.comments.update(comment_id, **fields)
        if updated is None:
            raise CommentNotFoundError(str(comment_id))
        logger.info(
            "Comment updated",
            extra={"comment_id": str(comment_id), "fields": sorted(fields)},
        )
        return updated

    async def export_comments(
        self,
        session_id: UUID,
        fmt: str,
        filters: CommentFilterParams | None = None,
    ) -> tuple[str, str]:
        """
        Render a session's comments for download.

        Returns:
            tuple[str, str]: (body, media_type)

        Raises:
            SessionNotFoundError: If the session does not exist
            ValidationError: If the format is unknown
        """
        session = await self._require_session(session_id)
        comments = await self.list_comments(session_id, filters)
        return render_export(fmt, session, comments)
