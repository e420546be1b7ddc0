"""
In-process comment gateway for the annotation canvas.

Dependencies: backend.application.services
System role: Binds the canvas controller to CommentService without HTTP
"""

import uuid

from backend.application.services.comment_service import CommentService
from backend.models.comment import Comment, CommentDraft, CommentUpdate


class ServiceCommentGateway:
    """CommentGateway backed directly by a CommentService."""

    def __init__(self, service: CommentService, session_id: uuid.UUID | None = None) -> None:
        """
        Args:
            service: Comment service to delegate to
            session_id: When set, updates are restricted to this session's comments
        """
        self._service = service
        self._session_id = session_id

    async def list_comments(self, session_id: uuid.UUID) -> list[Comment]:
        return await self._service.list_comments(session_id)

    async def create_comment(self, session_id: uuid.UUID, draft: CommentDraft) -> Comment:
        return await self._service.create_comment(session_id, draft)

    async def update_comment(self, comment_id: uuid.UUID, changes: CommentUpdate) -> Comment:
        return await self._service.update_comment(comment_id, changes, session_id=self._session_id)
