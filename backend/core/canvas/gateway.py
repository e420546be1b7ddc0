"""
Comment store contract consumed by the annotation canvas.

Dependencies: backend.models.comment
System role: Port between the canvas controller and comment persistence
"""

import uuid
from typing import Protocol

from backend.models.comment import Comment, CommentDraft, CommentUpdate


class CommentGateway(Protocol):
    """Remote comment store as seen by the canvas."""

    async def list_comments(self, session_id: uuid.UUID) -> list[Comment]:
        ...

    async def create_comment(self, session_id: uuid.UUID, draft: CommentDraft) -> Comment:
        ...

    async def update_comment(self, comment_id: uuid.UUID, changes: CommentUpdate) -> Comment:
        ...
