"""
Repository contracts for sessions and comments.

Every storage adapter (SQL, in-memory, JSON file) implements these two
interfaces so services never see the underlying store.

Dependencies: backend.models
System role: Persistence port of the annotation backend
"""

from __future__ import annotations

import uuid
from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any

from backend.models.comment import Comment, CommentDraft
from backend.models.session import AnnotationSession


class SessionRepository(ABC):
    """Storage of annotation sessions."""

    @abstractmethod
    async def create(self, target_url: str, canvas_height: int) -> AnnotationSession:
        """Persist a new session with a generated id and UTC creation time."""

    @abstractmethod
    async def get(self, session_id: uuid.UUID) -> AnnotationSession | None:
        ...

    @abstractmethod
    async def list(self, limit: int | None = None, offset: int = 0) -> list[AnnotationSession]:
        """Sessions newest first."""

    @abstractmethod
    async def update(self, session_id: uuid.UUID, **fields: Any) -> AnnotationSession | None:
        ...

    @abstractmethod
    async def delete(self, session_id: uuid.UUID) -> bool:
        """Delete a session and all of its comments. False when it did not exist."""

    @abstractmethod
    async def list_created_before(self, cutoff: datetime) -> list[AnnotationSession]:
        ...


class CommentRepository(ABC):
    """Storage of comments, always scoped by owning session."""

    @abstractmethod
    async def list_by_session(self, session_id: uuid.UUID) -> list[Comment]:
        """Comments of a session in creation order."""

    @abstractmethod
    async def get(self, comment_id: uuid.UUID) -> Comment | None:
        ...

    @abstractmethod
    async def create(self, session_id: uuid.UUID, draft: CommentDraft) -> Comment:
        ...

    @abstractmethod
    async def update(self, comment_id: uuid.UUID, **fields: Any) -> Comment | None:
        ...
