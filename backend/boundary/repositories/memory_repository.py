"""
In-process repositories backed by plain dicts.

Dependencies: backend.models
System role: Storage adapter for development and tests
"""

from __future__ import annotations

import uuid
from datetime import datetime, timezone
from typing import Any

from backend.boundary.repositories.base import CommentRepository, SessionRepository
from backend.models.comment import Comment, CommentDraft
from backend.models.session import AnnotationSession


class MemoryStore:
    """Shared state of the memory session and comment repositories."""

    def __init__(self) -> None:
        self.sessions: dict[uuid.UUID, AnnotationSession] = {}
        self.comments: dict[uuid.UUID, Comment] = {}

    def clear(self) -> None:
        self.sessions.clear()
        self.comments.clear()


class MemorySessionRepository(SessionRepository):
    def __init__(self, store: MemoryStore) -> None:
        self._store = store

    async def create(self, target_url: str, canvas_height: int) -> AnnotationSession:
        session = AnnotationSession(
            id=uuid.uuid4(),
            target_url=target_url,
            canvas_height=canvas_height,
            created_at=datetime.now(timezone.utc),
        )
        self._store.sessions[session.id] = session
        return session.model_copy()

    async def get(self, session_id: uuid.UUID) -> AnnotationSession | None:
        session = self._store.sessions.get(session_id)
        return session.model_copy() if session else None

    async def list(self, limit: int | None = None, offset: int = 0) -> list[AnnotationSession]:
        ordered = sorted(self._store.sessions.values(), key=lambda s: s.created_at, reverse=True)
        end = None if limit is None else offset + limit
        return [s.model_copy() for s in ordered[offset:end]]

    async def update(self, session_id: uuid.UUID, **fields: Any) -> AnnotationSession | None:
        session = self._store.sessions.get(session_id)
        if session is None:
            return None
        updated = session.model_copy(update=fields)
        self._store.sessions[session_id] = updated
        return updated.model_copy()

    async def delete(self, session_id: uuid.UUID) -> bool:
        if self._store.sessions.pop(session_id, None) is None:
            return False
        for comment_id in [c.id for c in self._store.comments.values() if c.session_id == session_id]:
            del self._store.comments[comment_id]
        return True

    async def list_created_before(self, cutoff: datetime) -> list[AnnotationSession]:
        stale = [s for s in self._store.sessions.values() if s.created_at < cutoff]
        return sorted(stale, key=lambda s: s.created_at)


class MemoryCommentRepository(CommentRepository):
    def __init__(self, store: MemoryStore) -> None:
        self._store = store

    async def list_by_session(self, session_id: uuid.UUID) -> list[Comment]:
        # dicts keep insertion order, which is creation order
        return [c.model_copy() for c in self._store.comments.values() if c.session_id == session_id]

    async def get(self, comment_id: uuid.UUID) -> Comment | None:
        comment = self._store.comments.get(comment_id)
        return comment.model_copy() if comment else None

    async def create(self, session_id: uuid.UUID, draft: CommentDraft) -> Comment:
        comment = Comment(
            id=uuid.uuid4(),
            session_id=session_id,
            created_at=datetime.now(timezone.utc),
            **draft.to_fields(),
        )
        self._store.comments[comment.id] = comment
        return comment.model_copy()

    async def update(self, comment_id: uuid.UUID, **fields: Any) -> Comment | None:
        comment = self._store.comments.get(comment_id)
        if comment is None:
            return None
        updated = comment.model_copy(update=fields)
        self._store.comments[comment_id] = updated
        return updated.model_copy()
