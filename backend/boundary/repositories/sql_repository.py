"""
SQLAlchemy-backed repositories.

Each call runs in its own AsyncSession and commits before returning.

Dependencies: sqlalchemy, backend.boundary.db
System role: Production storage adapter (PostgreSQL via asyncpg)
"""

from __future__ import annotations

import uuid
from datetime import datetime
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from backend.boundary.db.CRUD import comment_crud, session_crud
from backend.boundary.repositories.base import CommentRepository, SessionRepository
from backend.models.comment import Comment, CommentDraft
from backend.models.session import AnnotationSession


class SqlSessionRepository(SessionRepository):
    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory = session_factory

    async def create(self, target_url: str, canvas_height: int) -> AnnotationSession:
        async with self._session_factory() as db:
            row = await session_crud.create(db, target_url=target_url, canvas_height=canvas_height)
            result = AnnotationSession.model_validate(row)
            await db.commit()
        return result

    async def get(self, session_id: uuid.UUID) -> AnnotationSession | None:
        async with self._session_factory() as db:
            row = await session_crud.get_by_id(db, session_id)
            return AnnotationSession.model_validate(row) if row else None

    async def list(self, limit: int | None = None, offset: int = 0) -> list[AnnotationSession]:
        async with self._session_factory() as db:
            rows = await session_crud.get_all(db, limit=limit, offset=offset, newest_first=True)
            return [AnnotationSession.model_validate(r) for r in rows]

    async def update(self, session_id: uuid.UUID, **fields: Any) -> AnnotationSession | None:
        async with self._session_factory() as db:
            row = await session_crud.update_by_id(db, session_id, **fields)
            result = AnnotationSession.model_validate(row) if row else None
            await db.commit()
        return result

    async def delete(self, session_id: uuid.UUID) -> bool:
        async with self._session_factory() as db:
            # SQLite only honours ON DELETE CASCADE with foreign keys enabled
            await comment_crud.delete_by_session(db, session_id)
            deleted = await session_crud.delete_by_id(db, session_id)
            await db.commit()
        return deleted

    async def list_created_before(self, cutoff: datetime) -> list[AnnotationSession]:
        async with self._session_factory() as db:
            rows = await session_crud.list_created_before(db, cutoff)
            return [AnnotationSession.model_validate(r) for r in rows]


class SqlCommentRepository(CommentRepository):
    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory = session_factory

    async def list_by_session(self, session_id: uuid.UUID) -> list[Comment]:
        async with self._session_factory() as db:
            rows = await comment_crud.list_by_session(db, session_id)
            return [Comment.model_validate(r) for r in rows]

    async def get(self, comment_id: uuid.UUID) -> Comment | None:
        async with self._session_factory() as db:
            row = await comment_crud.get_by_id(db, comment_id)
            return Comment.model_validate(row) if row else None

    async def create(self, session_id: uuid.UUID, draft: CommentDraft) -> Comment:
        async with self._session_factory() as db:
            row = await comment_crud.create(db, session_id=session_id, **draft.to_fields())
            result = Comment.model_validate(row)
            await db.commit()
        return result

    async def update(self, comment_id: uuid.UUID, **fields: Any) -> Comment | None:
        async with self._session_factory() as db:
            row = await comment_crud.update_by_id(db, comment_id, **fields)
            result = Comment.model_validate(row) if row else None
            await db.commit()
        return result
