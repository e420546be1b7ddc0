"""
JSON-file repositories.

The whole store lives in one document of the form
{"sessions": [...], "comments": [...]} with camelCase records. Every mutation
rewrites the document atomically (temp file + rename) while holding an
asyncio.Lock, so concurrent requests in one process never interleave writes.

Records written by older releases are normalized on load: legacy categories
collapse onto coding/design, severity is dropped, and a bare isCompleted flag
becomes status "completed".

Dependencies: backend.models
System role: Single-node storage adapter with no database dependency
"""

from __future__ import annotations

import asyncio
import json
import logging
import os
import tempfile
import uuid
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from backend.boundary.repositories.base import CommentRepository, SessionRepository
from backend.core.exceptions import StorageError
from backend.models.comment import Comment, CommentCategory, CommentDraft, CommentStatus
from backend.models.session import AnnotationSession

logger = logging.getLogger(__name__)

LEGACY_CATEGORIES = {"layout", "text", "ui", "bug", "idea", "other"}


def normalize_legacy_comment(record: dict) -> dict:
    """Map a stored comment record of any past schema onto the current one."""
    record = dict(record)
    category = record.get("category")
    if category in LEGACY_CATEGORIES:
        record["category"] = (
            CommentCategory.CODING.value if category == "bug" else CommentCategory.DESIGN.value
        )
    record.pop("severity", None)

    is_completed = bool(record.get("isCompleted", record.get("is_completed", False)))
    if not record.get("status"):
        record["status"] = CommentStatus.COMPLETED.value if is_completed else CommentStatus.PENDING.value
    return record


class FileStore:
    """Lock-guarded JSON document shared by the file repositories."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        self.lock = asyncio.Lock()

    def _read(self) -> dict[str, list[dict]]:
        if not self.path.exists():
            return {"sessions": [], "comments": []}
        try:
            with self.path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise StorageError("Failed to read store file", operation="read", details={"error": str(e)}) from e
        return {
            "sessions": list(data.get("sessions", [])),
            "comments": [normalize_legacy_comment(c) for c in data.get("comments", [])],
        }

    def _write(self, data: dict[str, list[dict]]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2)
            os.replace(tmp_name, self.path)
        except OSError as e:
            Path(tmp_name).unlink(missing_ok=True)
            raise StorageError("Failed to write store file", operation="write", details={"error": str(e)}) from e

    async def load(self) -> tuple[list[AnnotationSession], list[Comment]]:
        data = await asyncio.to_thread(self._read)
        sessions = [AnnotationSession.model_validate(s) for s in data["sessions"]]
        comments = [Comment.model_validate(c) for c in data["comments"]]
        return sessions, comments

    async def save(self, sessions: list[AnnotationSession], comments: list[Comment]) -> None:
        data = {
            "sessions": [s.model_dump(mode="json", by_alias=True) for s in sessions],
            "comments": [c.model_dump(mode="json", by_alias=True) for c in comments],
        }
        await asyncio.to_thread(self._write, data)
        logger.debug(
            "Store file written",
            extra={"path": str(self.path), "sessions": len(sessions), "comments": len(comments)},
        )


class FileSessionRepository(SessionRepository):
    def __init__(self, store: FileStore) -> None:
        self._store = store

    async def create(self, target_url: str, canvas_height: int) -> AnnotationSession:
        session = AnnotationSession(
            id=uuid.uuid4(),
            target_url=target_url,
            canvas_height=canvas_height,
            created_at=datetime.now(timezone.utc),
        )
        async with self._store.lock:
            sessions, comments = await self._store.load()
            sessions.append(session)
            await self._store.save(sessions, comments)
        return session

    async def get(self, session_id: uuid.UUID) -> AnnotationSession | None:
        async with self._store.lock:
            sessions, _ = await self._store.load()
        return next((s for s in sessions if s.id == session_id), None)

    async def list(self, limit: int | None = None, offset: int = 0) -> list[AnnotationSession]:
        async with self._store.lock:
            sessions, _ = await self._store.load()
        ordered = sorted(sessions, key=lambda s: s.created_at, reverse=True)
        end = None if limit is None else offset + limit
        return ordered[offset:end]

    async def update(self, session_id: uuid.UUID, **fields: Any) -> AnnotationSession | None:
        async with self._store.lock:
            sessions, comments = await self._store.load()
            for i, session in enumerate(sessions):
                if session.id == session_id:
                    sessions[i] = session.model_copy(update=fields)
                    await self._store.save(sessions, comments)
                    return sessions[i]
        return None

    async def delete(self, session_id: uuid.UUID) -> bool:
        async with self._store.lock:
            sessions, comments = await self._store.load()
            remaining = [s for s in sessions if s.id != session_id]
            if len(remaining) == len(sessions):
                return False
            await self._store.save(remaining, [c for c in comments if c.session_id != session_id])
        return True

    async def list_created_before(self, cutoff: datetime) -> list[AnnotationSession]:
        async with self._store.lock:
            sessions, _ = await self._store.load()
        return sorted((s for s in sessions if s.created_at < cutoff), key=lambda s: s.created_at)


class FileCommentRepository(CommentRepository):
    def __init__(self, store: FileStore) -> None:
        self._store = store

    async def list_by_session(self, session_id: uuid.UUID) -> list[Comment]:
        async with self._store.lock:
            _, comments = await self._store.load()
        return [c for c in comments if c.session_id == session_id]

    async def get(self, comment_id: uuid.UUID) -> Comment | None:
        async with self._store.lock:
            _, comments = await self._store.load()
        return next((c for c in comments if c.id == comment_id), None)

    async def create(self, session_id: uuid.UUID, draft: CommentDraft) -> Comment:
        comment = Comment(
            id=uuid.uuid4(),
            session_id=session_id,
            created_at=datetime.now(timezone.utc),
            **draft.to_fields(),
        )
        async with self._store.lock:
            sessions, comments = await self._store.load()
            comments.append(comment)
            await self._store.save(sessions, comments)
        return comment

    async def update(self, comment_id: uuid.UUID, **fields: Any) -> Comment | None:
        async with self._store.lock:
            sessions, comments = await self._store.load()
            for i, comment in enumerate(comments):
                if comment.id == comment_id:
                    comments[i] = comment.model_copy(update=fields)
                    await self._store.save(sessions, comments)
                    return comments[i]
        return None
