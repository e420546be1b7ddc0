"""
Tests for the in-memory repository adapter.

System role: Verification of process-local session/comment storage
"""

from datetime import datetime, timedelta, timezone

import pytest

from backend.boundary.repositories.memory_repository import (
    MemoryCommentRepository,
    MemorySessionRepository,
    MemoryStore,
)
from backend.models.comment import CommentDraft


@pytest.fixture
def store() -> MemoryStore:
    return MemoryStore()


@pytest.fixture
def sessions(store) -> MemorySessionRepository:
    return MemorySessionRepository(store)


@pytest.fixture
def comments(store) -> MemoryCommentRepository:
    return MemoryCommentRepository(store)


class TestMemorySessionRepository:
    @pytest.mark.asyncio
    async def test_create_and_get(self, sessions) -> None:
        created = await sessions.create("https://example.com", 3000)

        fetched = await sessions.get(created.id)

        assert fetched == created
        assert fetched.created_at.tzinfo is not None

    @pytest.mark.asyncio
    async def test_list_newest_first_with_pagination(self, sessions, store) -> None:
        first = await sessions.create("https://a.example", 3000)
        second = await sessions.create("https://b.example", 3000)
        store.sessions[first.id] = first.model_copy(
            update={"created_at": second.created_at - timedelta(seconds=5)}
        )

        listed = await sessions.list()
        page = await sessions.list(limit=1, offset=1)

        assert [s.id for s in listed] == [second.id, first.id]
        assert [s.id for s in page] == [first.id]

    @pytest.mark.asyncio
    async def test_returned_objects_are_copies(self, sessions) -> None:
        created = await sessions.create("https://example.com", 3000)
        created.canvas_height = 1
        assert (await sessions.get(created.id)).canvas_height == 3000

    @pytest.mark.asyncio
    async def test_delete_cascades_comments(self, sessions, comments) -> None:
        session = await sessions.create("https://example.com", 3000)
        other = await sessions.create("https://other.example", 3000)
        await comments.create(session.id, CommentDraft(message="a", pos_x=0.1, pos_y=0.1))
        kept = await comments.create(other.id, CommentDraft(message="b", pos_x=0.1, pos_y=0.1))

        assert await sessions.delete(session.id) is True
        assert await sessions.delete(session.id) is False
        assert await comments.list_by_session(session.id) == []
        assert await comments.list_by_session(other.id) == [kept]

    @pytest.mark.asyncio
    async def test_list_created_before(self, sessions, store) -> None:
        old = await sessions.create("https://old.example", 3000)
        await sessions.create("https://new.example", 3000)
        store.sessions[old.id] = old.model_copy(
            update={"created_at": datetime.now(timezone.utc) - timedelta(days=40)}
        )

        stale = await sessions.list_created_before(datetime.now(timezone.utc) - timedelta(days=30))

        assert [s.id for s in stale] == [old.id]


class TestMemoryCommentRepository:
    @pytest.mark.asyncio
    async def test_round_trip_preserves_geometry(self, comments, session_id) -> None:
        draft = CommentDraft(message="area", pos_x=0.123456, pos_y=0.654321, width=0.2, height=0.05)

        created = await comments.create(session_id, draft)
        listed = await comments.list_by_session(session_id)

        assert listed == [created]
        assert (created.pos_x, created.pos_y, created.width, created.height) == (0.123456, 0.654321, 0.2, 0.05)
        assert created.is_completed is False

    @pytest.mark.asyncio
    async def test_update_missing_returns_none(self, comments, comment_id) -> None:
        assert await comments.update(comment_id, message="x") is None

    @pytest.mark.asyncio
    async def test_update_changes_fields(self, comments, session_id) -> None:
        created = await comments.create(session_id, CommentDraft(message="a", pos_x=0.1, pos_y=0.1))

        updated = await comments.update(created.id, pos_x=0.9)

        assert updated.pos_x == 0.9
        assert (await comments.get(created.id)).pos_x == 0.9
