"""
Integration tests for the SQL repository adapter on SQLite.

System role: Verification of the SQL storage adapter end to end
"""

from datetime import datetime, timedelta, timezone

import pytest

from backend.boundary.db.CRUD import session_crud
from backend.boundary.repositories.sql_repository import SqlCommentRepository, SqlSessionRepository
from backend.models.comment import CommentCategory, CommentDraft, CommentStatus, Viewport


@pytest.fixture
def sessions(sqlite_session_factory) -> SqlSessionRepository:
    return SqlSessionRepository(sqlite_session_factory)


@pytest.fixture
def comments(sqlite_session_factory) -> SqlCommentRepository:
    return SqlCommentRepository(sqlite_session_factory)


class TestSqlSessionRepository:
    @pytest.mark.asyncio
    async def test_create_get_update(self, sessions) -> None:
        created = await sessions.create("https://example.com", 3000)

        fetched = await sessions.get(created.id)
        updated = await sessions.update(created.id, screenshot_desktop_url="https://cdn.example/d.jpg")

        assert fetched.target_url == "https://example.com"
        assert updated.screenshot_desktop_url == "https://cdn.example/d.jpg"
        assert updated.canvas_height == 3000

    @pytest.mark.asyncio
    async def test_delete_cascades_comments(self, sessions, comments) -> None:
        session = await sessions.create("https://example.com", 3000)
        await comments.create(session.id, CommentDraft(message="a", pos_x=0.1, pos_y=0.1))

        assert await sessions.delete(session.id)
        assert await comments.list_by_session(session.id) == []
        assert await sessions.get(session.id) is None
        assert not await sessions.delete(session.id)

    @pytest.mark.asyncio
    async def test_list_created_before(self, sessions, sqlite_session_factory) -> None:
        old = await sessions.create("https://old.example", 3000)
        await sessions.create("https://new.example", 3000)
        async with sqlite_session_factory() as db:
            await session_crud.update_by_id(
                db, old.id, created_at=datetime.now(timezone.utc) - timedelta(days=31)
            )
            await db.commit()

        stale = await sessions.list_created_before(datetime.now(timezone.utc) - timedelta(days=30))

        assert [s.id for s in stale] == [old.id]


class TestSqlCommentRepository:
    @pytest.mark.asyncio
    async def test_round_trip_preserves_fields(self, sessions, comments) -> None:
        """Test a created area comes back with identical values."""
        session = await sessions.create("https://example.com", 3000)
        draft = CommentDraft(
            message="hero too tall",
            author_name="Sam",
            category=CommentCategory.CODING,
            status=CommentStatus.IN_PROGRESS,
            viewport=Viewport.MOBILE,
            pos_x=0.123456,
            pos_y=0.654321,
            width=0.25,
            height=0.125,
        )

        created = await comments.create(session.id, draft)
        [listed] = await comments.list_by_session(session.id)

        assert listed.id == created.id
        assert (listed.pos_x, listed.pos_y, listed.width, listed.height) == (0.123456, 0.654321, 0.25, 0.125)
        assert listed.status == CommentStatus.IN_PROGRESS
        assert listed.viewport == Viewport.MOBILE
        assert listed.is_completed is False

    @pytest.mark.asyncio
    async def test_update_status_value_round_trips(self, sessions, comments) -> None:
        session = await sessions.create("https://example.com", 3000)
        created = await comments.create(session.id, CommentDraft(message="a", pos_x=0.1, pos_y=0.1))

        updated = await comments.update(created.id, status=CommentStatus.COMPLETED, is_completed=True)

        assert updated.status == CommentStatus.COMPLETED
        assert (await comments.get(created.id)).completed
