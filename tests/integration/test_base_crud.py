"""
Test suite for BaseCRUD generic database operations.

Tests basic CRUD functionality: create, read (by ID and all), update, delete,
exists, against an in-memory SQLite database.

System role: Verification of generic database layer foundation
"""

import uuid

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from backend.boundary.db.CRUD.base_crud import BaseCRUD
from backend.boundary.db.CRUD import comment_crud, session_crud
from backend.boundary.db.models import SessionModel


@pytest.fixture
def base_crud() -> BaseCRUD:
    """Provide BaseCRUD instance for testing."""
    return BaseCRUD(SessionModel)


class TestBaseCRUD:
    @pytest.mark.asyncio
    async def test_create_generates_id_and_timestamps(
        self, base_crud: BaseCRUD, test_async_db: AsyncSession
    ) -> None:
        """Test create flushes the row and returns it with generated fields."""
        # Act
        row = await base_crud.create(test_async_db, target_url="https://example.com")

        # Assert
        assert isinstance(row.id, uuid.UUID)
        assert row.created_at is not None
        assert row.canvas_height == 3000

    @pytest.mark.asyncio
    async def test_get_by_id(self, base_crud: BaseCRUD, test_async_db: AsyncSession) -> None:
        row = await base_crud.create(test_async_db, target_url="https://example.com")

        assert (await base_crud.get_by_id(test_async_db, row.id)).id == row.id
        assert await base_crud.get_by_id(test_async_db, uuid.uuid4()) is None

    @pytest.mark.asyncio
    async def test_get_all_with_pagination(self, base_crud: BaseCRUD, test_async_db: AsyncSession) -> None:
        for i in range(3):
            await base_crud.create(test_async_db, target_url=f"https://{i}.example")

        assert len(await base_crud.get_all(test_async_db)) == 3
        assert len(await base_crud.get_all(test_async_db, limit=2)) == 2
        assert len(await base_crud.get_all(test_async_db, offset=2)) == 1

    @pytest.mark.asyncio
    async def test_update_by_id(self, base_crud: BaseCRUD, test_async_db: AsyncSession) -> None:
        row = await base_crud.create(test_async_db, target_url="https://example.com")

        updated = await base_crud.update_by_id(test_async_db, row.id, canvas_height=3500)

        assert updated.canvas_height == 3500
        assert await base_crud.update_by_id(test_async_db, uuid.uuid4(), canvas_height=1) is None

    @pytest.mark.asyncio
    async def test_update_without_fields_returns_current_row(
        self, base_crud: BaseCRUD, test_async_db: AsyncSession
    ) -> None:
        row = await base_crud.create(test_async_db, target_url="https://example.com")
        assert (await base_crud.update_by_id(test_async_db, row.id)).id == row.id

    @pytest.mark.asyncio
    async def test_delete_by_id(self, base_crud: BaseCRUD, test_async_db: AsyncSession) -> None:
        row = await base_crud.create(test_async_db, target_url="https://example.com")

        assert await base_crud.delete_by_id(test_async_db, row.id)
        assert await base_crud.get_by_id(test_async_db, row.id) is None
        assert not await base_crud.delete_by_id(test_async_db, row.id)


class TestCommentCRUD:
    @pytest.mark.asyncio
    async def test_list_and_delete_by_session(self, test_async_db: AsyncSession) -> None:
        session = await session_crud.create(test_async_db, target_url="https://example.com")
        other = await session_crud.create(test_async_db, target_url="https://other.example")
        for message in ("first", "second"):
            await comment_crud.create(
                test_async_db, session_id=session.id, message=message, pos_x=0.1, pos_y=0.1
            )
        await comment_crud.create(test_async_db, session_id=other.id, message="x", pos_x=0.1, pos_y=0.1)

        listed = await comment_crud.list_by_session(test_async_db, session.id)
        deleted = await comment_crud.delete_by_session(test_async_db, session.id)

        assert [c.message for c in listed] == ["first", "second"]
        assert deleted == 2
        assert len(await comment_crud.list_by_session(test_async_db, other.id)) == 1
