"""
Shared test fixtures and configuration for entire test suite.

Provides: in-memory SQLite database, repository adapters, domain object
factories
Dependencies: pytest, pytest-asyncio, sqlalchemy, aiosqlite
System role: Test infrastructure and fixture management
"""

import uuid
from datetime import datetime, timezone
from unittest.mock import AsyncMock

import pytest

from backend.models.comment import Comment, CommentCategory, CommentStatus, Viewport
from backend.models.session import AnnotationSession


@pytest.fixture
async def sqlite_session_factory():
    """
    Create in-memory SQLite async database for testing.

    Yields:
        async_sessionmaker: Session factory bound to a fresh schema
    """
    from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
    from sqlalchemy.pool import StaticPool

    from backend.boundary.db.base import Base
    from backend.boundary.db.models import CommentModel, SessionModel  # noqa: F401

    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    yield factory

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_async_db(sqlite_session_factory):
    """
    Single AsyncSession on the in-memory database, rolled back after the test.
    """
    async with sqlite_session_factory() as session:
        yield session
        await session.rollback()


@pytest.fixture
def session_id() -> uuid.UUID:
    """Generate a test session ID."""
    return uuid.uuid4()


@pytest.fixture
def comment_id() -> uuid.UUID:
    """Generate a test comment ID."""
    return uuid.uuid4()


@pytest.fixture
def make_session():
    """Factory for AnnotationSession domain objects."""

    def _make(**overrides) -> AnnotationSession:
        fields = {
            "id": uuid.uuid4(),
            "target_url": "https://example.com",
            "created_at": datetime.now(timezone.utc),
        }
        fields.update(overrides)
        return AnnotationSession(**fields)

    return _make


@pytest.fixture
def make_comment():
    """Factory for Comment domain objects (a pending desktop pin by default)."""

    def _make(**overrides) -> Comment:
        fields = {
            "id": uuid.uuid4(),
            "session_id": uuid.uuid4(),
            "message": "fix spacing",
            "category": CommentCategory.DESIGN,
            "status": CommentStatus.PENDING,
            "viewport": Viewport.DESKTOP,
            "pos_x": 0.5,
            "pos_y": 0.5,
            "created_at": datetime.now(timezone.utc),
        }
        fields.update(overrides)
        return Comment(**fields)

    return _make


@pytest.fixture
def mock_comment_service():
    """Mocked CommentService with async methods."""
    return AsyncMock()
