"""
Unit tests for CommentService.

System role: Verification of comment use cases over the memory repository
"""

import json
import uuid

import pytest

from backend.application.services.comment_service import CommentService
from backend.boundary.repositories.memory_repository import (
    MemoryCommentRepository,
    MemorySessionRepository,
    MemoryStore,
)
from backend.core.exceptions import CommentNotFoundError, SessionNotFoundError, ValidationError
from backend.models.comment import (
    CommentCategory,
    CommentDraft,
    CommentFilterParams,
    CommentStatus,
    CommentUpdate,
    CompletionFilter,
    Viewport,
)


@pytest.fixture
def store() -> MemoryStore:
    return MemoryStore()


@pytest.fixture
def service(store: MemoryStore) -> CommentService:
    return CommentService(MemorySessionRepository(store), MemoryCommentRepository(store))


@pytest.fixture
async def session(store: MemoryStore):
    return await MemorySessionRepository(store).create("https://example.com", 3000)


def pin(message: str = "fix spacing", **overrides) -> CommentDraft:
    return CommentDraft(message=message, pos_x=0.5, pos_y=0.5, **overrides)


class TestCreateAndList:
    @pytest.mark.asyncio
    async def test_create_pin_and_area(self, service: CommentService, session) -> None:
        created_pin = await service.create_comment(session.id, pin())
        area = await service.create_comment(
            session.id,
            CommentDraft(message="hero", pos_x=0.1, pos_y=0.2, width=0.3, height=0.1),
        )

        listed = await service.list_comments(session.id)

        assert [c.id for c in listed] == [created_pin.id, area.id]
        assert not created_pin.is_area
        assert area.is_area

    @pytest.mark.asyncio
    async def test_completed_status_sets_flag_on_create(self, service: CommentService, session) -> None:
        comment = await service.create_comment(session.id, pin(status=CommentStatus.COMPLETED))
        assert comment.is_completed is True

    @pytest.mark.asyncio
    async def test_unknown_session_raises(self, service: CommentService) -> None:
        with pytest.raises(SessionNotFoundError):
            await service.create_comment(uuid.uuid4(), pin())
        with pytest.raises(SessionNotFoundError):
            await service.list_comments(uuid.uuid4())

    @pytest.mark.asyncio
    async def test_list_filters(self, service: CommentService, session) -> None:
        await service.create_comment(session.id, pin("desktop design"))
        await service.create_comment(
            session.id,
            pin("mobile coding", viewport=Viewport.MOBILE, category=CommentCategory.CODING),
        )
        await service.create_comment(session.id, pin("done", status=CommentStatus.COMPLETED))

        mobile = await service.list_comments(session.id, CommentFilterParams(viewport=Viewport.MOBILE))
        open_only = await service.list_comments(
            session.id, CommentFilterParams(completion=CompletionFilter.OPEN)
        )

        assert [c.message for c in mobile] == ["mobile coding"]
        assert [c.message for c in open_only] == ["desktop design", "mobile coding"]


class TestUpdateComment:
    @pytest.mark.asyncio
    async def test_partial_update_keeps_other_fields(self, service: CommentService, session) -> None:
        comment = await service.create_comment(session.id, pin(author_name="Ana"))

        updated = await service.update_comment(comment.id, CommentUpdate(message="new text"))

        assert updated.message == "new text"
        assert updated.author_name == "Ana"
        assert (updated.pos_x, updated.pos_y) == (0.5, 0.5)

    @pytest.mark.asyncio
    async def test_status_completed_syncs_flag(self, service: CommentService, session) -> None:
        comment = await service.create_comment(session.id, pin())

        updated = await service.update_comment(comment.id, CommentUpdate(status=CommentStatus.COMPLETED))
        reopened = await service.update_comment(comment.id, CommentUpdate(isCompleted=False))

        assert updated.is_completed is True
        assert reopened.status == CommentStatus.PENDING
        assert reopened.is_completed is False

    @pytest.mark.asyncio
    async def test_flag_alone_completes(self, service: CommentService, session) -> None:
        comment = await service.create_comment(session.id, pin())

        updated = await service.update_comment(comment.id, CommentUpdate(isCompleted=True))

        assert updated.status == CommentStatus.COMPLETED

    @pytest.mark.asyncio
    async def test_null_required_field_rejected(self, service: CommentService, session) -> None:
        comment = await service.create_comment(session.id, pin())

        with pytest.raises(ValidationError):
            await service.update_comment(comment.id, CommentUpdate(message=None))

    @pytest.mark.asyncio
    async def test_half_size_rejected(self, service: CommentService, session) -> None:
        comment = await service.create_comment(session.id, pin())

        with pytest.raises(ValidationError):
            await service.update_comment(comment.id, CommentUpdate(width=0.2))

    @pytest.mark.asyncio
    async def test_area_can_become_pin(self, service: CommentService, session) -> None:
        area = await service.create_comment(
            session.id, CommentDraft(message="a", pos_x=0.1, pos_y=0.1, width=0.2, height=0.2)
        )

        updated = await service.update_comment(area.id, CommentUpdate(width=None, height=None))

        assert not updated.is_area

    @pytest.mark.asyncio
    async def test_comment_of_other_session_not_found(self, service: CommentService, store, session) -> None:
        other = await MemorySessionRepository(store).create("https://other.example", 3000)
        comment = await service.create_comment(other.id, pin())

        with pytest.raises(CommentNotFoundError):
            await service.update_comment(comment.id, CommentUpdate(message="x"), session_id=session.id)

    @pytest.mark.asyncio
    async def test_missing_comment_not_found(self, service: CommentService) -> None:
        with pytest.raises(CommentNotFoundError):
            await service.update_comment(uuid.uuid4(), CommentUpdate(message="x"))


class TestExport:
    @pytest.mark.asyncio
    async def test_export_json(self, service: CommentService, session) -> None:
        await service.create_comment(session.id, pin())

        body, media_type = await service.export_comments(session.id, "json")

        assert media_type.startswith("application/json")
        assert len(json.loads(body)["comments"]) == 1

    @pytest.mark.asyncio
    async def test_export_unknown_format(self, service: CommentService, session) -> None:
        with pytest.raises(ValidationError):
            await service.export_comments(session.id, "pdf")
