"""
Comment CRUD operations.

Dependencies: sqlalchemy, backend.boundary.db.models
System role: Comment persistence operations
"""

from typing import Sequence
from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from backend.boundary.db.CRUD.base_crud import BaseCRUD
from backend.boundary.db.models.comment_model import CommentModel


class CommentCRUD(BaseCRUD[CommentModel]):
    """CRUD operations for CommentModel scoped by session."""

    def __init__(self) -> None:
        super().__init__(CommentModel)

    async def list_by_session(
        self,
        session: AsyncSession,
        session_id: UUID,
    ) -> Sequence[CommentModel]:
        """Comments of one session in creation order."""
        stmt = (
            select(CommentModel)
            .where(CommentModel.session_id == session_id)
            .order_by(CommentModel.created_at.asc())
        )
        result = await session.execute(stmt)
        return result.scalars().all()

    async def delete_by_session(self, session: AsyncSession, session_id: UUID) -> int:
        """
        Delete every comment of a session.

        Returns:
            int: Number of deleted rows
        """
        stmt = delete(CommentModel).where(CommentModel.session_id == session_id)
        result = await session.execute(stmt)
        return result.rowcount


comment_crud = CommentCRUD()
