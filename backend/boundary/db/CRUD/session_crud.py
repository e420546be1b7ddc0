"""
Session CRUD operations.

Dependencies: sqlalchemy, backend.boundary.db.models
System role: Session persistence operations
"""

from datetime import datetime
from typing import Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from backend.boundary.db.CRUD.base_crud import BaseCRUD
from backend.boundary.db.models.session_model import SessionModel


class SessionCRUD(BaseCRUD[SessionModel]):
    """CRUD operations for SessionModel with retention queries."""

    def __init__(self) -> None:
        super().__init__(SessionModel)

    async def list_created_before(
        self,
        session: AsyncSession,
        cutoff: datetime,
    ) -> Sequence[SessionModel]:
        """
        Sessions created strictly before the cutoff, oldest first.

        Args:
            session: Async database session
            cutoff: Timezone-aware UTC instant

        Returns:
            Sequence of SessionModels eligible for the retention sweep
        """
        stmt = (
            select(SessionModel)
            .where(SessionModel.created_at < cutoff)
            .order_by(SessionModel.created_at.asc())
        )
        result = await session.execute(stmt)
        return result.scalars().all()


session_crud = SessionCRUD()
