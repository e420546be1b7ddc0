"""
Session service orchestrator.

Coordinates session lifecycle operations.

Dependencies: backend.boundary.repositories, backend.core.url_guard
System role: Session use case orchestration
"""

import logging
from uuid import UUID

from backend.boundary.repositories.base import SessionRepository
from backend.core.exceptions import SessionNotFoundError
from backend.core.url_guard import validate_target_url
from backend.models.session import AnnotationSession, UpdateSessionRequest

logger = logging.getLogger(__name__)


class SessionService:
    """Session service orchestrator."""

    def __init__(
        self,
        sessions: SessionRepository,
        default_canvas_height: int = 3000,
        canvas_height_increment: int = 500,
        resolve_dns: bool = False,
    ) -> None:
        """
        Initialize session service.

        Args:
            sessions: Session repository
            default_canvas_height: Canvas height of new sessions in px
            canvas_height_increment: Pixels added by extend_canvas
            resolve_dns: Also reject hostnames resolving to private addresses
        """
        self.sessions = sessions
        self.default_canvas_height = default_canvas_height
        self.canvas_height_increment = canvas_height_increment
        self.resolve_dns = resolve_dns

    async def create_session(self, target_url: str | None) -> AnnotationSession:
        """
        Create a session for a public http(s) URL.

        Raises:
            ValidationError: If the URL is missing or malformed
            AccessRestrictedError: If the URL targets a local network host
        """
        url = validate_target_url(target_url, resolve_dns=self.resolve_dns)
        session = await self.sessions.create(url, self.default_canvas_height)
        logger.info(
            "Session created",
            extra={"session_id": str(session.id), "target_url": url},
        )
        return session

    async def get_session(self, session_id: UUID) -> AnnotationSession:
        session = await self.sessions.get(session_id)
        if session is None:
            raise SessionNotFoundError(str(session_id))
        return session

    async def list_sessions(self, limit: int | None = None, offset: int = 0) -> list[AnnotationSession]:
        return await self.sessions.list(limit=limit, offset=offset)

    async def update_session(self, session_id: UUID, request: UpdateSessionRequest) -> AnnotationSession:
        """
        Apply a partial update; fields not sent are left untouched.

        Raises:
            SessionNotFoundError: If the session does not exist
        """
        changes = request.model_dump(exclude_unset=True, by_alias=False)
        if changes.get("canvas_height", 0) is None:
            del changes["canvas_height"]

        session = await self.sessions.update(session_id, **changes)
        if session is None:
            raise SessionNotFoundError(str(session_id))
        logger.info(
            "Session updated",
            extra={"session_id": str(session_id), "fields": sorted(changes)},
        )
        return session

    async def extend_canvas(self, session_id: UUID) -> AnnotationSession:
        """Grow the virtual canvas by one increment."""
        session = await self.get_session(session_id)
        height = session.canvas_height + self.canvas_height_increment
        updated = await self.sessions.update(session_id, canvas_height=height)
        if updated is None:
            raise SessionNotFoundError(str(session_id))
        logger.info(
            "Canvas extended",
            extra={"session_id": str(session_id), "canvas_height": height},
        )
        return updated

    async def delete_session(self, session_id: UUID) -> None:
        """
        Delete a session and its comments.

        Raises:
            SessionNotFoundError: If the session does not exist
        """
        if not await self.sessions.delete(session_id):
            raise SessionNotFoundError(str(session_id))
        logger.info("Session deleted", extra={"session_id": str(session_id)})
