"""
Session retention sweep.

Dependencies: backend.boundary.repositories, backend.boundary.aws
System role: Deletes sessions past the retention window with their screenshots
"""

import asyncio
import logging
from datetime import datetime, timedelta, timezone

from botocore.exceptions import BotoCoreError, ClientError

from backend.boundary.aws.s3_client import S3ScreenshotClient
from backend.boundary.repositories.base import SessionRepository
from backend.models.screenshot import CleanupResponse

logger = logging.getLogger(__name__)


class CleanupService:
    """Retention sweep over sessions, their comments and stored screenshots."""

    def __init__(
        self,
        sessions: SessionRepository,
        storage: S3ScreenshotClient | None = None,
        retention_days: int = 30,
    ) -> None:
        self.sessions = sessions
        self.storage = storage
        self.retention_days = retention_days

    async def run(self, now: datetime | None = None) -> CleanupResponse:
        """
        Delete every session created before now - retention_days.

        Screenshot deletion failures are logged and do not stop the sweep;
        session deletion failures propagate.

        Returns:
            CleanupResponse: Number of deleted sessions and screenshot objects
        """
        now = now or datetime.now(timezone.utc)
        cutoff = now - timedelta(days=self.retention_days)
        stale = await self.sessions.list_created_before(cutoff)
        if not stale:
            logger.info("No old sessions to delete", extra={"cutoff": cutoff.isoformat()})
            return CleanupResponse(message="No old sessions to delete", deleted_count=0)

        keys: list[str] = []
        if self.storage is not None:
            for session in stale:
                for url in (session.screenshot_desktop_url, session.screenshot_mobile_url):
                    key = self.storage.key_from_url(url)
                    if key:
                        keys.append(key)

        deleted_files = 0
        if keys:
            try:
                deleted_files = await asyncio.to_thread(self.storage.delete_objects, keys)
            except (BotoCoreError, ClientError) as e:
                logger.error(
                    "Screenshot deletion failed",
                    extra={"keys": len(keys), "error": str(e)},
                )

        for session in stale:
            await self.sessions.delete(session.id)

        logger.info(
            "Cleanup completed",
            extra={"deleted_sessions": len(stale), "deleted_files": deleted_files, "cutoff": cutoff.isoformat()},
        )
        return CleanupResponse(
            message="Cleanup completed",
            deleted_count=len(stale),
            deleted_files=deleted_files,
        )
