"""
Retention sweep entrypoint for cron / scheduled jobs.

Usage:
    python -m backend.scripts.cleanup_sessions [--retention-days N]

Dependencies: backend.application.services.cleanup_service
System role: Scheduled deletion of expired sessions
"""

import argparse
import asyncio
import logging
import sys

from backend.api.deps.dependencies import get_service_cache
from backend.application.services.cleanup_service import CleanupService
from backend.boundary.repositories import get_repositories
from backend.configs import get_settings
from backend.observability.logger import configure_logging

logger = logging.getLogger(__name__)


async def run_cleanup(retention_days: int | None = None) -> int:
    """
    Run one sweep with the configured storage backend.

    Returns:
        int: Number of deleted sessions
    """
    settings = get_settings()
    service = CleanupService(
        get_repositories().sessions,
        storage=get_service_cache().s3_client,
        retention_days=retention_days or settings.cleanup.retention_days,
    )
    result = await service.run()
    return result.deleted_count


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Delete annotation sessions past the retention window")
    parser.add_argument("--retention-days", type=int, default=None)
    args = parser.parse_args(argv)

    configure_logging(get_settings().log_level)
    try:
        deleted = asyncio.run(run_cleanup(args.retention_days))
    except Exception as e:
        logger.exception("Cleanup failed", extra={"error": str(e)})
        return 1
    logger.info("Cleanup finished", extra={"deleted_sessions": deleted})
    return 0


if __name__ == "__main__":
    sys.exit(main())
