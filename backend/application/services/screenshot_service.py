"""
Screenshot service orchestrator.

Validates capture targets before anything leaves the process, proxies the
capture to the screenshot microservice, and issues presigned upload URLs for
screenshots stored alongside a session.

Dependencies: backend.boundary.screenshot, backend.boundary.aws, backend.core.url_guard
System role: Screenshot use case orchestration
"""

import asyncio
import logging

from botocore.exceptions import BotoCoreError, ClientError

from backend.boundary.aws.s3_client import S3ScreenshotClient
from backend.boundary.screenshot.screenshot_client import ScreenshotServiceClient
from backend.core.exceptions import ScreenshotServiceNotConfiguredError, StorageError
from backend.core.url_guard import validate_target_url
from backend.models.screenshot import (
    ScreenshotRequest,
    ScreenshotResponse,
    UploadUrlRequest,
    UploadUrlResponse,
)

logger = logging.getLogger(__name__)


class ScreenshotService:
    """Screenshot service orchestrator."""

    def __init__(
        self,
        client: ScreenshotServiceClient | None,
        storage: S3ScreenshotClient,
        resolve_dns: bool = False,
        upload_expires_in: int = 3600,
    ) -> None:
        """
        Initialize screenshot service.

        Args:
            client: Screenshot microservice client, None when unconfigured
            storage: Screenshot bucket client
            resolve_dns: Also reject hostnames resolving to private addresses
            upload_expires_in: Presigned upload URL lifetime in seconds
        """
        self.client = client
        self.storage = storage
        self.resolve_dns = resolve_dns
        self.upload_expires_in = upload_expires_in

    async def capture(self, request: ScreenshotRequest) -> ScreenshotResponse:
        """
        Capture a screenshot of the request's target URL.

        Raises:
            ValidationError: If the URL is missing or malformed
            AccessRestrictedError: If the URL targets a local network host
            ScreenshotServiceNotConfiguredError: If no service URL is set
            ScreenshotServiceError: If the microservice fails
        """
        url = validate_target_url(request.target_url, resolve_dns=self.resolve_dns)
        if self.client is None:
            raise ScreenshotServiceNotConfiguredError()

        logger.info(
            "Requesting screenshot",
            extra={"target_url": url, "viewport": request.viewport.value},
        )
        return await self.client.capture(url, request.viewport)

    async def create_upload_url(self, request: UploadUrlRequest) -> UploadUrlResponse:
        """
        Issue a presigned PUT URL for a new screenshot object.

        Raises:
            StorageError: If the URL cannot be signed
        """
        key = self.storage.new_key(request.folder)
        try:
            signed_url, _ = await asyncio.to_thread(
                self.storage.generate_presigned_upload_url, key, expires_in=self.upload_expires_in
            )
        except (BotoCoreError, ClientError) as e:
            logger.error(
                "Failed to create upload URL",
                extra={"key": key, "error": str(e)},
            )
            raise StorageError(
                "Failed to create upload URL", operation="upload", details={"error": str(e)}
            ) from e

        return UploadUrlResponse(
            signed_url=signed_url,
            public_url=self.storage.public_url(key),
            path=key,
        )
