"""
S3 client for the screenshots bucket.

Issues presigned upload URLs for browser-side uploads and deletes stored
screenshots during the retention sweep.

Dependencies: boto3
System role: Object storage for session screenshots
"""

import logging
import uuid
from datetime import datetime, timedelta, timezone

import boto3

logger = logging.getLogger(__name__)

# S3 DeleteObjects accepts at most this many keys per request
DELETE_BATCH_SIZE = 1000


class S3ScreenshotClient:
    """S3 client for screenshot objects stored under {folder}/{uuid}.jpg."""

    def __init__(
        self,
        bucket: str,
        region: str = "us-east-1",
        public_base_url: str | None = None,
    ) -> None:
        """
        Initialize S3 client for the screenshots bucket.

        Args:
            bucket: S3 bucket name for screenshot storage
            region: AWS region for S3 bucket
            public_base_url: URL prefix objects are publicly served from
        """
        self._bucket = bucket
        self._region = region
        self._public_base_url = (
            public_base_url or f"https://{bucket}.s3.{region}.amazonaws.com"
        ).rstrip("/")
        self._s3_client = boto3.client("s3", region_name=region)

    @staticmethod
    def new_key(folder: str) -> str:
        return f"{folder}/{uuid.uuid4()}.jpg"

    def public_url(self, s3_key: str) -> str:
        return f"{self._public_base_url}/{s3_key}"

    def key_from_url(self, url: str | None) -> str | None:
        """
        Object key of a public URL issued by this bucket.

        Returns:
            str | None: The key, or None for URLs served from elsewhere
        """
        prefix = f"{self._public_base_url}/"
        if not url or not url.startswith(prefix):
            return None
        key = url[len(prefix):].split("?", 1)[0]
        return key or None

    def generate_presigned_upload_url(
        self,
        s3_key: str,
        content_type: str = "image/jpeg",
        expires_in: int = 3600,
    ) -> tuple[str, datetime]:
        """
        Generate presigned URL for uploading a screenshot.

        Args:
            s3_key: S3 object key (path in bucket)
            content_type: MIME type of the file
            expires_in: URL expiry in seconds (default 1 hour)

        Returns:
            tuple[str, datetime]: (presigned_url, expires_at)

        Raises:
            ClientError: If presigned URL generation fails
        """
        presigned_url = self._s3_client.generate_presigned_url(
            ClientMethod="put_object",
            Params={
                "Bucket": self._bucket,
                "Key": s3_key,
                "ContentType": content_type,
            },
            ExpiresIn=expires_in,
        )
        expires_at = datetime.now(timezone.utc) + timedelta(seconds=expires_in)
        return presigned_url, expires_at

    def delete_objects(self, s3_keys: list[str]) -> int:
        """
        Delete screenshot objects, DELETE_BATCH_SIZE keys per request.

        Keys S3 refuses to delete are logged and left out of the count.

        Returns:
            int: Number of objects S3 reports as deleted

        Raises:
            ClientError: If a batch request itself fails
        """
        deleted = 0
        for start in range(0, len(s3_keys), DELETE_BATCH_SIZE):
            batch = s3_keys[start:start + DELETE_BATCH_SIZE]
            response = self._s3_client.delete_objects(
                Bucket=self._bucket,
                Delete={"Objects": [{"Key": key} for key in batch], "Quiet": False},
            )
            deleted += len(response.get("Deleted", []))
            for error in response.get("Errors", []):
                logger.warning(
                    "Screenshot object not deleted",
                    extra={
                        "key": error.get("Key"),
                        "code": error.get("Code"),
                        "error": error.get("Message"),
                    },
                )
        return deleted
