"""
Unit tests for ScreenshotService.

System role: Verification of capture proxying and upload URL issuance
"""

import threading
from unittest.mock import AsyncMock, MagicMock

import pytest
from botocore.exceptions import ClientError

from backend.application.services.screenshot_service import ScreenshotService
from backend.core.exceptions import (
    AccessRestrictedError,
    ScreenshotServiceNotConfiguredError,
    StorageError,
    ValidationError,
)
from backend.models.comment import Viewport
from backend.models.screenshot import ScreenshotRequest, ScreenshotResponse, UploadUrlRequest


@pytest.fixture
def storage() -> MagicMock:
    storage = MagicMock()
    storage.new_key.return_value = "desktop/abc.jpg"
    storage.generate_presigned_upload_url.return_value = ("https://signed.example/put", None)
    storage.public_url.return_value = "https://bucket.example/desktop/abc.jpg"
    return storage


@pytest.fixture
def client() -> AsyncMock:
    client = AsyncMock()
    client.capture.return_value = ScreenshotResponse(
        screenshot="data:image/jpeg;base64,AAAA", is_iframe_allowed=True, width=1440, height=2000
    )
    return client


class TestCapture:
    @pytest.mark.asyncio
    async def test_forwards_valid_url(self, client, storage) -> None:
        service = ScreenshotService(client, storage)

        result = await service.capture(ScreenshotRequest(targetUrl="https://example.com", viewport="mobile"))

        client.capture.assert_awaited_once_with("https://example.com", Viewport.MOBILE)
        assert result.width == 1440

    @pytest.mark.asyncio
    async def test_restricted_url_never_reaches_client(self, client, storage) -> None:
        service = ScreenshotService(client, storage)

        with pytest.raises(AccessRestrictedError):
            await service.capture(ScreenshotRequest(targetUrl="http://10.0.0.5/"))

        client.capture.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_url_checked_before_configuration(self, storage) -> None:
        service = ScreenshotService(None, storage)

        with pytest.raises(ValidationError):
            await service.capture(ScreenshotRequest())
        with pytest.raises(ScreenshotServiceNotConfiguredError):
            await service.capture(ScreenshotRequest(targetUrl="https://example.com"))


class TestUploadUrl:
    @pytest.mark.asyncio
    async def test_returns_signed_and_public_url(self, storage) -> None:
        service = ScreenshotService(None, storage, upload_expires_in=600)

        result = await service.create_upload_url(UploadUrlRequest(folder="desktop"))

        storage.new_key.assert_called_once_with("desktop")
        storage.generate_presigned_upload_url.assert_called_once_with("desktop/abc.jpg", expires_in=600)
        assert result.signed_url == "https://signed.example/put"
        assert result.public_url == "https://bucket.example/desktop/abc.jpg"
        assert result.path == "desktop/abc.jpg"

    @pytest.mark.asyncio
    async def test_signing_runs_off_the_event_loop_thread(self, storage) -> None:
        threads = []

        def sign(key, expires_in):
            threads.append(threading.get_ident())
            return "https://signed.example/put", None

        storage.generate_presigned_upload_url.side_effect = sign

        await ScreenshotService(None, storage).create_upload_url(UploadUrlRequest())

        assert threads and threads[0] != threading.get_ident()

    @pytest.mark.asyncio
    async def test_signing_failure_raises_storage_error(self, storage) -> None:
        storage.generate_presigned_upload_url.side_effect = ClientError(
            {"Error": {"Code": "AccessDenied", "Message": "denied"}}, "PutObject"
        )
        service = ScreenshotService(None, storage)

        with pytest.raises(StorageError) as exc_info:
            await service.create_upload_url(UploadUrlRequest())

        assert exc_info.value.details["operation"] == "upload"
