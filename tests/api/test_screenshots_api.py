"""
Tests for the screenshot proxy endpoints.
"""

from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient

from backend.api.deps import get_screenshot_service
from backend.application.services.screenshot_service import ScreenshotService
from backend.core.exceptions import ScreenshotServiceError
from backend.models.screenshot import ScreenshotResponse


@pytest.fixture
def screenshot_client() -> AsyncMock:
    client = AsyncMock()
    client.capture.return_value = ScreenshotResponse(
        screenshot="data:image/jpeg;base64,AAAA", is_iframe_allowed=False, width=375, height=1800
    )
    return client


@pytest.fixture
def storage() -> MagicMock:
    storage = MagicMock()
    storage.new_key.return_value = "mobile/abc.jpg"
    storage.generate_presigned_upload_url.return_value = ("https://signed.example/put", None)
    storage.public_url.return_value = "https://bucket.example/mobile/abc.jpg"
    return storage


@pytest.fixture
def use_service(app):
    def _use(client, storage):
        app.dependency_overrides[get_screenshot_service] = lambda: ScreenshotService(client, storage)

    return _use


class TestCaptureEndpoint:
    def test_capture(self, client: TestClient, use_service, screenshot_client, storage) -> None:
        use_service(screenshot_client, storage)

        response = client.post(
            "/api/v1/screenshots", json={"targetUrl": "https://example.com", "viewport": "mobile"}
        )

        assert response.status_code == 200
        assert response.json() == {
            "screenshot": "data:image/jpeg;base64,AAAA",
            "isIframeAllowed": False,
            "width": 375,
            "height": 1800,
        }

    def test_missing_url(self, client: TestClient, use_service, screenshot_client, storage) -> None:
        use_service(screenshot_client, storage)

        assert client.post("/api/v1/screenshots", json={}).status_code == 400
        screenshot_client.capture.assert_not_awaited()

    def test_restricted_url(self, client: TestClient, use_service, screenshot_client, storage) -> None:
        use_service(screenshot_client, storage)

        response = client.post("/api/v1/screenshots", json={"targetUrl": "http://127.0.0.1:5432"})

        assert response.status_code == 403

    def test_not_configured(self, client: TestClient, use_service, storage) -> None:
        use_service(None, storage)

        response = client.post("/api/v1/screenshots", json={"targetUrl": "https://example.com"})

        assert response.status_code == 500
        assert "SCREENSHOT_SERVICE_URL" in response.json()["detail"]

    def test_upstream_status_passed_through(
        self, client: TestClient, use_service, screenshot_client, storage
    ) -> None:
        screenshot_client.capture.side_effect = ScreenshotServiceError(
            "Failed to capture screenshot", status_code=504, upstream_details="Timeout 30000ms exceeded"
        )
        use_service(screenshot_client, storage)

        response = client.post("/api/v1/screenshots", json={"targetUrl": "https://example.com"})

        assert response.status_code == 504
        assert response.json()["detail"] == {
            "error": "Failed to capture screenshot",
            "details": "Timeout 30000ms exceeded",
        }


class TestUploadEndpoint:
    def test_upload_url(self, client: TestClient, use_service, storage) -> None:
        use_service(None, storage)

        response = client.post("/api/v1/screenshots/upload", json={"folder": "mobile"})

        assert response.status_code == 200
        assert response.json() == {
            "signedUrl": "https://signed.example/put",
            "publicUrl": "https://bucket.example/mobile/abc.jpg",
            "path": "mobile/abc.jpg",
        }

    def test_default_folder(self, client: TestClient, use_service, storage) -> None:
        use_service(None, storage)

        client.post("/api/v1/screenshots/upload")

        storage.new_key.assert_called_once_with("misc")

    def test_folder_with_path_separator_rejected(self, client: TestClient, use_service, storage) -> None:
        use_service(None, storage)

        response = client.post("/api/v1/screenshots/upload", json={"folder": "../etc"})

        assert response.status_code == 400
