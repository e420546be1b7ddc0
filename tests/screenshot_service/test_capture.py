"""
Unit tests for headless page capture with Playwright mocked out.
"""

import base64
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from backend.configs.screenshot import ScreenshotSettings
from backend.models.comment import Viewport
from backend.screenshot_service.capture import (
    CaptureError,
    capture_screenshot,
    is_iframe_allowed,
    to_data_uri,
)


@pytest.fixture
def settings() -> ScreenshotSettings:
    return ScreenshotSettings(desktop_width=1280, mobile_width=375, max_height=3000, jpeg_quality=60)


@pytest.fixture
def page() -> AsyncMock:
    page = AsyncMock()
    response = AsyncMock()
    response.all_headers.return_value = {"x-frame-options": "DENY"}
    page.goto.return_value = response
    page.evaluate.return_value = 5200
    page.screenshot.return_value = b"jpeg-bytes"
    return page


@pytest.fixture
def browser(page) -> AsyncMock:
    browser = AsyncMock()
    context = AsyncMock()
    context.new_page.return_value = page
    browser.new_context.return_value = context
    return browser


@pytest.fixture
def playwright(browser):
    p = MagicMock()
    p.chromium.launch = AsyncMock(return_value=browser)
    manager = MagicMock()
    manager.__aenter__.return_value = p
    manager.__aexit__.return_value = False
    with patch("backend.screenshot_service.capture.async_playwright", return_value=manager):
        yield p


class TestIframeAllowed:
    @pytest.mark.parametrize(
        "headers, expected",
        [
            ({}, True),
            ({"x-frame-options": "DENY"}, False),
            ({"x-frame-options": "sameorigin"}, False),
            ({"x-frame-options": "ALLOW-FROM https://a.example"}, True),
            ({"content-security-policy": "default-src 'self'; frame-ancestors 'none'"}, False),
            ({"content-security-policy": "frame-ancestors https://a.example"}, True),
        ],
    )
    def test_headers(self, headers, expected) -> None:
        assert is_iframe_allowed(headers) is expected


def test_to_data_uri() -> None:
    assert to_data_uri(b"abc") == "data:image/jpeg;base64," + base64.b64encode(b"abc").decode()


class TestCaptureScreenshot:
    @pytest.mark.asyncio
    async def test_desktop_capture_is_capped(self, playwright, browser, page, settings) -> None:
        result = await capture_screenshot("https://example.com", Viewport.DESKTOP, settings)

        assert (result.width, result.height) == (1280, 3000)
        assert result.is_iframe_allowed is False
        assert result.screenshot == to_data_uri(b"jpeg-bytes")
        page.set_viewport_size.assert_awaited_once_with({"width": 1280, "height": 3000})
        page.screenshot.assert_awaited_once_with(
            type="jpeg", quality=60, clip={"x": 0, "y": 0, "width": 1280, "height": 3000}
        )
        browser.close.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_mobile_context(self, playwright, browser, page, settings) -> None:
        page.evaluate.return_value = 1200

        result = await capture_screenshot("https://example.com", Viewport.MOBILE, settings)

        kwargs = browser.new_context.await_args.kwargs
        assert kwargs["viewport"]["width"] == 375
        assert kwargs["is_mobile"] is True
        assert kwargs["has_touch"] is True
        assert result.height == 1200

    @pytest.mark.asyncio
    async def test_browser_closed_on_navigation_failure(self, playwright, browser, page, settings) -> None:
        page.goto.side_effect = TimeoutError("Timeout 30000ms exceeded")

        with pytest.raises(TimeoutError):
            await capture_screenshot("https://example.com", Viewport.DESKTOP, settings)

        browser.close.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_no_response_is_capture_error(self, playwright, browser, page, settings) -> None:
        page.goto.return_value = None

        with pytest.raises(CaptureError):
            await capture_screenshot("https://example.com", Viewport.DESKTOP, settings)

        browser.close.assert_awaited_once()
