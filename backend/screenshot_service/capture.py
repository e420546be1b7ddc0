"""
Headless-browser page capture.

Each capture launches its own Chromium instance so no cookies, storage or
crashes leak between requests. The browser is closed before returning,
whether the capture succeeded or not.

Dependencies: playwright
System role: Screenshot rendering for the screenshot microservice
"""

import base64
import logging
from typing import Mapping

from playwright.async_api import async_playwright

from backend.configs.screenshot import ScreenshotSettings
from backend.models.comment import Viewport
from backend.models.screenshot import ScreenshotResponse

logger = logging.getLogger(__name__)

BROWSER_ARGS = [
    "--no-sandbox",
    "--disable-setuid-sandbox",
    "--disable-dev-shm-usage",
    "--disable-gpu",
]


class CaptureError(Exception):
    """Raised when the page could not be loaded or captured."""


def is_iframe_allowed(headers: Mapping[str, str]) -> bool:
    """
    Whether the page may be embedded in a cross-origin iframe.

    Args:
        headers: Response headers with lower-cased names

    Returns:
        bool: False for X-Frame-Options DENY/SAMEORIGIN or CSP frame-ancestors 'none'
    """
    x_frame_options = (headers.get("x-frame-options") or "").strip().lower()
    if x_frame_options in ("deny", "sameorigin"):
        return False
    csp = headers.get("content-security-policy") or ""
    return "frame-ancestors 'none'" not in csp.lower()


def to_data_uri(image: bytes) -> str:
    return "data:image/jpeg;base64," + base64.b64encode(image).decode("ascii")


async def capture_screenshot(
    target_url: str,
    viewport: Viewport,
    settings: ScreenshotSettings,
) -> ScreenshotResponse:
    """
    Load target_url and capture its top part as a JPEG.

    The page is loaded at the viewport width with the initial height, then
    the viewport is stretched to the document scroll height (capped at
    max_height) and that region is clipped.

    Raises:
        CaptureError: If navigation produced no response
        playwright.async_api.Error: Navigation or rendering failures
    """
    is_mobile = Viewport(viewport) == Viewport.MOBILE
    width = settings.mobile_width if is_mobile else settings.desktop_width

    async with async_playwright() as p:
        browser = await p.chromium.launch(headless=True, args=BROWSER_ARGS)
        try:
            context = await browser.new_context(
                viewport={"width": width, "height": settings.initial_height},
                device_scale_factor=1,
                is_mobile=is_mobile,
                has_touch=is_mobile,
            )
            page = await context.new_page()

            response = await page.goto(
                target_url,
                wait_until="domcontentloaded",
                timeout=settings.navigation_timeout_ms,
            )
            if response is None:
                raise CaptureError("Failed to load page")

            headers = await response.all_headers()
            scroll_height = await page.evaluate("() => document.documentElement.scrollHeight")
            height = max(1, min(int(scroll_height), settings.max_height))

            await page.set_viewport_size({"width": width, "height": height})
            image = await page.screenshot(
                type="jpeg",
                quality=settings.jpeg_quality,
                clip={"x": 0, "y": 0, "width": width, "height": height},
            )
        finally:
            await browser.close()

    logger.info(
        "Screenshot captured",
        extra={"target_url": target_url, "viewport": Viewport(viewport).value, "height": height},
    )
    return ScreenshotResponse(
        screenshot=to_data_uri(image),
        is_iframe_allowed=is_iframe_allowed(headers),
        width=width,
        height=height,
    )
