"""
HTTP client for the screenshot microservice.

Dependencies: httpx
System role: Outbound call from the API to the Playwright capture service
"""

import logging

import httpx

from backend.core.exceptions import ScreenshotServiceError
from backend.models.comment import Viewport
from backend.models.screenshot import ScreenshotResponse

logger = logging.getLogger(__name__)


class ScreenshotServiceClient:
    """Forwards capture requests to POST {service_url}/screenshot."""

    def __init__(
        self,
        service_url: str,
        timeout: float = 60.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._service_url = service_url.rstrip("/")
        self._timeout = timeout
        self._transport = transport

    async def capture(self, target_url: str, viewport: Viewport) -> ScreenshotResponse:
        """
        Request a screenshot of target_url.

        Raises:
            ScreenshotServiceError: With the upstream status, error and details
                when the service answers non-2xx, or 502 when unreachable
        """
        payload = {"targetUrl": target_url, "viewport": Viewport(viewport).value}
        try:
            async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
                response = await client.post(f"{self._service_url}/screenshot", json=payload)
        except httpx.HTTPError as e:
            logger.error(
                "Screenshot service unreachable",
                extra={"service_url": self._service_url, "error": str(e)},
            )
            raise ScreenshotServiceError(
                "Failed to reach screenshot service", status_code=502, upstream_details=str(e)
            ) from e

        if response.is_error:
            try:
                body = response.json()
            except ValueError:
                body = {}
            error = body.get("error") or "Screenshot capture failed"
            logger.warning(
                "Screenshot service returned an error",
                extra={"status_code": response.status_code, "error": error},
            )
            raise ScreenshotServiceError(
                error,
                status_code=response.status_code,
                upstream_details=body.get("details"),
            )

        return ScreenshotResponse.model_validate(response.json())
