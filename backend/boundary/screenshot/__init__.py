"""
Screenshot microservice client.

Exports: ScreenshotServiceClient
"""

from .screenshot_client import ScreenshotServiceClient

__all__ = ["ScreenshotServiceClient"]
