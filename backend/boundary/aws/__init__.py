"""
AWS boundary modules.

Exports: S3ScreenshotClient
"""

from .s3_client import S3ScreenshotClient

__all__ = ["S3ScreenshotClient"]
