"""
Annotation canvas defaults.

Dependencies: pydantic_settings
System role: Session canvas sizing configuration
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AnnotationSettings(BaseSettings):
    """Canvas sizing defaults shared by sessions and the canvas controller."""

    model_config = SettingsConfigDict(
        env_prefix="ANNOTATION_",
        case_sensitive=False,
        extra="ignore",
    )

    default_canvas_height: int = Field(default=3000, description="Initial virtual canvas height in px")
    canvas_height_increment: int = Field(default=500, description="Pixels added per canvas extension")
