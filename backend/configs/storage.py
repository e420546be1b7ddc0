"""
Comment store configuration.

Selects the repository adapter backing sessions and comments.

Dependencies: pydantic_settings
System role: Persistence adapter selection
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class StorageSettings(BaseSettings):
    """Repository backend selection (sql, memory, file)."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="STORAGE_",
        case_sensitive=False,
        extra="ignore",
    )

    backend: str = Field(
        default="sql",
        description="Repository backend: 'sql' (Postgres), 'memory' (process-local) or 'file' (JSON document)",
    )
    file_path: str = Field(
        default=".data/pagepin.json",
        description="JSON document path used by the 'file' backend",
    )
