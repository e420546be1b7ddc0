"""
Repository factory selecting the storage adapter.

Depends on the STORAGE_BACKEND environment variable: "sql" (default),
"memory" or "file".

Dependencies: backend.boundary.repositories, backend.configs
System role: Storage adapter instantiation and selection
"""

import logging
from dataclasses import dataclass
from functools import lru_cache

from backend.boundary.db.connection import get_async_session_factory
from backend.boundary.repositories.base import CommentRepository, SessionRepository
from backend.boundary.repositories.file_repository import (
    FileCommentRepository,
    FileSessionRepository,
    FileStore,
)
from backend.boundary.repositories.memory_repository import (
    MemoryCommentRepository,
    MemorySessionRepository,
    MemoryStore,
)
from backend.boundary.repositories.sql_repository import SqlCommentRepository, SqlSessionRepository
from backend.configs import get_settings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Repositories:
    """Session and comment repositories sharing one backing store."""

    sessions: SessionRepository
    comments: CommentRepository


@lru_cache
def get_memory_store() -> MemoryStore:
    return MemoryStore()


@lru_cache
def get_file_store(path: str) -> FileStore:
    return FileStore(path)


def get_repositories() -> Repositories:
    """
    Build the repositories for the configured storage backend.

    Returns:
        Repositories: Adapter pair for STORAGE_BACKEND

    Raises:
        ValueError: If STORAGE_BACKEND is invalid
    """
    storage = get_settings().storage
    backend = storage.backend.lower()

    if backend == "sql":
        session_factory = get_async_session_factory()
        return Repositories(
            sessions=SqlSessionRepository(session_factory),
            comments=SqlCommentRepository(session_factory),
        )

    if backend == "memory":
        store = get_memory_store()
        return Repositories(
            sessions=MemorySessionRepository(store),
            comments=MemoryCommentRepository(store),
        )

    if backend == "file":
        store = get_file_store(storage.file_path)
        return Repositories(
            sessions=FileSessionRepository(store),
            comments=FileCommentRepository(store),
        )

    raise ValueError(
        f"Invalid STORAGE_BACKEND: {backend}. Must be 'sql', 'memory' or 'file'."
    )
