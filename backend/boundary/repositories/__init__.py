"""
Repository adapters for sessions and comments.

Exports:
  - SessionRepository, CommentRepository: storage contracts
  - Repositories, get_repositories: adapter selection by STORAGE_BACKEND
"""

from backend.boundary.repositories.base import CommentRepository, SessionRepository
from backend.boundary.repositories.repository_factory import Repositories, get_repositories

__all__ = [
    "SessionRepository",
    "CommentRepository",
    "Repositories",
    "get_repositories",
]
