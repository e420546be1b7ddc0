"""
API test fixtures: the real application wired to in-memory repositories.
"""

import pytest
from fastapi.testclient import TestClient

from backend.api.deps import get_repositories_dependency
from backend.api.main import create_app
from backend.boundary.repositories import Repositories
from backend.boundary.repositories.memory_repository import (
    MemoryCommentRepository,
    MemorySessionRepository,
    MemoryStore,
)


@pytest.fixture
def memory_store() -> MemoryStore:
    return MemoryStore()


@pytest.fixture
def app(memory_store: MemoryStore):
    app = create_app()
    repositories = Repositories(
        sessions=MemorySessionRepository(memory_store),
        comments=MemoryCommentRepository(memory_store),
    )
    app.dependency_overrides[get_repositories_dependency] = lambda: repositories
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)


@pytest.fixture
def created_session(client: TestClient) -> dict:
    response = client.post("/api/v1/sessions", json={"targetUrl": "https://example.com"})
    assert response.status_code == 201
    return response.json()
