"""Service test fixtures — FastAPI test client over a fresh in-memory store.

Invariants:
    - Every test gets its own InMemoryTaskStore
    - get_task_store dependency overridden, the module singleton is never touched

Design Decisions:
    - httpx AsyncClient + ASGITransport: exercises routing, serialization and
      error handlers without a running server
"""

import pytest
from httpx import ASGITransport, AsyncClient

from tasklist.infrastructure.task_store import get_task_store
from tasklist.main import app


@pytest.fixture
async def client(store):
    """FastAPI test client with the store dependency overridden."""
    app.dependency_overrides[get_task_store] = lambda: store

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()


@pytest.fixture
async def created_todos(client):
    """POST Task #01..#15 through the API, return the response bodies in order."""
    todos = []
    for n in range(1, 16):
        res = await client.post("/api/v1/todos", json={"title": f"Task #{n:02d}"})
        todos.append(res.json())
    return todos
