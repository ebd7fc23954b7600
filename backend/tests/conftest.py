"""Root conftest — shared test configuration and store fixtures."""

import os

import pytest

# Keep test output quiet and deterministic
os.environ.setdefault("LOG_LEVEL", "WARNING")
os.environ.setdefault("LOG_FORMAT", "text")

from tasklist.core.task import Task, new_task  # noqa: E402
from tasklist.infrastructure.task_store import InMemoryTaskStore  # noqa: E402
from tasklist.services.task_service import TaskService  # noqa: E402


@pytest.fixture
def store() -> InMemoryTaskStore:
    return InMemoryTaskStore()


@pytest.fixture
def service(store) -> TaskService:
    return TaskService(store)


@pytest.fixture
def fifteen_tasks() -> list[Task]:
    """Task #01..#15 in insertion order."""
    return [new_task(f"Task #{n:02d}") for n in range(1, 16)]


@pytest.fixture
def seeded_store(store, fifteen_tasks) -> InMemoryTaskStore:
    for task in fifteen_tasks:
        store.insert(task)
    return store
