"""In-Memory Task Store — the authoritative, insertion-ordered task collection.

Invariants:
    - One lock guards every read and write of _tasks
    - snapshot() copies under the lock: readers never see a half-applied mutation
      and a snapshot never changes after it is returned
    - replace() keeps the task's position; remove() keeps the others' order
    - Missing ids raise NotFoundError (core/errors.py)

Design Decisions:
    - Module-level task_store singleton: single-process service, state lost on
      restart (no persistence)
    - threading.Lock over asyncio.Lock: operations never await, and the store
      stays correct when FastAPI runs handlers in its worker thread pool
"""

import logging
from threading import Lock

from tasklist.core.domain_types import TaskId
from tasklist.core.errors import NotFoundError
from tasklist.core.task import Task

logger = logging.getLogger(__name__)


class InMemoryTaskStore:
    """Lock-guarded list of tasks, oldest first."""

    def __init__(self) -> None:
        self._tasks: list[Task] = []
        self._lock = Lock()

    def insert(self, task: Task) -> None:
        with self._lock:
            self._tasks.append(task)

    def replace(self, task_id: TaskId, task: Task) -> None:
        with self._lock:
            index = self._index_of(task_id)
            self._tasks[index] = task

    def remove(self, task_id: TaskId) -> None:
        with self._lock:
            index = self._index_of(task_id)
            del self._tasks[index]

    def find_by_id(self, task_id: TaskId) -> Task:
        with self._lock:
            return self._tasks[self._index_of(task_id)]

    def snapshot(self) -> tuple[Task, ...]:
        with self._lock:
            return tuple(self._tasks)

    def clear(self) -> None:
        """Drop every task. Used by tests and manual resets."""
        with self._lock:
            dropped = len(self._tasks)
            self._tasks.clear()
        logger.info(f"Task store cleared ({dropped} task(s) dropped)")

    def __len__(self) -> int:
        with self._lock:
            return len(self._tasks)

    def _index_of(self, task_id: TaskId) -> int:
        # caller holds the lock
        for index, task in enumerate(self._tasks):
            if task.id == task_id:
                return index
        raise NotFoundError(task_id)


task_store = InMemoryTaskStore()


def get_task_store() -> InMemoryTaskStore:
    """FastAPI dependency — the process-wide store."""
    return task_store
