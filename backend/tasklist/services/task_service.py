"""Task Service — imperative shell around the pure pagination core.

Invariants:
    - Mutations (create/update/delete) go straight to the repository
    - list_tasks takes exactly one snapshot per call and paginates it in core
    - Errors from core and repository propagate unchanged (no retries)

Design Decisions:
    - Repository injected, not imported: routes pass the store dependency,
      tests pass a fresh InMemoryTaskStore
    - Sort token parsed here, not in the route: all input validation yields
      the same ValidationError type
"""

import logging
from typing import Iterable

from tasklist.core.domain_types import DEFAULT_PAGE_SIZE, SortDirection, TaskId
from tasklist.core.paginate import EmptyPage, Page, paginate
from tasklist.core.repository_protocols import TaskRepository
from tasklist.core.task import Task, new_task

logger = logging.getLogger(__name__)


class TaskService:
    """Create, read, list, update and delete tasks."""

    def __init__(self, repository: TaskRepository):
        self._repository = repository

    def create(
        self, title: str, description: str = "", tags: Iterable[str] = (),
    ) -> Task:
        task = new_task(title, description, tags)
        self._repository.insert(task)
        logger.info("Task created", extra={"task_id": task.id})
        return task

    def get(self, task_id: str) -> Task:
        return self._repository.find_by_id(TaskId(task_id))

    def list_tasks(
        self,
        page_size: int | None = None,
        sort: str | None = None,
        cursor_id: str | None = None,
    ) -> Page | EmptyPage:
        direction = SortDirection.parse(sort)
        size = DEFAULT_PAGE_SIZE if page_size is None else page_size
        logger.debug(
            "Listing tasks",
            extra={"page_size": size, "sort": direction.value, "cursor_id": cursor_id},
        )
        return paginate(self._repository.snapshot(), size, direction, cursor_id)

    def update(
        self,
        task_id: str,
        title: str,
        description: str = "",
        tags: Iterable[str] = (),
    ) -> Task:
        existing = self._repository.find_by_id(TaskId(task_id))
        updated = existing.with_fields(title, description, tags)
        self._repository.replace(existing.id, updated)
        logger.info("Task updated", extra={"task_id": updated.id})
        return updated

    def delete(self, task_id: str) -> None:
        self._repository.remove(TaskId(task_id))
        logger.info("Task deleted", extra={"task_id": task_id})
