"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - Storage accessed through the TaskRepository protocol only
    - Implementations provided by shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Synchronous methods: the store is in-memory and never suspends mid-operation
"""

from typing import Protocol

from tasklist.core.domain_types import TaskId
from tasklist.core.task import Task


class TaskRepository(Protocol):
    """Contract for the ordered task collection — implemented by shell.

    Lookups and mutations by id raise NotFoundError when the id is absent.
    """
    def insert(self, task: Task) -> None: ...
    def replace(self, task_id: TaskId, task: Task) -> None: ...
    def remove(self, task_id: TaskId) -> None: ...
    def find_by_id(self, task_id: TaskId) -> Task: ...
    def snapshot(self) -> tuple[Task, ...]: ...
