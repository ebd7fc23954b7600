"""Task Record — the immutable value stored in the task list.

Invariants:
    - id is assigned once by new_task() and never changes
    - Task is frozen: updates produce a new Task with the same id
    - tags keep the order they were given in

Design Decisions:
    - uuid4 text ids: collision-resistant without coordination between requests;
      uniqueness is probabilistic, the store does not re-check it
    - tuple for tags: keeps the frozen dataclass hashable and snapshot-safe
"""

import uuid
from dataclasses import dataclass, replace
from typing import Iterable

from tasklist.core.domain_types import TaskId


@dataclass(frozen=True)
class Task:
    id: TaskId
    title: str
    description: str = ""
    tags: tuple[str, ...] = ()

    def with_fields(
        self, title: str, description: str = "", tags: Iterable[str] = (),
    ) -> "Task":
        """Same id, every other field replaced."""
        return replace(
            self, title=title, description=description, tags=tuple(tags),
        )


def new_task_id() -> TaskId:
    return TaskId(str(uuid.uuid4()))


def new_task(
    title: str, description: str = "", tags: Iterable[str] = (),
) -> Task:
    """Build a Task with a freshly generated id."""
    return Task(
        id=new_task_id(), title=title, description=description, tags=tuple(tags),
    )
