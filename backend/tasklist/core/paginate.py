"""Cursor Pagination — selects one page of tasks from a store snapshot.

Invariants:
    - Insertion order is the only ordering; DESC is its exact reverse
    - The cursor is looked up in the direction-adjusted working sequence,
      never in raw insertion order
    - Page size bounds (1..MAX_PAGE_SIZE) are checked before any slicing
    - An empty page is EmptyPage, never a Page with zero items
    - paginate is PURE: it reads the snapshot it is given and nothing else

Design Decisions:
    - Cursor is a task id, not an offset: pages stay consistent when tasks are
      inserted or removed inside already-returned ranges
    - A cursor naming a task that no longer exists is a ValidationError, not an
      exhausted listing (clients must restart from the first page)
"""

from dataclasses import dataclass
from typing import Sequence

from tasklist.core.domain_types import (
    DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE, SortDirection, TaskId,
)
from tasklist.core.errors import ValidationError
from tasklist.core.task import Task


@dataclass(frozen=True)
class Page:
    """A non-empty batch of tasks in the requested order."""
    items: tuple[Task, ...]

    @property
    def next_cursor(self) -> TaskId:
        """Id to pass as cursor_id to fetch the following page."""
        return self.items[-1].id

    def __len__(self) -> int:
        return len(self.items)


@dataclass(frozen=True)
class EmptyPage:
    """Nothing left to return: empty store or cursor at the end."""


def check_page_size(page_size: int) -> int:
    if page_size > MAX_PAGE_SIZE:
        raise ValidationError(
            f"page size {page_size} exceeds maximum {MAX_PAGE_SIZE}",
            field="limit", value=page_size,
        )
    if page_size < 1:
        raise ValidationError(
            f"page size {page_size} must be at least 1",
            field="limit", value=page_size,
        )
    return page_size


def working_sequence(
    snapshot: Sequence[Task], sort: SortDirection,
) -> list[Task]:
    """Snapshot in the order the page is cut from."""
    if sort == SortDirection.DESC:
        return list(reversed(snapshot))
    return list(snapshot)


def cursor_start(working: Sequence[Task], cursor_id: str | None) -> int:
    """Index of the first task after the cursor (0 without a cursor)."""
    if cursor_id is None:
        return 0
    for index, task in enumerate(working):
        if task.id == cursor_id:
            return index + 1
    raise ValidationError(
        f"cursor id {cursor_id} not found", field="cursor_id", value=cursor_id,
    )


def paginate(
    snapshot: Sequence[Task],
    page_size: int = DEFAULT_PAGE_SIZE,
    sort: SortDirection = SortDirection.DESC,
    cursor_id: str | None = None,
) -> Page | EmptyPage:
    working = working_sequence(snapshot, sort)
    check_page_size(page_size)
    start = cursor_start(working, cursor_id)

    batch = working[start:start + page_size]
    if not batch:
        return EmptyPage()
    return Page(items=tuple(batch))
