"""Task Routes — CRUD and cursor-paginated listing of todos.

Invariants:
    - Routes never contain pagination logic (delegate to TaskService)
    - EmptyPage renders as 204 No Content, never as 200 with []
    - Domain errors are raised, not caught: api/error_handlers.py renders them

Design Decisions:
    - limit has no upper bound in Query(): the 100 ceiling is enforced by core so
      the error message and envelope match every other validation failure
    - Query names limit / sort / cursor_id kept stable for existing clients
"""

import logging

from fastapi import APIRouter, Depends, Query, Response, status

from tasklist.core.paginate import EmptyPage
from tasklist.infrastructure.task_store import InMemoryTaskStore, get_task_store
from tasklist.schemas.task import TaskCreate, TaskResponse, TaskUpdate
from tasklist.services.task_service import TaskService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/todos", tags=["todos"])


def get_task_service(
    store: InMemoryTaskStore = Depends(get_task_store),
) -> TaskService:
    return TaskService(store)


@router.post(
    "", response_model=TaskResponse, status_code=status.HTTP_201_CREATED,
)
async def create_task(
    body: TaskCreate, service: TaskService = Depends(get_task_service),
):
    """Create a task; the id is generated server-side."""
    task = service.create(body.title, body.description, body.tags)
    return TaskResponse.from_task(task)


@router.get(
    "",
    response_model=list[TaskResponse],
    responses={status.HTTP_204_NO_CONTENT: {"description": "No tasks on this page"}},
)
async def list_tasks(
    limit: int | None = Query(None),
    sort: str | None = Query(None),
    cursor_id: str | None = Query(None),
    service: TaskService = Depends(get_task_service),
):
    """List one page of tasks, newest first unless sort=asc."""
    page = service.list_tasks(page_size=limit, sort=sort, cursor_id=cursor_id)
    if isinstance(page, EmptyPage):
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    return [TaskResponse.from_task(task) for task in page.items]


@router.get("/{task_id}", response_model=TaskResponse)
async def get_task(
    task_id: str, service: TaskService = Depends(get_task_service),
):
    """Fetch a single task by id."""
    return TaskResponse.from_task(service.get(task_id))


@router.put("", response_model=TaskResponse)
async def update_task(
    body: TaskUpdate, service: TaskService = Depends(get_task_service),
):
    """Replace title, description and tags of an existing task."""
    task = service.update(body.id, body.title, body.description, body.tags)
    return TaskResponse.from_task(task)


@router.delete("/{task_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_task(
    task_id: str, service: TaskService = Depends(get_task_service),
):
    """Delete a task by id."""
    service.delete(task_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
