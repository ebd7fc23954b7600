"""Task Schemas — Pydantic models with field-level validation for API boundaries.

Invariants:
    - title: required, stripped, non-empty
    - description defaults to "", tags default to []
    - TaskCreate carries no id: the server always generates it
    - TaskResponse mirrors core.task.Task field for field

Design Decisions:
    - field_validator for side-effect-free transforms (strip) — keeps models pure
    - TaskResponse built from attributes: core Task stays framework-free
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from tasklist.core.task import Task


class TaskCreate(BaseModel):
    """Task creation — a client-supplied id is ignored."""
    title: str = Field(min_length=1, max_length=500)
    description: str = Field("", max_length=10_000)
    tags: list[str] = Field(default_factory=list)

    @field_validator("title")
    @classmethod
    def strip_title(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("title cannot be empty or whitespace")
        return v


class TaskUpdate(TaskCreate):
    """Full replacement of an existing task, addressed by id."""
    id: str = Field(min_length=1)


class TaskResponse(BaseModel):
    """Task response — the externally visible shape of a task."""
    model_config = ConfigDict(from_attributes=True)

    id: str
    title: str
    description: str
    tags: list[str]

    @classmethod
    def from_task(cls, task: Task) -> "TaskResponse":
        return cls.model_validate(task)
