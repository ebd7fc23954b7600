"""Error Hierarchy — typed, categorized exceptions for all task list failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Messages echo the offending value verbatim so callers can self-correct
    - Both domain kinds (validation, not found) are recoverable and map to 400
    - to_response() produces the REST envelope rendered by api/error_handlers.py

Design Decisions:
    - Single hierarchy with TaskListError base: FastAPI global handler catches all
    - ErrorContext as dataclass: offending field/value travel with the error
      without coupling to logging
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Offending input attached to an error."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    field: str | None = None
    value: Any = None


class TaskListError(Exception):
    """Base exception for all task list errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "field": self.context.field,
                    "value": self.context.value,
                },
            }
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class ValidationError(TaskListError):
    """Out-of-range or unresolvable input (page size, cursor, sort token)."""
    def __init__(self, message: str, field: str, value: Any = None):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, ErrorContext(field=field, value=value), 400,
        )
        self.field = field
        self.value = value


class NotFoundError(TaskListError):
    """Operation addressed a task id that is not in the store."""
    def __init__(self, task_id: str):
        super().__init__(
            f"task id {task_id} not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, ErrorContext(field="id", value=task_id), 400,
        )
        self.task_id = task_id
