"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - TaskId wraps str — ids are opaque, never parsed or compared by shape
    - DEFAULT_PAGE_SIZE (10) and MAX_PAGE_SIZE (100) are the single source of truth
    - SortDirection accepts only "asc" / "desc", case-insensitively

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enum: serializes to JSON without custom encoders
"""

from enum import Enum
from typing import NewType

from tasklist.core.errors import ValidationError


# ─── Identity Types ──────────────────────────────────────────────

TaskId = NewType("TaskId", str)


# ─── Pagination Limits ───────────────────────────────────────────

DEFAULT_PAGE_SIZE: int = 10
MAX_PAGE_SIZE: int = 100


# ─── Enums ───────────────────────────────────────────────────────

class SortDirection(str, Enum):
    """Listing order. ASC is insertion order, DESC its reverse."""
    ASC = "asc"
    DESC = "desc"

    @classmethod
    def parse(cls, raw: str | None) -> "SortDirection":
        """Resolve a query token (any case). None means the default, DESC."""
        if raw is None:
            return cls.DESC
        try:
            return cls(raw.strip().lower())
        except ValueError:
            allowed = ", ".join(d.value for d in cls)
            raise ValidationError(
                f"sort direction '{raw}' is not recognized, expected one of: {allowed}",
                field="sort",
                value=raw,
            ) from None
