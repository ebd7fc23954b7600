"""Domain Types — verifies sort direction parsing and pagination constants.

Tests:
    - SortDirection accepts asc/desc in any case, defaults to DESC
    - Unknown sort tokens raise ValidationError naming the token
    - Page size constants match the documented limits
"""

import pytest

from tasklist.core.domain_types import (
    DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE, SortDirection, TaskId,
)
from tasklist.core.errors import ValidationError


def test_task_id_wraps_str():
    assert TaskId("abc") == "abc"


def test_page_size_constants():
    assert DEFAULT_PAGE_SIZE == 10
    assert MAX_PAGE_SIZE == 100


def test_sort_direction_has_two_members():
    assert set(SortDirection) == {SortDirection.ASC, SortDirection.DESC}


@pytest.mark.parametrize("raw,expected", [
    ("asc", SortDirection.ASC),
    ("ASC", SortDirection.ASC),
    ("Desc", SortDirection.DESC),
    (" desc ", SortDirection.DESC),
])
def test_sort_direction_parse_is_case_insensitive(raw, expected):
    assert SortDirection.parse(raw) is expected


def test_sort_direction_defaults_to_desc():
    assert SortDirection.parse(None) is SortDirection.DESC


def test_unknown_sort_direction_is_rejected():
    with pytest.raises(ValidationError) as exc_info:
        SortDirection.parse("sideways")
    assert "sideways" in exc_info.value.message
    assert exc_info.value.field == "sort"
