"""Error Hierarchy — verifies codes, statuses and the REST envelope.

Tests:
    - ValidationError and NotFoundError are 400-level TaskListErrors
    - NotFoundError message names the id verbatim
    - to_response() envelope carries code, message, category and context
"""

from tasklist.core.errors import (
    ErrorCategory, ErrorSeverity, NotFoundError, TaskListError, ValidationError,
)


def test_validation_error_shape():
    exc = ValidationError("page size 101 exceeds maximum 100", field="limit", value=101)
    assert isinstance(exc, TaskListError)
    assert exc.code == "VALIDATION_ERROR"
    assert exc.category is ErrorCategory.VALIDATION
    assert exc.http_status == 400
    assert str(exc) == "page size 101 exceeds maximum 100"


def test_not_found_error_names_id():
    exc = NotFoundError("1234")
    assert exc.message == "task id 1234 not found"
    assert exc.code == "RESOURCE_NOT_FOUND"
    assert exc.http_status == 400
    assert exc.task_id == "1234"


def test_domain_errors_are_recoverable():
    assert ValidationError("x", field="f").severity is ErrorSeverity.WARNING
    assert NotFoundError("x").severity is ErrorSeverity.WARNING


def test_to_response_envelope():
    body = NotFoundError("abc").to_response()
    error = body["error"]
    assert error["code"] == "RESOURCE_NOT_FOUND"
    assert error["message"] == "task id abc not found"
    assert error["category"] == "resource_not_found"
    assert error["severity"] == "warning"
    assert error["context"] == {"field": "id", "value": "abc"}
    assert "timestamp" in error
