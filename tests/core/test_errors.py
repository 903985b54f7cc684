"""Error Hierarchy — status codes, categories and wire envelope.

Tests:
    - Every error serializes to {"error": message}
    - Not-found message matches "Project with id <id> not found"
    - Status codes: validation 400, not-found 404, database 500, timeout 504
"""

from changelogger.core.errors import (
    ChangeLoggerError, DatabaseError, ErrorCategory, ErrorSeverity,
    OperationTimeoutError, ResourceNotFoundError, ValidationError,
)


def test_not_found_message_and_status():
    err = ResourceNotFoundError("Project", "1")
    assert err.message == "Project with id 1 not found"
    assert err.http_status == 404
    assert err.category == ErrorCategory.RESOURCE_NOT_FOUND
    assert err.context.project_id == "1"
    assert err.to_response() == {"error": "Project with id 1 not found"}


def test_validation_error_is_client_error():
    err = ValidationError("Invalid request data")
    assert err.http_status == 400
    assert err.severity == ErrorSeverity.WARNING
    assert err.to_response() == {"error": "Invalid request data"}


def test_database_error_is_500():
    err = DatabaseError("unable to complete request", "query")
    assert err.http_status == 500
    assert err.operation == "query"
    assert err.context.operation == "query"
    assert err.message == "Database query failed: unable to complete request"


def test_timeout_error_is_504():
    err = OperationTimeoutError("list", 1.5)
    assert err.http_status == 504
    assert err.category == ErrorCategory.TIMEOUT
    assert "1.5" in err.message


def test_all_errors_share_base():
    for err in (
        ValidationError("x"),
        ResourceNotFoundError("Project", "1"),
        DatabaseError("x", "query"),
        OperationTimeoutError("get", 1),
    ):
        assert isinstance(err, ChangeLoggerError)
        assert str(err) == err.message
