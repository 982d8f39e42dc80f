"""Error Hierarchy - verifies codes, statuses and REST envelopes.

Tests:
    - ValidationFailedError joins messages and lists them as details
    - UserNotFoundError is a 404 ResourceNotFoundError carrying the id
    - PersistenceError is a critical 503
"""

from user_api.core.errors import (
    ErrorCategory, ErrorSeverity, PersistenceError, ResourceNotFoundError,
    UserApiError, UserNotFoundError, ValidationFailedError,
)


def test_validation_failed_joins_messages():
    err = ValidationFailedError(["name is required", "dateOfBirth is required"])
    assert str(err) == "name is required; dateOfBirth is required"
    assert err.http_status == 400
    assert err.category == ErrorCategory.VALIDATION


def test_validation_failed_response_lists_details():
    err = ValidationFailedError(["name is required"])
    body = err.to_response()["error"]
    assert body["code"] == "VALIDATION_ERROR"
    assert body["message"] == "name is required"
    assert body["details"] == ["name is required"]


def test_user_not_found_is_resource_not_found():
    err = UserNotFoundError(42)
    assert isinstance(err, ResourceNotFoundError)
    assert isinstance(err, UserApiError)
    assert err.http_status == 404
    assert err.user_id == 42
    assert err.message == "User '42' not found"


def test_user_not_found_response_carries_user_id():
    body = UserNotFoundError(7).to_response()["error"]
    assert body["code"] == "RESOURCE_NOT_FOUND"
    assert body["context"]["user_id"] == 7
    assert "timestamp" in body


def test_persistence_error_is_critical_server_error():
    err = PersistenceError("Connection or operational error", "execute")
    assert err.http_status == 503
    assert err.severity == ErrorSeverity.CRITICAL
    assert err.operation == "execute"
    assert err.to_response()["error"]["code"] == "PERSISTENCE_ERROR"
