"""Error Hierarchy — verifies codes, categories, statuses and REST envelope."""

from storefront.core.errors import (
    CollectionConsumedError, DatabaseError, ErrorCategory, ErrorContext,
    ErrorSeverity, StorefrontError,
)


def test_database_error_is_critical_503():
    err = DatabaseError("Connection or operational error", "execute")
    assert isinstance(err, StorefrontError)
    assert err.code == "DATABASE_ERROR"
    assert err.category is ErrorCategory.DATABASE
    assert err.severity is ErrorSeverity.CRITICAL
    assert err.http_status == 503
    assert err.operation == "execute"
    assert err.message == "Database execute failed: Connection or operational error"


def test_collection_consumed_is_internal():
    err = CollectionConsumedError()
    assert err.code == "COLLECTION_CONSUMED"
    assert err.category is ErrorCategory.INTERNAL


def test_database_error_envelope_carries_operation_only():
    ctx = ErrorContext()
    body = DatabaseError("boom", "stream", context=ctx).to_response()
    error = body["error"]
    assert error["code"] == "DATABASE_ERROR"
    assert error["category"] == "database"
    assert error["severity"] == "critical"
    assert error["details"] == {"operation": "stream"}
    assert "context" not in error
    assert error["timestamp"] == ctx.timestamp.isoformat()


def test_envelope_omits_details_when_error_has_none():
    error = CollectionConsumedError().to_response()["error"]
    assert "details" not in error
    assert error["category"] == "internal"


def test_user_message_overrides_internal_message():
    ctx = ErrorContext(user_message="Please retry later")
    body = DatabaseError("socket closed", "stream", context=ctx).to_response()
    assert body["error"]["message"] == "Please retry later"
