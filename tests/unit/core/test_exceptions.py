"""Precise unit tests for exception hierarchy.

Tests focus on meaningful behavior, not just field access.
"""

from dbxquery.core import (
    ClientAcquisitionError,
    ConfigurationError,
    DataSourceError,
    ErrorClass,
    QueryCancelledError,
    QueryValidationError,
    RemoteAPIError,
    ResourceKind,
    UnknownResourceKindError,
)


def test_validation_errors_are_bad_requests():
    """Test validation failures classify as bad_request."""
    error = QueryValidationError("invalid jobId", field="jobId", resource_kind=ResourceKind.JOB_RUNS)
    assert error.error_class is ErrorClass.BAD_REQUEST
    assert error.field == "jobId"
    assert error.resource_kind is ResourceKind.JOB_RUNS
    assert isinstance(error, DataSourceError)


def test_unknown_resource_kind_names_the_tag():
    """Test UnknownResourceKindError carries the offending tag."""
    error = UnknownResourceKindError("unknown")
    assert str(error) == "unknown resource kind: 'unknown'"
    assert error.value == "unknown"
    assert error.field == "resourceType"
    assert error.error_class is ErrorClass.BAD_REQUEST


def test_execution_errors_are_internal():
    """Test every non-validation failure classifies as internal."""
    for error in (
        ConfigurationError("bad settings"),
        ClientAcquisitionError("authentication is missing"),
        RemoteAPIError("HTTP 500", status_code=500),
        QueryCancelledError("query cancelled"),
    ):
        assert error.error_class is ErrorClass.INTERNAL


def test_remote_api_error_with_status_code():
    """Test RemoteAPIError with status and error code."""
    error = RemoteAPIError("not found", status_code=404, error_code="RESOURCE_DOES_NOT_EXIST")
    assert str(error) == "not found"
    assert error.status_code == 404
    assert error.error_code == "RESOURCE_DOES_NOT_EXIST"


def test_cancellation_is_a_remote_failure():
    """Test cancellation is caught wherever remote failures are."""
    error = QueryCancelledError("query deadline exceeded")
    assert isinstance(error, RemoteAPIError)
    assert error.status_code is None
