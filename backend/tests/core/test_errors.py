"""Error Hierarchy — verifies status codes, codes and Retry-After headers.

Tests:
    - Rate limit error is 429 and exposes Retry-After only when known
    - Upstream failure is 502 and keeps the upstream status in context
    - Not found is 404 with the resource id in the message
    - to_response() produces the REST error envelope
"""

from employee_proxy.core.errors import (
    EmployeeNotCreatedError, ErrorCategory, ErrorContext, ResourceNotFoundError,
    UpstreamRateLimitedError, UpstreamServiceError,
)


def test_rate_limited_with_retry_after():
    err = UpstreamRateLimitedError(5)
    assert err.http_status == 429
    assert err.code == "UPSTREAM_RATE_LIMITED"
    assert err.category == ErrorCategory.RATE_LIMIT
    assert err.response_headers() == {"Retry-After": "5"}
    assert err.to_response()["error"]["context"]["retry_after_seconds"] == 5


def test_rate_limited_without_retry_after_has_no_header():
    err = UpstreamRateLimitedError()
    assert err.retry_after_seconds is None
    assert err.response_headers() == {}


def test_upstream_service_error_is_502():
    err = UpstreamServiceError("unexpected status 500", 500)
    assert err.http_status == 502
    assert err.code == "UPSTREAM_ERROR"
    assert err.context.upstream_status == 500
    assert err.response_headers() == {}


def test_not_found_message_names_resource():
    err = ResourceNotFoundError("Employee", "abc", ErrorContext(employee_id="abc"))
    assert err.http_status == 404
    assert "abc" in err.message
    body = err.to_response()["error"]
    assert body["code"] == "RESOURCE_NOT_FOUND"
    assert body["context"]["employee_id"] == "abc"


def test_not_created_is_400():
    err = EmployeeNotCreatedError()
    assert err.http_status == 400
    assert err.to_response()["error"]["category"] == "validation"
