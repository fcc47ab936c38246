"""Unit tests for the exception hierarchy.

Tests focus on meaningful behavior, not just field access.
"""

from moysklad.remap.core import (
    MoyskladApiError,
    MoyskladError,
    RateLimitError,
    ResponseFormatError,
)


def test_rate_limit_error_with_retry_after():
    error = RateLimitError("rate limit", retry_after=3, code=1049)
    assert error.status_code == 429
    assert error.retry_after == 3
    assert error.code == 1049
    assert isinstance(error, MoyskladApiError)
    assert isinstance(error, MoyskladError)


def test_api_error_carries_service_details():
    error = MoyskladApiError("not found", status_code=404, code=1021, more_info="https://x")
    assert str(error) == "not found"
    assert error.message == "not found"
    assert error.status_code == 404
    assert error.more_info == "https://x"


def test_base_error_without_status():
    error = MoyskladError("boom")
    assert error.status_code is None


def test_response_format_error_is_library_error():
    assert issubclass(ResponseFormatError, MoyskladError)
