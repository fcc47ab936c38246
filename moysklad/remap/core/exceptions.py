"""Custom exception hierarchy."""

from __future__ import annotations


class MoyskladError(Exception):
    """Base exception for all library errors.

    Carries the HTTP status of the response that caused it, when there was one.
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class MoyskladApiError(MoyskladError):
    """Error reported by the service in a structured error body.

    The service answers failed requests with
    ``{"errors": [{"error": ..., "code": ..., "moreInfo": ...}]}``;
    the first entry is surfaced here.
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        code: int | None = None,
        more_info: str | None = None,
    ) -> None:
        super().__init__(message, status_code=status_code)
        self.code = code
        self.more_info = more_info


class RateLimitError(MoyskladApiError):
    """Service rate limit exceeded."""

    def __init__(
        self,
        message: str,
        retry_after: float | None = None,
        code: int | None = None,
        more_info: str | None = None,
    ) -> None:
        super().__init__(message, status_code=429, code=code, more_info=more_info)
        self.retry_after = retry_after


class ResponseFormatError(MoyskladError):
    """Response body does not have the expected shape."""

    pass
