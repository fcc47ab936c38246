"""Translation of failed HTTP responses into library exceptions."""

from __future__ import annotations

import json
from typing import Any, NoReturn

import aiohttp

from ...core.exceptions import MoyskladApiError, MoyskladError, RateLimitError


def _parse_retry_after(value: str | None) -> float | None:
    if value is None:
        return None
    try:
        return float(value)
    except ValueError:
        return None


def _raise(
    message: str,
    response: aiohttp.ClientResponse,
    *,
    code: int | None = None,
    more_info: str | None = None,
) -> NoReturn:
    if response.status == 429:
        raise RateLimitError(
            message,
            retry_after=_parse_retry_after(response.headers.get("Retry-After")),
            code=code,
            more_info=more_info,
        )
    if code is not None:
        raise MoyskladApiError(
            message, status_code=response.status, code=code, more_info=more_info
        )
    raise MoyskladError(message, status_code=response.status)


def _first_api_error(data: Any) -> dict[str, Any] | None:
    """Return the first well-formed entry of an ``errors`` array, if any."""
    if not isinstance(data, dict):
        return None
    errors = data.get("errors")
    if not isinstance(errors, list) or not errors:
        return None
    error = errors[0]
    if (
        isinstance(error, dict)
        and isinstance(error.get("code"), int)
        and isinstance(error.get("error"), str)
        and isinstance(error.get("moreInfo"), str)
    ):
        return error
    return None


async def raise_for_response(response: aiohttp.ClientResponse) -> NoReturn:
    """Raise the exception describing a failed response.

    Args:
        response: Response with a non-success status

    Raises:
        RateLimitError: For 429 responses
        MoyskladApiError: When the body carries a structured service error
        MoyskladError: Otherwise
    """
    content_type = response.headers.get("Content-Type")
    if content_type is None:
        _raise("Response has no Content-Type header", response)
    if "application/json" not in content_type:
        _raise("Response Content-Type is not application/json", response)

    text = await response.text()
    if not text:
        _raise("Response body is empty", response)

    try:
        data = json.loads(text)
    except json.JSONDecodeError:
        _raise(f"HTTP {response.status} {response.reason}: response body is not JSON", response)

    # Batch requests answer with one error object per element
    if isinstance(data, list) and data:
        data = data[0]

    api_error = _first_api_error(data)
    if api_error is not None:
        _raise(
            api_error["error"],
            response,
            code=api_error["code"],
            more_info=api_error["moreInfo"],
        )

    _raise(f"HTTP {response.status} {response.reason}", response)
