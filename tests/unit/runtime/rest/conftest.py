"""Shared fixtures for REST transport tests."""

from __future__ import annotations

import json
from unittest.mock import AsyncMock, MagicMock

import pytest


def make_response(
    status: int = 200,
    body: object = None,
    *,
    text: str | None = None,
    content_type: str | None = "application/json; charset=utf-8",
    reason: str = "OK",
    headers: dict[str, str] | None = None,
) -> MagicMock:
    """Build a mock aiohttp response usable as an async context manager."""
    if text is None:
        text = "" if body is None else json.dumps(body)

    response_headers = dict(headers or {})
    if content_type is not None:
        response_headers["Content-Type"] = content_type

    response = MagicMock()
    response.status = status
    response.reason = reason
    response.headers = response_headers
    response.text = AsyncMock(return_value=text)
    if text:
        response.json = AsyncMock(side_effect=lambda content_type=None: json.loads(text))
    else:
        response.json = AsyncMock(return_value=None)
    response.__aenter__ = AsyncMock(return_value=response)
    response.__aexit__ = AsyncMock(return_value=None)
    return response


@pytest.fixture
def response_factory():
    return make_response
