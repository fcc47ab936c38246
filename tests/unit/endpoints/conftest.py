"""Shared fixtures for endpoint tests."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest

from moysklad.remap.config import TokenAuth
from moysklad.remap.runtime.batching import BatchGetOptions
from moysklad.remap.runtime.rest import HTTPClient

BASE = "https://api.moysklad.ru/api/remap/1.2"


def _list_payload(path: str, rows: list[dict], *, size: int, limit: int = 1000, offset: int = 0) -> dict:
    return {
        "context": {
            "employee": {"meta": {"href": f"{BASE}/context/employee", "type": "employee"}}
        },
        "meta": {
            "href": f"{BASE}{path}",
            "size": size,
            "limit": limit,
            "offset": offset,
        },
        "rows": rows,
    }


@pytest.fixture
def mock_client():
    """HTTPClient with mocked request methods and real URL building."""
    real = HTTPClient(TokenAuth("t"))
    client = MagicMock(spec=HTTPClient)
    client.batch_get_options = BatchGetOptions()
    client.build_url = real.build_url
    client.get = AsyncMock()
    client.post = AsyncMock()
    client.put = AsyncMock()
    client.delete = AsyncMock()
    return client


@pytest.fixture
def list_payload():
    """Factory for list envelopes as returned by collection endpoints."""
    return _list_payload
