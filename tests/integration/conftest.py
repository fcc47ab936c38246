"""Shared fixtures for integration tests.

Each test module gates itself on RUN_MOYSKLAD_NETWORK_TESTS=1 with its own
``pytestmark``; a ``pytestmark`` here would not apply to them.
"""

import os

import pytest


@pytest.fixture
def token() -> str:
    value = os.environ.get("MOYSKLAD_TOKEN")
    if not value:
        pytest.skip("MOYSKLAD_TOKEN is not set")
    return value
