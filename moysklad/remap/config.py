"""Shared client constants and credential types.

This module centralizes the service URL, request defaults and batch
retrieval limits so the transport and endpoints can stay small.
"""

from __future__ import annotations

from dataclasses import dataclass

VERSION = "0.1.0"

BASE_URL = "https://api.moysklad.ru/api/remap/1.2"

USER_AGENT = f"moysklad-remap/{VERSION} (+https://github.com/moysklad-remap/moysklad-remap)"

# Total per-request timeout in seconds, enforced by aiohttp
DEFAULT_TIMEOUT = 30.0

# Hard maximum of rows per list request accepted by the service
MAX_PAGE_SIZE = 1000

# The service caps list requests with expand at 100 rows
DEFAULT_EXPAND_LIMIT = 100

DEFAULT_CONCURRENCY_LIMIT = 3


@dataclass(frozen=True)
class TokenAuth:
    """Bearer token credentials."""

    token: str


@dataclass(frozen=True)
class BasicAuth:
    """Login/password credentials sent as HTTP Basic auth."""

    login: str
    password: str


Auth = TokenAuth | BasicAuth
