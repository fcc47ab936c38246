"""Async HTTP client for the remap API."""

from __future__ import annotations

import base64
import logging
import re
from collections.abc import Mapping, Sequence
from typing import Any

import aiohttp

from ...config import BASE_URL, DEFAULT_TIMEOUT, USER_AGENT, Auth, TokenAuth
from ...core.exceptions import ResponseFormatError
from ..batching.definitions import BatchGetOptions
from .errors import raise_for_response

logger = logging.getLogger(__name__)

_REPEATED_SLASHES = re.compile(r"/{2,}")


class HTTPClient:
    """Async HTTP client wrapper.

    Holds one lazily created ``aiohttp.ClientSession`` and adds
    authentication and the service's required headers to every request.
    Failed responses are turned into library exceptions.
    """

    def __init__(
        self,
        auth: Auth,
        *,
        base_url: str = BASE_URL,
        user_agent: str = USER_AGENT,
        timeout: float = DEFAULT_TIMEOUT,
        batch_get_options: BatchGetOptions | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.user_agent = user_agent
        self.timeout = aiohttp.ClientTimeout(total=timeout)
        self.batch_get_options = batch_get_options or BatchGetOptions()
        self._auth = auth
        self._session: aiohttp.ClientSession | None = None

    @property
    def auth(self) -> Auth:
        """Credentials used for every request."""
        return self._auth

    @property
    def session(self) -> aiohttp.ClientSession:
        """Get or create session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(timeout=self.timeout)
        return self._session

    @property
    def headers(self) -> dict[str, str]:
        """Headers sent with every request."""
        if isinstance(self._auth, TokenAuth):
            authorization = f"Bearer {self._auth.token}"
        else:
            credentials = f"{self._auth.login}:{self._auth.password}".encode()
            authorization = f"Basic {base64.b64encode(credentials).decode('ascii')}"
        return {
            "Authorization": authorization,
            "User-Agent": self.user_agent,
            "Content-Type": "application/json",
            "Accept": "application/json;charset=utf-8",
            "Accept-Encoding": "gzip",
        }

    def build_url(self, path: str | Sequence[str]) -> str:
        """Build an absolute URL.

        Relative paths are joined to the base URL; absolute ``http`` URLs
        (such as ``meta.href`` values) are kept. Repeated slashes are collapsed.

        Examples:
            >>> HTTPClient(TokenAuth("t")).build_url(["entity", "product", "42"])
            'https://api.moysklad.ru/api/remap/1.2/entity/product/42'
        """
        joined = path if isinstance(path, str) else "/".join(path)
        if not joined.startswith("http"):
            joined = f"{self.base_url}/{joined}"
        scheme, separator, rest = joined.partition("://")
        if not separator:
            return _REPEATED_SLASHES.sub("/", joined)
        return f"{scheme}{separator}{_REPEATED_SLASHES.sub('/', rest)}"

    async def request(
        self,
        method: str,
        path: str | Sequence[str],
        *,
        params: Mapping[str, str] | None = None,
        json_body: Any = None,
    ) -> Any:
        """Send a request and decode its JSON body.

        Returns:
            Decoded JSON, or None for an empty body

        Raises:
            MoyskladError: For non-success responses (see ``raise_for_response``)
            ResponseFormatError: If a success response is not valid JSON
        """
        url = self.build_url(path)
        logger.debug("http_request", extra={"method": method, "url": url, "params": params})

        async with self.session.request(
            method, url, params=params, json=json_body, headers=self.headers
        ) as response:
            if response.status >= 400:
                await raise_for_response(response)
            try:
                return await response.json(content_type=None)
            except ValueError as e:
                raise ResponseFormatError(
                    f"Response body is not valid JSON: {e}", status_code=response.status
                ) from e

    async def get(self, path: str | Sequence[str], params: Mapping[str, str] | None = None) -> Any:
        """GET request."""
        return await self.request("GET", path, params=params)

    async def post(
        self,
        path: str | Sequence[str],
        json_body: Any = None,
        params: Mapping[str, str] | None = None,
    ) -> Any:
        """POST request."""
        return await self.request("POST", path, params=params, json_body=json_body)

    async def put(
        self,
        path: str | Sequence[str],
        json_body: Any = None,
        params: Mapping[str, str] | None = None,
    ) -> Any:
        """PUT request."""
        return await self.request("PUT", path, params=params, json_body=json_body)

    async def delete(self, path: str | Sequence[str]) -> Any:
        """DELETE request."""
        return await self.request("DELETE", path)

    async def close(self) -> None:
        """Close session."""
        if self._session and not self._session.closed:
            await self._session.close()

    async def __aenter__(self) -> HTTPClient:
        """Context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        await self.close()
