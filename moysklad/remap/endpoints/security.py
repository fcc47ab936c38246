"""Security endpoints (access token issuing)."""

from __future__ import annotations

from pydantic import ValidationError

from ..config import BasicAuth
from ..core.exceptions import ResponseFormatError
from ..models import AccessToken
from ..runtime.rest import HTTPClient
from .base import Endpoint


class TokenEndpoint(Endpoint):
    """``/security/token``"""

    path = "/security/token"

    async def create(self) -> AccessToken:
        """Issue a new access token for the client's login.

        The service only issues tokens to login/password credentials.

        Returns:
            The issued token

        Raises:
            ValueError: If the client is not using BasicAuth
        """
        if not isinstance(self._client.auth, BasicAuth):
            raise ValueError("Issuing an access token requires login/password credentials")
        payload = await self._client.post(self.path)
        try:
            return AccessToken.model_validate(payload)
        except ValidationError as e:
            raise ResponseFormatError(f"Malformed response from {self.path}: {e}") from e


class SecurityEndpoint(Endpoint):
    """Security section of the API.

    Example:
        >>> token = await Moysklad(login="admin@acme", password="...").security.token.create()
    """

    def __init__(self, client: HTTPClient) -> None:
        super().__init__(client)
        self.token = TokenEndpoint(client)
