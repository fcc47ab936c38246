"""Security models."""

from __future__ import annotations

from pydantic import Field

from .base import RemapModel


class AccessToken(RemapModel):
    """Access token issued by ``/security/token``."""

    # Snake-case on the wire, unlike every other payload
    access_token: str = Field(alias="access_token")
