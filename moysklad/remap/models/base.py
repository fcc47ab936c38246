"""Base model configuration and shared field types."""

from __future__ import annotations

from datetime import datetime
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict, PlainSerializer
from pydantic.alias_generators import to_camel

from ..utils.datetime import compose_datetime, parse_datetime


def _parse_service_datetime(value: Any) -> Any:
    if isinstance(value, str):
        return parse_datetime(value)
    return value


# Timestamp in the service's "YYYY-MM-DD HH:MM:SS.fff" Moscow-time format
ServiceDateTime = Annotated[
    datetime,
    BeforeValidator(_parse_service_datetime),
    PlainSerializer(lambda v: compose_datetime(v, include_ms=True), return_type=str),
]


class RemapModel(BaseModel):
    """Base for all response models.

    Field names are snake_case in Python and camelCase on the wire. Unknown
    fields are kept, since the service adds fields without notice.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="allow",
        populate_by_name=True,
        alias_generator=to_camel,
    )

    def to_payload(self) -> dict[str, Any]:
        """Serialize for a request body (camelCase, None fields dropped)."""
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")
