"""Core enums and exceptions."""

from .enums import CounterpartyCompanyType, Entity, MediaType, OrderDirection
from .exceptions import (
    MoyskladApiError,
    MoyskladError,
    RateLimitError,
    ResponseFormatError,
)

__all__ = [
    "CounterpartyCompanyType",
    "Entity",
    "MediaType",
    "OrderDirection",
    "MoyskladError",
    "MoyskladApiError",
    "RateLimitError",
    "ResponseFormatError",
]
