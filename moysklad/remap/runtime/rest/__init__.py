"""REST runtime abstractions."""

from .errors import raise_for_response
from .http_client import HTTPClient
from .query import compose_search_parameters

__all__ = [
    "HTTPClient",
    "compose_search_parameters",
    "raise_for_response",
]
