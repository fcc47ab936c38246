"""Utility functions."""

from .datetime import MOSCOW_TZ, compose_datetime, parse_datetime
from .meta import extract_id_from_meta_href, is_assortment_of_type

__all__ = [
    "MOSCOW_TZ",
    "compose_datetime",
    "extract_id_from_meta_href",
    "is_assortment_of_type",
    "parse_datetime",
]
