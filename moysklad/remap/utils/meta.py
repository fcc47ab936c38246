"""Helpers for entity metadata."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, overload

from ..core.enums import Entity


@overload
def extract_id_from_meta_href(href: str) -> str: ...


@overload
def extract_id_from_meta_href(href: None) -> None: ...


def extract_id_from_meta_href(href: str | None) -> str | None:
    """Extract the entity id from a ``meta.href`` URL.

    Examples:
        >>> extract_id_from_meta_href(
        ...     "https://api.moysklad.ru/api/remap/1.2/entity/product/7944ef04?expand=owner"
        ... )
        '7944ef04'
    """
    if href is None:
        return None
    return href.split("?", 1)[0].rstrip("/").rsplit("/", 1)[-1]


def is_assortment_of_type(row: Any, entity: Entity | str) -> bool:
    """Check the kind of an assortment row by its ``meta.type``.

    Args:
        row: Assortment row model, or a raw row mapping
        entity: Expected kind, e.g. ``Entity.SERVICE``

    Returns:
        True if the row's metadata type equals ``entity``

    Examples:
        >>> services = [r for r in result.rows if is_assortment_of_type(r, Entity.SERVICE)]
    """
    meta = row.get("meta") if isinstance(row, Mapping) else getattr(row, "meta", None)
    if meta is None:
        return False
    meta_type = meta.get("type") if isinstance(meta, Mapping) else meta.type
    return meta_type == Entity(entity).value
