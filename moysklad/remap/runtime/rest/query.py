"""Query-string composition for list and get requests.

Architecture:
    Endpoints describe a request with Python values (nested expand dicts,
    order tuples, filter operator dicts); this module renders them into the
    flat string parameters the service expects. The result is passed to
    aiohttp as ``params``.

Filter syntax:
    ``{"name": "Acme"}``                       -> ``filter=name=Acme``
    ``{"code": ["a", "b"]}``                   -> ``filter=code=a;code=b``
    ``{"updated": {"gte": dt}}``               -> ``filter=updated>=2024-01-01 12:00:00``
    ``{"archived": {"ne": True}}``             -> ``filter=archived!=true``
    ``{"email": {"is_null": True}}``           -> ``filter=email=``
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from datetime import datetime
from enum import Enum
from typing import Any

from ...config import DEFAULT_EXPAND_LIMIT
from ...utils.datetime import compose_datetime

_MAX_EXPAND_DEPTH = 3

_COMPARISON_OPERATORS = {
    "gt": ">",
    "gte": ">=",
    "lt": "<",
    "lte": "<=",
    "like": "~",
    "sw": "~=",
    "ew": "=~",
}

OrderOption = str | tuple[str, str]


def _render_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, datetime):
        return compose_datetime(value, include_ms=value.microsecond != 0)
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


def _traverse_expand(expand: Mapping[str, Any], depth: int = 0) -> list[str]:
    if depth >= _MAX_EXPAND_DEPTH:
        raise ValueError(f"Expand depth cannot be more than {_MAX_EXPAND_DEPTH}")

    fields: list[str] = []
    for key, value in expand.items():
        if not value:
            continue
        if isinstance(value, Mapping):
            fields.extend(f"{key}.{sub}" for sub in _traverse_expand(value, depth + 1))
            continue
        fields.append(key)
    return fields


def _traverse_order(order: OrderOption | Sequence[OrderOption]) -> list[str]:
    if isinstance(order, str):
        return [order]
    if isinstance(order, tuple):
        field, direction = order
        return [f"{field},{_render_value(direction)}"]
    fields: list[str] = []
    for option in order:
        fields.extend(_traverse_order(option))
    return fields


def _traverse_filter(field: str, condition: Any) -> list[str]:
    if condition is None:
        return []

    if isinstance(condition, list | tuple):
        return [f"{field}={_render_value(v)}" for v in condition]

    if not isinstance(condition, Mapping):
        return [f"{field}={_render_value(condition)}"]

    filters: list[str] = []
    for operator, operand in condition.items():
        if operator in ("eq", "ne"):
            sign = "=" if operator == "eq" else "!="
            operands = operand if isinstance(operand, list | tuple) else [operand]
            filters.extend(f"{field}{sign}{_render_value(v)}" for v in operands)
        elif operator == "is_null":
            filters.append(f"{field}{'' if operand else '!'}=")
        elif operator == "is_not_null":
            filters.append(f"{field}{'!' if operand else ''}=")
        elif operator in _COMPARISON_OPERATORS:
            filters.append(f"{field}{_COMPARISON_OPERATORS[operator]}{_render_value(operand)}")
        else:
            raise ValueError(f"Unknown filter operator: {operator}")
    return filters


def compose_search_parameters(
    *,
    limit: int | None = None,
    offset: int | None = None,
    expand: Mapping[str, Any] | None = None,
    order: OrderOption | Sequence[OrderOption] | None = None,
    search: str | None = None,
    filter: Mapping[str, Any] | None = None,  # noqa: A002
    namedfilter: str | None = None,
    **extra: Any,
) -> dict[str, str] | None:
    """Compose query parameters for a request.

    Args:
        limit: Page size; emitted whenever not None, including 0
        offset: Rows to skip
        expand: Nested mapping of relations to expand, at most 3 levels deep
        order: Field name, ``(field, direction)`` tuple, or a list of those
        search: Full-text search string
        filter: Mapping of field to filter condition
        namedfilter: Saved filter href
        **extra: Additional parameters passed through as strings

    Returns:
        Parameters mapping, or None if nothing was set

    Raises:
        ValueError: If expand is too deep or a filter operator is unknown
    """
    params: dict[str, str] = {}
    expand_fields = _traverse_expand(expand) if expand else []

    if namedfilter:
        params["namedfilter"] = namedfilter

    if limit is not None:
        params["limit"] = str(limit)
    elif expand_fields:
        params["limit"] = str(DEFAULT_EXPAND_LIMIT)

    if offset is not None:
        params["offset"] = str(offset)

    if expand_fields:
        params["expand"] = ",".join(expand_fields)

    if order:
        order_fields = _traverse_order(order)
        if order_fields:
            params["order"] = ";".join(order_fields)

    if search:
        params["search"] = search

    if filter:
        filters: list[str] = []
        for field, condition in filter.items():
            filters.extend(_traverse_filter(field, condition))
        if filters:
            params["filter"] = ";".join(filters)

    for key, value in extra.items():
        if value is not None:
            params[key] = _render_value(value)

    return params or None
