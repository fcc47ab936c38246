"""Metadata and list envelope models."""

from __future__ import annotations

from typing import Generic, TypeVar

from pydantic import Field

from .base import RemapModel

T = TypeVar("T")


class Metadata(RemapModel):
    """Entity metadata (``meta`` block)."""

    href: str
    type: str | None = None
    media_type: str | None = None
    metadata_href: str | None = None
    uuid_href: str | None = None


class ListMetadata(Metadata):
    """Metadata of a list response, carrying pagination info."""

    size: int = Field(..., ge=0)
    limit: int = Field(..., ge=0)
    offset: int = Field(..., ge=0)
    next_href: str | None = None
    previous_href: str | None = None


class MetaRef(RemapModel):
    """Reference to another entity by its metadata."""

    meta: Metadata


class Context(RemapModel):
    """Request context returned alongside list responses."""

    employee: MetaRef | None = None


class ListResponse(RemapModel, Generic[T]):
    """One page of a collection."""

    meta: ListMetadata
    rows: list[T]
    context: Context | None = None
