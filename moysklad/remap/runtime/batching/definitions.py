"""Batch retrieval definitions and policy structures.

This module defines the data structures used to describe batch retrieval
of paginated collections: page descriptors, options and results.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Iterator, Sequence
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from ...config import DEFAULT_CONCURRENCY_LIMIT, DEFAULT_EXPAND_LIMIT, MAX_PAGE_SIZE

T = TypeVar("T")
RowT = TypeVar("RowT")

# Zero-argument unit of work performing one fetch
DeferredOperation = Callable[[], Awaitable[T]]

# Fetches one page given (offset, limit) and returns its rows
PageFetcher = Callable[[int, int], Awaitable[Sequence[RowT]]]


@dataclass(frozen=True)
class PageDescriptor:
    """Plan for a single page request.

    Attributes:
        offset: Number of rows to skip
        limit: Number of rows to request (1..MAX_PAGE_SIZE)
        page_index: Zero-based index of this page in the overall plan
    """

    offset: int
    limit: int
    page_index: int = 0


@dataclass(frozen=True)
class BatchGetOptions:
    """Options for retrieving whole collections.

    Attributes:
        limit: Page size for requests without expand
        expand_limit: Page size for requests with expand
        concurrency_limit: Maximum number of page requests in flight
    """

    limit: int = MAX_PAGE_SIZE
    expand_limit: int = DEFAULT_EXPAND_LIMIT
    concurrency_limit: int = DEFAULT_CONCURRENCY_LIMIT

    def __post_init__(self) -> None:
        """Validate option values."""
        if self.limit < 1:
            raise ValueError("BatchGetOptions.limit must be >= 1")
        if self.expand_limit < 1:
            raise ValueError("BatchGetOptions.expand_limit must be >= 1")
        if self.concurrency_limit < 1:
            raise ValueError("BatchGetOptions.concurrency_limit must be >= 1")

    def page_size_for(self, *, has_expand: bool) -> int:
        """Page size to use depending on whether expand was requested."""
        return self.expand_limit if has_expand else self.limit


@dataclass
class BatchGetResult(Generic[RowT]):
    """Result of retrieving a whole collection.

    Attributes:
        rows: Rows in page order
        size: Collection size reported by the count request
        context: Context block of the count response
    """

    rows: list[RowT]
    size: int
    context: Any = None

    def __iter__(self) -> Iterator[RowT]:
        return iter(self.rows)

    def __len__(self) -> int:
        return len(self.rows)
