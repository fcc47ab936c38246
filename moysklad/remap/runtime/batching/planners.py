"""Page planning logic for offset pagination.

This module provides the PagePlanner class that splits a collection of a
known size into page requests and wraps each one in a deferred operation.
"""

from __future__ import annotations

from collections.abc import Sequence

from ...config import MAX_PAGE_SIZE
from .definitions import DeferredOperation, PageDescriptor, PageFetcher, RowT
from .telemetry import log_batch_plan, log_page_size_clamped


class PagePlanner:
    """Plans page requests for a paginated collection.

    The planner takes the collection size and a page size, then produces
    one page descriptor per ``page_size`` rows. It performs no I/O.

    Page sizes above the service maximum are clamped to it rather than
    rejected.
    """

    def __init__(self, page_size: int = MAX_PAGE_SIZE, *, endpoint_id: str = "unknown") -> None:
        """Initialize page planner.

        Args:
            page_size: Rows per page request
            endpoint_id: Endpoint identifier used in logs

        Raises:
            ValueError: If page_size is less than 1
        """
        if page_size < 1:
            raise ValueError(f"page_size must be >= 1, got {page_size}")
        if page_size > MAX_PAGE_SIZE:
            log_page_size_clamped(
                endpoint_id=endpoint_id, requested=page_size, applied=MAX_PAGE_SIZE
            )
            page_size = MAX_PAGE_SIZE
        self._page_size = page_size
        self._endpoint_id = endpoint_id

    @property
    def page_size(self) -> int:
        """Effective page size after clamping."""
        return self._page_size

    def plan_pages(self, total_count: int) -> list[PageDescriptor]:
        """Plan page descriptors for a collection.

        Args:
            total_count: Collection size

        Returns:
            Page descriptors with ascending offsets starting at 0

        Raises:
            ValueError: If total_count is negative
        """
        if total_count < 0:
            raise ValueError(f"total_count must be >= 0, got {total_count}")

        pages = [
            PageDescriptor(offset=offset, limit=self._page_size, page_index=index)
            for index, offset in enumerate(range(0, total_count, self._page_size))
        ]

        log_batch_plan(
            endpoint_id=self._endpoint_id,
            total_count=total_count,
            page_size=self._page_size,
            total_pages=len(pages),
        )

        return pages

    def plan(
        self,
        total_count: int,
        fetch_page: PageFetcher[RowT],
    ) -> list[DeferredOperation[Sequence[RowT]]]:
        """Plan deferred page fetches for a collection.

        Args:
            total_count: Collection size
            fetch_page: Async function taking (offset, limit) and returning rows

        Returns:
            One zero-argument operation per page, in offset order
        """
        return [self._defer(fetch_page, page) for page in self.plan_pages(total_count)]

    @staticmethod
    def _defer(
        fetch_page: PageFetcher[RowT], page: PageDescriptor
    ) -> DeferredOperation[Sequence[RowT]]:
        """Bind one page descriptor to the fetch function."""

        async def operation() -> Sequence[RowT]:
            return await fetch_page(page.offset, page.limit)

        return operation
