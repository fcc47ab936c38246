"""Result aggregation for batch streams."""

from __future__ import annotations

from collections.abc import AsyncGenerator, Iterable
from contextlib import aclosing

from .definitions import RowT, T


class ResultAggregator:
    """Drains a batch stream into a single ordered list.

    Batches are consumed strictly in order. The first failure propagates
    and no partial result is returned. The stream is closed whenever
    draining stops.
    """

    async def collect(self, batches: AsyncGenerator[list[T], None]) -> list[T]:
        """Concatenate batch results in order.

        Args:
            batches: Async generator of per-batch result lists

        Returns:
            All results, batch by batch, in operation order
        """
        results: list[T] = []
        async with aclosing(batches) as stream:
            async for batch in stream:
                results.extend(batch)
        return results

    async def collect_rows(
        self, batches: AsyncGenerator[list[Iterable[RowT]], None]
    ) -> list[RowT]:
        """Concatenate the rows of every page result in order.

        Args:
            batches: Async generator of per-batch lists of page rows

        Returns:
            Rows of all pages in page order, preserving row order within a page
        """
        rows: list[RowT] = []
        async with aclosing(batches) as stream:
            async for batch in stream:
                for page_rows in batch:
                    rows.extend(page_rows)
        return rows
