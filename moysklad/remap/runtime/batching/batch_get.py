"""Whole-collection retrieval: count, plan, execute, aggregate.

Architecture:
    ``batch_get`` wires the three batching components together:
    1. One ``count()`` request establishes the collection size
    2. PagePlanner turns the size into deferred page fetches
    3. BatchExecutor runs them under the concurrency ceiling
    4. ResultAggregator flattens the pages in offset order

Design Decisions:
    - The counted size is read once and never re-validated. If the
      collection changes mid-retrieval, rows can be duplicated or missing
      at page boundaries; the mismatch is logged, not corrected.
    - All-or-nothing: any failure propagates unchanged and no rows are
      returned.
    - Nothing is cached between calls.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from time import perf_counter

from ...config import DEFAULT_CONCURRENCY_LIMIT, MAX_PAGE_SIZE
from .aggregators import ResultAggregator
from .definitions import PageFetcher, RowT
from .executors import BatchExecutor
from .planners import PagePlanner
from .telemetry import log_batch_get_complete, log_size_drift


async def batch_get(
    *,
    count: Callable[[], Awaitable[int]],
    fetch_page: PageFetcher[RowT],
    page_size: int = MAX_PAGE_SIZE,
    concurrency_limit: int = DEFAULT_CONCURRENCY_LIMIT,
    endpoint_id: str = "unknown",
) -> list[RowT]:
    """Retrieve every row of a paginated collection.

    Args:
        count: Async function returning the current collection size
        fetch_page: Async function taking (offset, limit) and returning rows
        page_size: Rows per page request (clamped to the service maximum)
        concurrency_limit: Maximum number of page requests in flight
        endpoint_id: Endpoint identifier used in logs

    Returns:
        All rows in offset order

    Raises:
        ValueError: If page_size or concurrency_limit is less than 1
        Exception: Whatever ``count`` or ``fetch_page`` raised, unchanged
    """
    planner = PagePlanner(page_size, endpoint_id=endpoint_id)
    executor = BatchExecutor(concurrency_limit)
    aggregator = ResultAggregator()

    start = perf_counter()
    total_count = await count()
    operations = planner.plan(total_count, fetch_page)
    rows = await aggregator.collect_rows(executor.execute(operations))

    if len(rows) != total_count:
        log_size_drift(
            endpoint_id=endpoint_id,
            total_count=total_count,
            rows_aggregated=len(rows),
        )

    log_batch_get_complete(
        endpoint_id=endpoint_id,
        total_count=total_count,
        rows_aggregated=len(rows),
        total_latency_ms=(perf_counter() - start) * 1000.0,
    )

    return rows
