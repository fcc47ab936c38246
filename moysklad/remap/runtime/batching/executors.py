"""Batch execution logic under a concurrency ceiling.

This module provides the BatchExecutor class that runs deferred operations
in fixed-size batches: operations inside a batch run concurrently, batches
run strictly one after another.
"""

from __future__ import annotations

import asyncio
from collections.abc import AsyncGenerator, Sequence
from time import perf_counter

from .definitions import DeferredOperation, T
from .telemetry import log_batch_completed, log_batch_error


class BatchExecutor:
    """Executes deferred operations in sequential, internally concurrent batches.

    ``execute`` is an async generator yielding one result list per batch.
    A batch is only started when the consumer asks for it, so callers can
    stop between batches without issuing further requests.

    When an operation fails, its siblings still in flight are cancelled and
    the failing operation's exception propagates unchanged. No later batch starts.
    """

    def __init__(self, concurrency_limit: int) -> None:
        """Initialize batch executor.

        Args:
            concurrency_limit: Maximum number of operations in flight

        Raises:
            ValueError: If concurrency_limit is less than 1
        """
        if concurrency_limit < 1:
            raise ValueError(f"concurrency_limit must be >= 1, got {concurrency_limit}")
        self._concurrency_limit = concurrency_limit

    @property
    def concurrency_limit(self) -> int:
        return self._concurrency_limit

    async def execute(
        self, operations: Sequence[DeferredOperation[T]]
    ) -> AsyncGenerator[list[T], None]:
        """Run operations batch by batch.

        Args:
            operations: Zero-argument async callables, each invoked once

        Yields:
            Results of each batch, in the order of the operations
        """
        for batch_index, start in enumerate(range(0, len(operations), self._concurrency_limit)):
            batch = operations[start : start + self._concurrency_limit]
            batch_start = perf_counter()
            try:
                results = await self._run_batch(batch)
            except Exception as e:
                log_batch_error(
                    batch_index=batch_index,
                    error_type=type(e).__name__,
                    error_message=str(e),
                )
                raise

            log_batch_completed(
                batch_index=batch_index,
                batch_size=len(batch),
                latency_ms=(perf_counter() - batch_start) * 1000.0,
            )
            yield results

    @staticmethod
    async def _run_batch(batch: Sequence[DeferredOperation[T]]) -> list[T]:
        """Start every operation of a batch and wait for all of them.

        Returns:
            Results in operation order, independent of completion order
        """
        tasks: list[asyncio.Future[T]] = []
        try:
            for operation in batch:
                tasks.append(asyncio.ensure_future(operation()))
            return list(await asyncio.gather(*tasks))
        except BaseException:
            for task in tasks:
                task.cancel()
            # Let cancelled siblings unwind before the failure propagates
            await asyncio.gather(*tasks, return_exceptions=True)
            raise
