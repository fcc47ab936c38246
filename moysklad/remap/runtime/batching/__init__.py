"""Bounded-concurrency retrieval of paginated collections.

This module fetches an entire offset-paginated collection with a fixed
ceiling on parallel requests, returning rows in page order regardless of
which request finishes first.

Architecture:
    The batching layer consists of:
    - definitions.py: Page descriptors, options and result structures
    - planners.py: Page planning (offsets and deferred fetches)
    - executors.py: Sequential batches of concurrent operations
    - aggregators.py: Ordered flattening of batch results
    - batch_get.py: Count, plan, execute, aggregate
    - telemetry.py: Structured logging

Usage:
    Endpoints call ``batch_get`` with a size request and a page fetcher;
    the components can also be used on their own.
"""

from __future__ import annotations

from .aggregators import ResultAggregator
from .batch_get import batch_get
from .definitions import (
    BatchGetOptions,
    BatchGetResult,
    DeferredOperation,
    PageDescriptor,
    PageFetcher,
)
from .executors import BatchExecutor
from .planners import PagePlanner

__all__ = [
    "BatchExecutor",
    "BatchGetOptions",
    "BatchGetResult",
    "DeferredOperation",
    "PageDescriptor",
    "PageFetcher",
    "PagePlanner",
    "ResultAggregator",
    "batch_get",
]
