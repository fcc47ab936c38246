"""Structured logging for batch retrieval.

This module provides telemetry hooks for batch retrieval, emitting
structured logs for observability. Handlers are left to the application.
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def log_batch_plan(
    *,
    endpoint_id: str,
    total_count: int,
    page_size: int,
    total_pages: int,
) -> None:
    """Log page plan creation.

    Args:
        endpoint_id: Endpoint identifier
        total_count: Collection size reported by the count request
        page_size: Rows requested per page
        total_pages: Number of page requests planned
    """
    logger.info(
        "batch_plan_created",
        extra={
            "endpoint_id": endpoint_id,
            "total_count": total_count,
            "page_size": page_size,
            "total_pages": total_pages,
        },
    )


def log_page_size_clamped(*, endpoint_id: str, requested: int, applied: int) -> None:
    """Log that a requested page size exceeded the service maximum."""
    logger.debug(
        "page_size_clamped",
        extra={"endpoint_id": endpoint_id, "requested": requested, "applied": applied},
    )


def log_batch_completed(
    *,
    batch_index: int,
    batch_size: int,
    latency_ms: float | None = None,
) -> None:
    """Log completion of a single batch.

    Args:
        batch_index: Zero-based index of the batch
        batch_size: Number of operations in the batch
        latency_ms: Wall time of the batch in milliseconds
    """
    logger.debug(
        "batch_completed",
        extra={
            "batch_index": batch_index,
            "batch_size": batch_size,
            "latency_ms": latency_ms,
        },
    )


def log_batch_error(
    *,
    batch_index: int,
    error_type: str,
    error_message: str,
) -> None:
    """Log a batch failure.

    Args:
        batch_index: Zero-based index of the batch that failed
        error_type: Exception class name
        error_message: Exception message
    """
    logger.error(
        "batch_error",
        extra={
            "batch_index": batch_index,
            "error_type": error_type,
            "error_message": error_message,
        },
    )


def log_batch_get_complete(
    *,
    endpoint_id: str,
    total_count: int,
    rows_aggregated: int,
    total_latency_ms: float | None = None,
) -> None:
    """Log completion of a whole-collection retrieval."""
    logger.info(
        "batch_get_complete",
        extra={
            "endpoint_id": endpoint_id,
            "total_count": total_count,
            "rows_aggregated": rows_aggregated,
            "total_latency_ms": total_latency_ms,
        },
    )


def log_size_drift(*, endpoint_id: str, total_count: int, rows_aggregated: int) -> None:
    """Log a mismatch between the counted size and the rows actually received.

    The collection changed while it was being paged through; rows may be
    duplicated or missing at page boundaries.
    """
    logger.warning(
        "batch_get_size_drift",
        extra={
            "endpoint_id": endpoint_id,
            "total_count": total_count,
            "rows_aggregated": rows_aggregated,
        },
    )
