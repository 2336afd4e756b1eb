"""Structured logging for paging operations.

This module provides telemetry hooks for the paging engine, emitting
structured logs for observability.
"""

from __future__ import annotations

import logging

from .context import PagingContext

logger = logging.getLogger(__name__)


def log_probe_completed(*, context: PagingContext, latency_ms: float | None = None) -> None:
    """Log the outcome of the probe request.

    Args:
        context: Context after total count and page size were resolved
        latency_ms: Probe latency in milliseconds (optional)
    """
    logger.info(
        "paging_probe_completed",
        extra={
            "resource_name": context.resource_name,
            "filter_kind": context.filter_kind.value if context.filter_kind else None,
            "total_count": context.total_count,
            "page_size": context.page_size,
            "offset": context.offset,
            "latency_ms": latency_ms,
        },
    )


def log_paging_decision(*, context: PagingContext) -> None:
    """Log whether multi-page retrieval was chosen."""
    logger.debug(
        "paging_decision",
        extra={
            "resource_name": context.resource_name,
            "should_page": context.should_page,
            "total_count": context.total_count,
            "page_size": context.page_size,
        },
    )


def log_page_fetched(
    *,
    resource_name: str,
    page_index: int,
    offset: int,
    limit: int,
    latency_ms: float | None = None,
) -> None:
    """Log completion of a single page fetch.

    Args:
        resource_name: Resource being paged
        page_index: Zero-based index of the page
        offset: Offset the page was requested from
        limit: Page size requested
        latency_ms: Latency in milliseconds (optional)
    """
    logger.debug(
        "paging_page_fetched",
        extra={
            "resource_name": resource_name,
            "page_index": page_index,
            "offset": offset,
            "limit": limit,
            "latency_ms": latency_ms,
        },
    )


def log_paging_complete(
    *,
    resource_name: str,
    pages: int,
    total_latency_ms: float | None = None,
) -> None:
    """Log completion of a paging operation."""
    logger.info(
        "paging_complete",
        extra={
            "resource_name": resource_name,
            "pages": pages,
            "total_latency_ms": total_latency_ms,
        },
    )


def log_paging_error(
    *,
    resource_name: str,
    page_index: int,
    offset: int,
    error_type: str,
    error_message: str,
) -> None:
    """Log a page fetch failure. The operation is aborted after this."""
    logger.error(
        "paging_error",
        extra={
            "resource_name": resource_name,
            "page_index": page_index,
            "offset": offset,
            "error_type": error_type,
            "error_message": error_message,
        },
    )
