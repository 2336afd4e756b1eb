"""Offset-advancing page fetches.

This module provides the PagingDriver, which takes a resolved total count
and page size, plans the sequence of (offset, limit) windows, and fetches
them one at a time in ascending offset order.

Architecture:
    Planning and execution are separate. The ``plan_*`` functions are pure
    and return ``PagePlan`` lists; ``PagingDriver._execute`` issues one fetch
    per plan, strictly sequentially. Any failure aborts the whole drain and
    propagates; pages collected so far are dropped.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from time import perf_counter

from ...core.exceptions import InvalidPageSizeError
from ...models.filters import FilterSpec
from ...models.response import ResponseEnvelope
from .fetcher import ResourceFetcher
from .telemetry import log_page_fetched, log_paging_complete, log_paging_error


@dataclass(frozen=True)
class PagePlan:
    """One page fetch.

    Attributes:
        offset: Zero-based row the page starts from
        limit: Rows requested for this page
        page_index: Zero-based index of this page in the overall plan
    """

    offset: int
    limit: int
    page_index: int = 0


def _check_page_size(page_size: int) -> None:
    if page_size <= 0:
        raise InvalidPageSizeError(
            f"Cannot page with a page size of {page_size}; it must be positive",
            page_size=page_size,
        )


def count_pages(total_count: int, start_offset: int, page_size: int) -> int:
    """Number of pages needed to cover ``[start_offset, total_count)``.

    Computed as ``ceil((total_count - start_offset) / page_size)`` in floating
    point. A range that is already exhausted needs no pages.

    Raises:
        InvalidPageSizeError: If page_size is zero or negative
    """
    _check_page_size(page_size)
    num_pages = math.ceil((float(total_count) - float(start_offset)) / float(page_size))
    return max(int(num_pages), 0)


def plan_from_offset(total_count: int, page_size: int, start_offset: int) -> list[PagePlan]:
    """Plan every page from ``start_offset`` to the end of the records."""
    num_pages = count_pages(total_count, start_offset, page_size)
    return [
        PagePlan(offset=start_offset + i * page_size, limit=page_size, page_index=i)
        for i in range(num_pages)
    ]


def plan_num_pages(
    total_count: int, page_size: int, num_pages: int, start_offset: int = 0
) -> list[PagePlan]:
    """Plan at most ``num_pages`` pages, stopping at the end of the records."""
    _check_page_size(page_size)
    plans: list[PagePlan] = []
    offset = start_offset
    for i in range(num_pages):
        if offset >= total_count:
            break
        plans.append(PagePlan(offset=offset, limit=page_size, page_index=i))
        offset += page_size
    return plans


def plan_num_rows(
    total_count: int, page_size: int, num_rows: int, start_offset: int = 0
) -> list[PagePlan]:
    """Plan pages covering ``num_rows`` rows from ``start_offset``.

    The row count is capped at ``total_count`` and the last page only asks
    for the rows still remaining.
    """
    _check_page_size(page_size)
    num_rows = min(num_rows, total_count)
    num_pages = math.ceil(float(num_rows) / float(page_size))
    end = num_rows + start_offset
    plans: list[PagePlan] = []
    offset = start_offset
    for i in range(num_pages):
        if offset >= total_count:
            break
        limit = min(page_size, end - offset)
        plans.append(PagePlan(offset=offset, limit=limit, page_index=i))
        offset += limit
    return plans


class PagingDriver:
    """Executes page plans against a ResourceFetcher."""

    def __init__(self, fetcher: ResourceFetcher) -> None:
        self._fetcher = fetcher

    async def drain_from(
        self,
        resource_name: str,
        version: str | None,
        filter_payload: FilterSpec | None,
        total_count: int,
        page_size: int,
        start_offset: int,
    ) -> list[ResponseEnvelope]:
        """Fetch every page from ``start_offset`` to ``total_count``.

        Args:
            resource_name: Resource to page
            version: Media type for the requests
            filter_payload: Filter in wire form, or None for the unfiltered listing
            total_count: Total matching records
            page_size: Rows per page, must be positive
            start_offset: Offset of the first page

        Returns:
            Page envelopes in ascending offset order

        Raises:
            InvalidPageSizeError: If page_size is zero or negative
            TransportError: If any page fetch fails
        """
        plans = plan_from_offset(total_count, page_size, start_offset)
        return await self._execute(resource_name, version, filter_payload, plans)

    async def drain_pages(
        self,
        resource_name: str,
        version: str | None,
        filter_payload: FilterSpec | None,
        total_count: int,
        page_size: int,
        num_pages: int,
        start_offset: int = 0,
    ) -> list[ResponseEnvelope]:
        plans = plan_num_pages(total_count, page_size, num_pages, start_offset)
        return await self._execute(resource_name, version, filter_payload, plans)

    async def drain_rows(
        self,
        resource_name: str,
        version: str | None,
        filter_payload: FilterSpec | None,
        total_count: int,
        page_size: int,
        num_rows: int,
        start_offset: int = 0,
    ) -> list[ResponseEnvelope]:
        plans = plan_num_rows(total_count, page_size, num_rows, start_offset)
        return await self._execute(resource_name, version, filter_payload, plans)

    async def _execute(
        self,
        resource_name: str,
        version: str | None,
        filter_payload: FilterSpec | None,
        plans: list[PagePlan],
    ) -> list[ResponseEnvelope]:
        pages: list[ResponseEnvelope] = []
        drain_start = perf_counter()
        for plan in plans:
            page_start = perf_counter()
            try:
                page = await self._fetcher.fetch_page(
                    resource_name, version, filter_payload, plan.offset, plan.limit
                )
            except Exception as e:
                log_paging_error(
                    resource_name=resource_name,
                    page_index=plan.page_index,
                    offset=plan.offset,
                    error_type=type(e).__name__,
                    error_message=str(e),
                )
                raise
            pages.append(page)
            log_page_fetched(
                resource_name=resource_name,
                page_index=plan.page_index,
                offset=plan.offset,
                limit=plan.limit,
                latency_ms=(perf_counter() - page_start) * 1000.0,
            )

        log_paging_complete(
            resource_name=resource_name,
            pages=len(pages),
            total_latency_ms=(perf_counter() - drain_start) * 1000.0,
        )
        return pages
