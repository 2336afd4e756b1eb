"""Paging layer: probe, decide, and drain offset-indexed pages.

Architecture:
    The paging layer consists of:
    - context.py: PagingContext, the per-call state
    - fetcher.py: ResourceFetcher, one request per call (GET or QAPI POST)
    - resolver.py: CountAndSizeResolver and the pure resolve_page_size table
    - driver.py: Page planning and sequential execution (PagingDriver)
    - engine.py: PagingEngine, the public entry point
    - telemetry.py: Structured logging
"""

from __future__ import annotations

from .context import UNKNOWN_TOTAL_COUNT, UNRESOLVED_PAGE_SIZE, PagingContext
from .driver import (
    PagePlan,
    PagingDriver,
    count_pages,
    plan_from_offset,
    plan_num_pages,
    plan_num_rows,
)
from .engine import PagingEngine, classify
from .fetcher import ResourceFetcher
from .resolver import CountAndSizeResolver, FallbackProbe, read_total_count, resolve_page_size

__all__ = [
    "PagingContext",
    "UNKNOWN_TOTAL_COUNT",
    "UNRESOLVED_PAGE_SIZE",
    "PagePlan",
    "PagingDriver",
    "count_pages",
    "plan_from_offset",
    "plan_num_pages",
    "plan_num_rows",
    "PagingEngine",
    "classify",
    "ResourceFetcher",
    "CountAndSizeResolver",
    "FallbackProbe",
    "read_total_count",
    "resolve_page_size",
]
