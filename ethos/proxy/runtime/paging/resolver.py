"""Total count and page size resolution.

This module provides the CountAndSizeResolver, which issues the single
probe request of a paging operation and populates a PagingContext with the
total number of matching records and the effective page size.

Architecture:
    populate() runs three steps against one context:
    1. Normalize: default a blank version, clamp offsets below 1 to 0
    2. Probe: one request with the active filter (or the fallback probe for
       unfiltered listings) and read the total-count header
    3. Size: resolve_page_size() picks the page size from an ordered table

    The filter is encoded only after both values are resolved, so the probe
    always works from the canonical, unencoded filter text.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from time import perf_counter

from ...core.config import ProxyConfig
from ...core.constants import HDR_X_MAX_PAGE_SIZE, HDR_X_TOTAL_COUNT
from ...core.exceptions import MissingHeaderError
from ...models.response import ResponseEnvelope
from .context import PagingContext
from .fetcher import ResourceFetcher
from .telemetry import log_probe_completed

logger = logging.getLogger(__name__)

FallbackProbe = Callable[[PagingContext], Awaitable[PagingContext]]


def read_total_count(response: ResponseEnvelope) -> int:
    """Total record count from a probe response.

    Raises:
        MissingHeaderError: If the header is absent, blank, negative or not an integer
    """
    value = response.header(HDR_X_TOTAL_COUNT)
    if value is None or not value.strip():
        raise MissingHeaderError(
            f"Response from {response.requested_url or 'probe request'} has no "
            f"{HDR_X_TOTAL_COUNT} header",
            header=HDR_X_TOTAL_COUNT,
        )
    total = response.header_int(HDR_X_TOTAL_COUNT)
    if total is None or total < 0:
        raise MissingHeaderError(
            f"{HDR_X_TOTAL_COUNT} header value {value!r} is not a non-negative integer",
            header=HDR_X_TOTAL_COUNT,
        )
    return total


def resolve_page_size(
    caller_page_size: int,
    default_threshold: int,
    probe_response: ResponseEnvelope | None,
    max_page_size_header: str | None,
    configured_max: int,
) -> int:
    """Pick the effective page size. Pure function.

    Decision table, first match wins:
        - caller_page_size > default_threshold: the caller's value
        - no probe response: configured_max
        - non-blank probe body holding a JSON array: its element count
        - max_page_size_header is an integer: that value
        - otherwise: configured_max

    Args:
        caller_page_size: Page size the caller asked for
        default_threshold: Caller values at or below this let the engine decide
        probe_response: Response of the probe request, if one was made
        max_page_size_header: Raw max-page-size header value, if present
        configured_max: Fallback maximum page size

    Returns:
        Page size, never negative
    """
    if caller_page_size > default_threshold:
        return caller_page_size
    if probe_response is None:
        return configured_max
    body_length = probe_response.array_length()
    if body_length is not None:
        return body_length
    if max_page_size_header is not None and max_page_size_header.strip():
        try:
            header_value = int(max_page_size_header.strip())
        except ValueError:
            header_value = -1
        if header_value >= 0:
            return header_value
    return configured_max


class CountAndSizeResolver:
    """Populates total count and page size of a PagingContext from one probe."""

    def __init__(
        self,
        fetcher: ResourceFetcher,
        config: ProxyConfig | None = None,
        fallback_probe: FallbackProbe | None = None,
    ) -> None:
        """Initialize resolver.

        Args:
            fetcher: Issues the probe request
            config: Defaults for version and page sizes
            fallback_probe: Probe for contexts without a filter. It must set
                ``total_count`` and may set ``last_probe_response``. Defaults to
                an unfiltered GET of the resource listing.
        """
        self._fetcher = fetcher
        self._config = config or ProxyConfig()
        self._fallback_probe = fallback_probe or self.probe_unfiltered

    async def populate(self, context: PagingContext) -> PagingContext:
        """Resolve total count and page size in place.

        Raises:
            TransportError: If the probe request fails
            MissingHeaderError: If the total count cannot be read
        """
        if not context.version or not context.version.strip():
            context.version = self._config.default_version
        if context.offset < 1:
            if context.offset < 0:
                logger.warning(
                    "negative_offset_normalized",
                    extra={"resource_name": context.resource_name, "offset": context.offset},
                )
            context.offset = 0

        probe_start = perf_counter()
        context = await self._populate_total_count(context)

        probe = context.last_probe_response
        context.page_size = resolve_page_size(
            context.page_size,
            self._config.default_page_size,
            probe,
            probe.header(HDR_X_MAX_PAGE_SIZE) if probe is not None else None,
            self._config.max_page_size,
        )

        if context.filter is not None:
            context.filter = context.filter.encode()

        log_probe_completed(context=context, latency_ms=(perf_counter() - probe_start) * 1000.0)
        return context

    async def _populate_total_count(self, context: PagingContext) -> PagingContext:
        if context.filter is None:
            context = await self._fallback_probe(context)
            if not context.total_known:
                raise MissingHeaderError(
                    f"Fallback probe for {context.resource_name!r} did not resolve a total count",
                    header=HDR_X_TOTAL_COUNT,
                )
            return context

        response = await self._fetcher.fetch(context.resource_name, context.version, context.filter)
        context.last_probe_response = response
        context.total_count = read_total_count(response)
        return context

    async def probe_unfiltered(self, context: PagingContext) -> PagingContext:
        """Default fallback probe: first page of the unfiltered listing."""
        response = await self._fetcher.fetch_unfiltered(context.resource_name, context.version)
        context.last_probe_response = response
        context.total_count = read_total_count(response)
        return context
