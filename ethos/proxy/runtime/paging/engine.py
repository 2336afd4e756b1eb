"""Paging engine: classify, probe, decide, drain.

The PagingEngine is the public entry point of the paging layer. It:
1. Validates caller input (before any request is sent)
2. Classifies the filter into its FilterKind
3. Resolves total count and page size with one probe (CountAndSizeResolver)
4. Decides between a single fetch and multi-page retrieval
5. Drains pages in ascending offset order (PagingDriver)

Architecture:
    Each stage takes and returns a PagingContext, so stage pre- and
    post-conditions can be tested on their own. The context is built per
    call and never leaves it. The engine holds no per-call state and
    performs one request at a time.

Request Flow:
    resolve() -> populate() [probe] -> should_page() -> fetch() | drain_from()

See Also:
    - CountAndSizeResolver: probe and page-size decision table
    - PagingDriver: offset planning and sequential fetching
    - ResourceFetcher: maps a filter kind to GET or POST
"""

from __future__ import annotations

import logging

from ...core.config import ProxyConfig
from ...core.constants import DEFAULT_PAGE_SIZE, HDR_X_MAX_PAGE_SIZE
from ...core.enums import FilterKind, PagingMode
from ...core.exceptions import InvalidArgumentError
from ...models.filters import CriteriaFilter, FilterMap, FilterSpec, NamedQueryFilter, QapiBody
from ...models.response import ResponseEnvelope
from ..rest.transport import Transport
from ..rest.urls import EthosUrls
from .context import PagingContext
from .driver import PagingDriver
from .fetcher import ResourceFetcher
from .resolver import CountAndSizeResolver, FallbackProbe, read_total_count, resolve_page_size
from .telemetry import log_paging_decision

logger = logging.getLogger(__name__)

_FILTER_TYPES = (CriteriaFilter, NamedQueryFilter, FilterMap, QapiBody)


def classify(filter_spec: FilterSpec | None) -> FilterKind:
    """Filtering mechanism of a filter.

    Raises:
        InvalidArgumentError: If filter_spec is None or not a filter value
    """
    if filter_spec is None:
        raise InvalidArgumentError("Cannot classify a request without a filter")
    if not isinstance(filter_spec, _FILTER_TYPES):
        raise InvalidArgumentError(
            f"Unsupported filter type {type(filter_spec).__name__}; expected one of "
            + ", ".join(t.__name__ for t in _FILTER_TYPES)
        )
    return filter_spec.kind


def _require_resource_name(resource_name: str | None, action: str) -> str:
    if resource_name is None or not resource_name.strip():
        raise InvalidArgumentError(f"Cannot {action} due to a null or blank resource name")
    return resource_name


class PagingEngine:
    """Resolves filtered and unfiltered resource listings into page lists."""

    def __init__(
        self,
        transport: Transport,
        *,
        config: ProxyConfig | None = None,
        urls: EthosUrls | None = None,
        fallback_probe: FallbackProbe | None = None,
    ) -> None:
        """Initialize the paging engine.

        Args:
            transport: Performs the GET/POST requests
            config: Defaults for version, page sizes and base URL
            urls: URL builder (defaults to one for config.base_url)
            fallback_probe: Probe used for unfiltered listings
        """
        self._config = config or ProxyConfig()
        self._fetcher = ResourceFetcher(transport, urls or EthosUrls(self._config.base_url))
        self._resolver = CountAndSizeResolver(
            self._fetcher, config=self._config, fallback_probe=fallback_probe
        )
        self._driver = PagingDriver(self._fetcher)

    @property
    def config(self) -> ProxyConfig:
        return self._config

    @property
    def fetcher(self) -> ResourceFetcher:
        return self._fetcher

    @staticmethod
    def should_page(context: PagingContext, for_num_rows: bool = False) -> PagingContext:
        """Decide whether more than one page is needed.

        Pages are needed when the total (``num_rows`` if ``for_num_rows``,
        otherwise ``total_count``) exceeds the page size. An unknown total or
        page size means a single page.
        """
        total = context.num_rows if for_num_rows else context.total_count
        if total < 0 or not context.page_size_known:
            context.should_page = False
        else:
            context.should_page = total > context.page_size
        return context

    async def resolve(
        self,
        resource_name: str,
        filter_spec: FilterSpec,
        *,
        version: str | None = None,
        page_size: int = DEFAULT_PAGE_SIZE,
        offset: int = 0,
    ) -> list[ResponseEnvelope]:
        """Fetch all pages of a filtered listing.

        Args:
            resource_name: Resource to list
            filter_spec: Criteria, named query, filter map or QAPI filter
            version: Media type (defaults to the configured version)
            page_size: Rows per page; at or below the default lets the engine decide
            offset: Zero-based row to start from

        Returns:
            One envelope when a single page covers the records, otherwise the
            envelopes of every page in ascending offset order

        Raises:
            InvalidArgumentError: Blank resource name or missing filter
            MissingHeaderError: Probe response without a total count
            InvalidPageSizeError: Resolved page size not positive while paging
            TransportError: Any failed request
        """
        _require_resource_name(resource_name, "get pages of resource")
        if filter_spec is None:
            raise InvalidArgumentError(
                f"Cannot get pages of resource {resource_name!r} due to a null filter reference"
            )
        kind = classify(filter_spec)
        logger.debug("Resolving pages", extra={"resource_name": resource_name, "kind": kind.value})

        context = PagingContext(
            resource_name=resource_name,
            version=version or self._config.default_version,
            filter=filter_spec,
            page_size=page_size,
            offset=offset,
        )
        context = await self._resolver.populate(context)
        context = self.should_page(context)
        log_paging_decision(context=context)

        if not context.should_page:
            response = await self._fetcher.fetch(
                context.resource_name, context.version, context.filter
            )
            return [response]

        return await self._driver.drain_from(
            context.resource_name,
            context.version,
            context.filter,
            context.total_count,
            context.page_size,
            context.offset,
        )

    async def resolve_all(
        self,
        resource_name: str,
        *,
        version: str | None = None,
        page_size: int = DEFAULT_PAGE_SIZE,
        offset: int = 0,
        num_pages: int = 0,
        num_rows: int = 0,
    ) -> list[ResponseEnvelope]:
        """Fetch pages of the unfiltered listing.

        With ``num_rows`` set, at most that many rows are returned; with
        ``num_pages`` set, at most that many pages. When a single page covers
        the request, the probe response is returned, trimmed to the rows
        asked for.
        """
        _require_resource_name(resource_name, "get pages of resource")
        if num_rows > 0:
            mode = PagingMode.NUM_ROWS
        elif num_pages > 0:
            mode = PagingMode.NUM_PAGES
        else:
            mode = PagingMode.ALL_PAGES

        context = PagingContext(
            resource_name=resource_name,
            version=version or self._config.default_version,
            page_size=page_size,
            offset=offset,
            num_pages=max(num_pages, 0),
            num_rows=max(num_rows, 0),
        )
        context = await self._resolver.populate(context)
        context = self.should_page(context, for_num_rows=mode is PagingMode.NUM_ROWS)
        log_paging_decision(context=context)

        if not context.should_page and self._probe_covers(context, mode):
            return [self._trim_probe(context, mode)]

        if mode is PagingMode.NUM_ROWS:
            return await self._driver.drain_rows(
                context.resource_name,
                context.version,
                None,
                context.total_count,
                context.page_size,
                context.num_rows,
                context.offset,
            )
        if mode is PagingMode.NUM_PAGES:
            return await self._driver.drain_pages(
                context.resource_name,
                context.version,
                None,
                context.total_count,
                context.page_size,
                context.num_pages,
                context.offset,
            )
        return await self._driver.drain_from(
            context.resource_name,
            context.version,
            None,
            context.total_count,
            context.page_size,
            context.offset,
        )

    @staticmethod
    def _probe_covers(context: PagingContext, mode: PagingMode) -> bool:
        # The probe holds the server's first page only, whatever page size the
        # caller asked for; rows past it need real fetches.
        if context.last_probe_response is None:
            return False
        probe_rows = context.last_probe_response.array_length()
        if probe_rows is None:
            return False
        if context.total_count <= probe_rows:
            return True
        return mode is PagingMode.NUM_ROWS and (context.offset + context.num_rows <= probe_rows)

    @staticmethod
    def _trim_probe(context: PagingContext, mode: PagingMode) -> ResponseEnvelope:
        probe = context.last_probe_response
        if mode is PagingMode.NUM_ROWS:
            return probe.sliced(context.offset, context.offset + context.num_rows)
        if context.offset > 0:
            return probe.sliced(context.offset)
        return probe

    async def total_count(
        self,
        resource_name: str | None,
        filter_spec: FilterSpec | None,
        *,
        version: str | None = None,
    ) -> int:
        """Number of records matching a filter.

        Returns 0 without any request when the resource name is blank or the
        filter is missing. Fetch failures still raise.
        """
        if resource_name is None or not resource_name.strip() or filter_spec is None:
            return 0
        classify(filter_spec)
        response = await self._fetcher.fetch(
            resource_name, version or self._config.default_version, filter_spec
        )
        return read_total_count(response)

    async def page_size(self, resource_name: str | None, version: str | None = None) -> int:
        """Page size the server uses for the unfiltered listing (0 for a blank name)."""
        if resource_name is None or not resource_name.strip():
            return 0
        response = await self._fetcher.fetch_unfiltered(
            resource_name, version or self._config.default_version
        )
        # No caller size here: sit at the threshold so the server decides.
        return resolve_page_size(
            self._config.default_page_size,
            self._config.default_page_size,
            response,
            response.header(HDR_X_MAX_PAGE_SIZE),
            self._config.max_page_size,
        )

    async def max_page_size(self, resource_name: str | None, version: str | None = None) -> int:
        """Maximum page size advertised for a resource (0 for a blank name)."""
        if resource_name is None or not resource_name.strip():
            return 0
        response = await self._fetcher.fetch_unfiltered(
            resource_name, version or self._config.default_version
        )
        max_size = response.header_int(HDR_X_MAX_PAGE_SIZE)
        return max_size if max_size is not None else self._config.max_page_size
