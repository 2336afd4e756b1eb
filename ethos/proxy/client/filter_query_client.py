"""Ergonomic facade for filtered resource queries.

The EthosFilterQueryClient wraps the PagingEngine and offers one coroutine
per filtering mechanism for single fetches, paged fetches and counts.

Architecture:
    This module implements the Facade pattern over the paging layer:
    - Filter coercion (raw strings become the matching FilterSpec variant)
    - Default version and page size resolution from ProxyConfig
    - Delegation to PagingEngine / ResourceFetcher for the actual requests
    - Transport lifecycle management when the client owns the transport

Design Decisions:
    - Keyword-only version/page_size/offset replace overloaded signatures
    - Transport injection allows testing with mock transports
    - Context manager pattern ensures the HTTP session is closed

See Also:
    - PagingEngine: probe, decision and drain logic
    - RESTTransport: default aiohttp-backed transport
"""

from __future__ import annotations

import logging
from typing import Any

from ..core.config import ProxyConfig
from ..core.constants import DEFAULT_PAGE_SIZE
from ..core.exceptions import InvalidArgumentError
from ..models.filters import CriteriaFilter, FilterMap, FilterSpec, NamedQueryFilter, QapiBody
from ..models.response import ResponseEnvelope
from ..runtime.paging.engine import PagingEngine
from ..runtime.rest.transport import RESTTransport, Transport
from ..runtime.rest.urls import EthosUrls

logger = logging.getLogger(__name__)


def _coerce(value: FilterSpec | str | None, variant: type, resource_name: str, label: str):
    if value is None:
        raise InvalidArgumentError(
            f"Cannot get resource {resource_name!r} with {label} due to a null {label} reference"
        )
    if isinstance(value, str):
        return variant(value)
    if not isinstance(value, variant):
        raise InvalidArgumentError(
            f"Cannot get resource {resource_name!r} with {label}: expected "
            f"{variant.__name__}, got {type(value).__name__}"
        )
    return value


def _check_resource_name(resource_name: str | None, label: str) -> None:
    if resource_name is None or not resource_name.strip():
        raise InvalidArgumentError(
            f"Cannot get resource with {label} due to a null or blank resource name"
        )


class EthosFilterQueryClient:
    """High-level client for filtered queries against the resource API.

    Example:
        >>> async with EthosFilterQueryClient() as client:
        ...     pages = await client.get_pages_with_criteria_filter(
        ...         "persons",
        ...         CriteriaFilter.build({"names": [{"lastName": "Smith"}]}),
        ...     )
        ...     total = await client.get_total_count(
        ...         "persons", CriteriaFilter.build({"names": [{"lastName": "Smith"}]})
        ...     )
    """

    def __init__(
        self,
        *,
        config: ProxyConfig | None = None,
        transport: Transport | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            config: Base URL, version and page size defaults
            transport: Optional transport (creates a RESTTransport if not provided)
        """
        self._config = config or ProxyConfig()
        self._owns_transport = transport is None
        self._transport = transport or RESTTransport(timeout=self._config.timeout)
        self._engine = PagingEngine(
            self._transport,
            config=self._config,
            urls=EthosUrls(self._config.base_url),
        )
        self._closed = False

    @property
    def engine(self) -> PagingEngine:
        return self._engine

    async def _get(
        self, resource_name: str, version: str | None, filter_spec: FilterSpec
    ) -> ResponseEnvelope:
        return await self._engine.fetcher.fetch(
            resource_name, version or self._config.default_version, filter_spec
        )

    async def get_with_criteria_filter(
        self,
        resource_name: str,
        criteria_filter: CriteriaFilter | str,
        *,
        version: str | None = None,
    ) -> ResponseEnvelope:
        """Fetch the first page of a resource matching a criteria filter."""
        _check_resource_name(resource_name, "criteria filter")
        filter_spec = _coerce(criteria_filter, CriteriaFilter, resource_name, "criteria filter")
        return await self._get(resource_name, version, filter_spec)

    async def get_with_named_query_filter(
        self,
        resource_name: str,
        named_query_filter: NamedQueryFilter | str,
        *,
        version: str | None = None,
    ) -> ResponseEnvelope:
        """Fetch the first page of a resource matching a named query."""
        _check_resource_name(resource_name, "named query filter")
        filter_spec = _coerce(
            named_query_filter, NamedQueryFilter, resource_name, "named query filter"
        )
        return await self._get(resource_name, version, filter_spec)

    async def get_with_filter_map(
        self,
        resource_name: str,
        filter_map: FilterMap | str,
        *,
        version: str | None = None,
    ) -> ResponseEnvelope:
        _check_resource_name(resource_name, "filter map")
        filter_spec = _coerce(filter_map, FilterMap, resource_name, "filter map")
        return await self._get(resource_name, version, filter_spec)

    async def get_with_qapi(
        self,
        resource_name: str,
        qapi_body: QapiBody | str,
        *,
        version: str | None = None,
    ) -> ResponseEnvelope:
        """POST a QAPI request body and return the first page."""
        _check_resource_name(resource_name, "QAPI request body")
        filter_spec = _coerce(qapi_body, QapiBody, resource_name, "QAPI request body")
        return await self._get(resource_name, version, filter_spec)

    async def _get_pages(
        self,
        resource_name: str,
        value: FilterSpec | str | None,
        variant: type,
        label: str,
        version: str | None,
        page_size: int,
        offset: int,
    ) -> list[ResponseEnvelope]:
        _check_resource_name(resource_name, label)
        filter_spec = _coerce(value, variant, resource_name, label)
        return await self._engine.resolve(
            resource_name, filter_spec, version=version, page_size=page_size, offset=offset
        )

    async def get_pages_with_criteria_filter(
        self,
        resource_name: str,
        criteria_filter: CriteriaFilter | str,
        *,
        version: str | None = None,
        page_size: int = DEFAULT_PAGE_SIZE,
        offset: int = 0,
    ) -> list[ResponseEnvelope]:
        """Fetch every page of a resource matching a criteria filter."""
        return await self._get_pages(
            resource_name,
            criteria_filter,
            CriteriaFilter,
            "criteria filter",
            version,
            page_size,
            offset,
        )

    async def get_pages_with_named_query_filter(
        self,
        resource_name: str,
        named_query_filter: NamedQueryFilter | str,
        *,
        version: str | None = None,
        page_size: int = DEFAULT_PAGE_SIZE,
        offset: int = 0,
    ) -> list[ResponseEnvelope]:
        return await self._get_pages(
            resource_name,
            named_query_filter,
            NamedQueryFilter,
            "named query filter",
            version,
            page_size,
            offset,
        )

    async def get_pages_with_filter_map(
        self,
        resource_name: str,
        filter_map: FilterMap | str,
        *,
        version: str | None = None,
        page_size: int = DEFAULT_PAGE_SIZE,
        offset: int = 0,
    ) -> list[ResponseEnvelope]:
        return await self._get_pages(
            resource_name,
            filter_map,
            FilterMap,
            "filter map",
            version,
            page_size,
            offset,
        )

    async def get_pages_with_qapi(
        self,
        resource_name: str,
        qapi_body: QapiBody | str,
        *,
        version: str | None = None,
        page_size: int = DEFAULT_PAGE_SIZE,
        offset: int = 0,
    ) -> list[ResponseEnvelope]:
        """POST a QAPI request body once per page and collect the pages."""
        return await self._get_pages(
            resource_name,
            qapi_body,
            QapiBody,
            "QAPI request body",
            version,
            page_size,
            offset,
        )

    async def get_all_pages(
        self,
        resource_name: str,
        *,
        version: str | None = None,
        page_size: int = DEFAULT_PAGE_SIZE,
        offset: int = 0,
        num_pages: int = 0,
        num_rows: int = 0,
    ) -> list[ResponseEnvelope]:
        """Fetch pages of the unfiltered listing, optionally capped by pages or rows."""
        return await self._engine.resolve_all(
            resource_name,
            version=version,
            page_size=page_size,
            offset=offset,
            num_pages=num_pages,
            num_rows=num_rows,
        )

    async def get_total_count(
        self,
        resource_name: str | None,
        filter_spec: FilterSpec | None,
        *,
        version: str | None = None,
    ) -> int:
        """Records matching a filter; 0 when the resource name or filter is missing."""
        return await self._engine.total_count(resource_name, filter_spec, version=version)

    async def close(self) -> None:
        """Close the client and the transport it owns."""
        if self._closed:
            return
        self._closed = True
        logger.debug("Closing EthosFilterQueryClient")
        if self._owns_transport:
            await self._transport.close()

    async def __aenter__(self) -> EthosFilterQueryClient:
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Async context manager exit."""
        await self.close()
