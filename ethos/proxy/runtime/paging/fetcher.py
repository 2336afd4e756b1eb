"""Single-request fetches against the resource API.

``ResourceFetcher`` turns a resource name, version and filter into exactly
one Transport call. GET-style filters (criteria, named query, filter map)
go to the filtered listing URL; QAPI bodies are POSTed to the QAPI
endpoint. Filter text is taken from ``url_text()``, so both raw and
already-encoded filters are sent in wire form.
"""

from __future__ import annotations

from ...models.filters import FilterSpec
from ...models.response import ResponseEnvelope
from ..rest.transport import Transport
from ..rest.urls import EthosUrls, build_headers


class ResourceFetcher:
    def __init__(self, transport: Transport, urls: EthosUrls) -> None:
        self._t = transport
        self._urls = urls

    async def fetch(
        self, resource_name: str, version: str | None, filter_spec: FilterSpec
    ) -> ResponseEnvelope:
        """One filtered request without explicit paging parameters."""
        headers = build_headers(version)
        if filter_spec.kind.uses_post:
            return await self._t.post(
                self._urls.qapi(resource_name), headers=headers, body=filter_spec.url_text()
            )
        url = self._urls.api_filter(resource_name, filter_spec.url_text())
        return await self._t.get(url, headers=headers)

    async def fetch_unfiltered(self, resource_name: str, version: str | None) -> ResponseEnvelope:
        """One request for the first page of the unfiltered listing."""
        return await self._t.get(self._urls.apis(resource_name), headers=build_headers(version))

    async def fetch_page(
        self,
        resource_name: str,
        version: str | None,
        filter_spec: FilterSpec | None,
        offset: int,
        limit: int,
    ) -> ResponseEnvelope:
        """One request for the page starting at ``offset``, ``limit`` rows long."""
        headers = build_headers(version)
        if filter_spec is None:
            url = self._urls.api_paging(resource_name, offset, limit)
            return await self._t.get(url, headers=headers)
        if filter_spec.kind.uses_post:
            url = self._urls.qapi_paging(resource_name, offset, limit)
            return await self._t.post(url, headers=headers, body=filter_spec.url_text())
        url = self._urls.api_filter_paging(resource_name, filter_spec.url_text(), offset, limit)
        return await self._t.get(url, headers=headers)
