"""Transport protocol and its aiohttp-backed implementation."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from ...core.constants import DEFAULT_TIMEOUT
from ...models.response import ResponseEnvelope
from .http_client import HTTPClient


@runtime_checkable
class Transport(Protocol):
    """What the paging engine needs from the network layer.

    Implementations raise ``TransportError`` on non-2xx responses and on
    network failures. Timeouts and cancellation belong here as well.
    """

    async def get(self, url: str, headers: dict[str, str] | None = None) -> ResponseEnvelope: ...

    async def post(
        self,
        url: str,
        headers: dict[str, str] | None = None,
        body: str | None = None,
    ) -> ResponseEnvelope: ...

    async def close(self) -> None: ...


class RESTTransport:
    """Transport over a shared ``HTTPClient``."""

    def __init__(self, base_url: str | None = None, timeout: float = DEFAULT_TIMEOUT) -> None:
        self._http = HTTPClient(base_url=base_url, timeout=timeout)

    async def get(self, url: str, headers: dict[str, str] | None = None) -> ResponseEnvelope:
        return await self._http.get(url, headers=headers)

    async def post(
        self,
        url: str,
        headers: dict[str, str] | None = None,
        body: str | None = None,
    ) -> ResponseEnvelope:
        return await self._http.post(url, headers=headers, data=body)

    async def close(self) -> None:
        await self._http.close()

    async def __aenter__(self) -> RESTTransport:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
