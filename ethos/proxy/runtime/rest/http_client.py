"""HTTP client helper."""

from __future__ import annotations

import asyncio
import logging
from typing import Any

import aiohttp

from ...core.constants import DEFAULT_TIMEOUT
from ...core.exceptions import TransportError
from ...models.response import ResponseEnvelope

logger = logging.getLogger(__name__)


class HTTPClient:
    """Async HTTP client wrapper returning response envelopes.

    Any non-2xx status, connection error or timeout is raised as
    ``TransportError``. Nothing is retried here.
    """

    def __init__(self, base_url: str | None = None, timeout: float = DEFAULT_TIMEOUT) -> None:
        self.base_url = base_url
        self.timeout = aiohttp.ClientTimeout(total=timeout)
        self._session: aiohttp.ClientSession | None = None

    @property
    def session(self) -> aiohttp.ClientSession:
        """Get or create session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(timeout=self.timeout)
        return self._session

    def _full_url(self, url: str) -> str:
        # If base_url is set and url is relative, combine them
        if self.base_url and not url.startswith("http"):
            return f"{self.base_url}{url}"
        return url

    async def get(self, url: str, headers: dict[str, str] | None = None) -> ResponseEnvelope:
        """GET request."""
        return await self._request("GET", url, headers=headers)

    async def post(
        self,
        url: str,
        headers: dict[str, str] | None = None,
        data: str | None = None,
    ) -> ResponseEnvelope:
        """POST request with a pre-serialized body."""
        return await self._request("POST", url, headers=headers, data=data)

    async def _request(
        self,
        method: str,
        url: str,
        headers: dict[str, str] | None = None,
        data: str | None = None,
    ) -> ResponseEnvelope:
        url = self._full_url(url)
        kwargs: dict[str, Any] = {"headers": headers}
        if method == "POST":
            kwargs["data"] = data
            request = self.session.post
        else:
            request = self.session.get

        try:
            async with request(url, **kwargs) as response:
                body = await response.text(errors="replace")
                status = response.status
                response_headers = {str(key): value for key, value in response.headers.items()}
        except aiohttp.ClientError as e:
            logger.error(
                "http_request_failed",
                extra={"method": method, "url": url, "error_type": type(e).__name__},
            )
            raise TransportError(f"{method} {url} failed: {e}", url=url) from e
        except asyncio.TimeoutError as e:
            logger.error("http_request_timeout", extra={"method": method, "url": url})
            raise TransportError(f"{method} {url} timed out", url=url) from e

        if not 200 <= status < 300:
            logger.error(
                "http_request_rejected",
                extra={"method": method, "url": url, "status": status},
            )
            raise TransportError(
                f"{method} {url} returned HTTP {status}: {body[:200]}",
                status_code=status,
                url=url,
            )

        logger.debug("http_request_completed", extra={"method": method, "url": url, "status": status})
        return ResponseEnvelope(
            status_code=status,
            body=body,
            headers=response_headers,
            requested_url=url,
        )

    async def close(self) -> None:
        """Close session."""
        if self._session and not self._session.closed:
            await self._session.close()

    async def __aenter__(self) -> HTTPClient:
        """Context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        await self.close()
