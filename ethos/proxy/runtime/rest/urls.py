"""URL and header builders for the resource API."""

from __future__ import annotations

from ...core.constants import DEFAULT_VERSION, HDR_ACCEPT, HDR_CONTENT_TYPE


def build_headers(version: str | None = None) -> dict[str, str]:
    """Request headers for a resource version (media type)."""
    if version is None or not version.strip():
        version = DEFAULT_VERSION
    return {HDR_ACCEPT: version, HDR_CONTENT_TYPE: version}


def add_paging(url: str, offset: int, page_size: int) -> str:
    """Append ``offset``/``limit`` query parameters to a URL.

    A negative offset is left out, as is a page size below 1. When both are
    out of range the URL is returned unchanged.
    """
    params = []
    if offset >= 0:
        params.append(f"offset={offset}")
    if page_size > 0:
        params.append(f"limit={page_size}")
    if not params:
        return url
    separator = "&" if "?" in url else "?"
    return f"{url}{separator}{'&'.join(params)}"


class EthosUrls:
    """Builds resource API URLs below a base URL."""

    def __init__(self, base_url: str) -> None:
        self.base_url = base_url.rstrip("/")

    def apis(self, resource: str | None = None, resource_id: str | None = None) -> str:
        url = f"{self.base_url}/api"
        if resource and resource.strip():
            url = f"{url}/{resource}"
            if resource_id and resource_id.strip():
                url = f"{url}/{resource_id}"
        return url

    def api_filter(self, resource: str, filter_text: str | None) -> str:
        url = self.apis(resource)
        if filter_text and filter_text.strip():
            url = f"{url}{filter_text}"
        return url

    def api_filter_paging(
        self, resource: str, filter_text: str | None, offset: int, page_size: int
    ) -> str:
        return add_paging(self.api_filter(resource, filter_text), offset, page_size)

    def api_paging(self, resource: str, offset: int, page_size: int) -> str:
        return add_paging(self.apis(resource), offset, page_size)

    def qapi(self, resource: str) -> str:
        return f"{self.base_url}/qapi/{resource}"

    def qapi_paging(self, resource: str, offset: int, page_size: int) -> str:
        return add_paging(self.qapi(resource), offset, page_size)
