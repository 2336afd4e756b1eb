"""Client configuration."""

from __future__ import annotations

from dataclasses import dataclass

from .constants import (
    DEFAULT_MAX_PAGE_SIZE,
    DEFAULT_PAGE_SIZE,
    DEFAULT_TIMEOUT,
    DEFAULT_VERSION,
)
from .enums import Region


@dataclass(frozen=True)
class ProxyConfig:
    """Settings shared by the transport, URL builder and paging engine.

    Attributes:
        base_url: API host, e.g. ``https://integrate.elluciancloud.com``
        default_version: Media type used when a caller gives no version
        default_page_size: Caller page sizes at or below this are engine-resolved
        max_page_size: Page size used when the server gives no usable hint
        timeout: Total request timeout in seconds
    """

    base_url: str = Region.US.base_url
    default_version: str = DEFAULT_VERSION
    default_page_size: int = DEFAULT_PAGE_SIZE
    max_page_size: int = DEFAULT_MAX_PAGE_SIZE
    timeout: float = DEFAULT_TIMEOUT

    def __post_init__(self) -> None:
        if not self.base_url or not self.base_url.strip():
            raise ValueError("ProxyConfig base_url cannot be blank")
        if self.max_page_size <= 0:
            raise ValueError("ProxyConfig max_page_size must be positive")
        if self.default_page_size < 0:
            raise ValueError("ProxyConfig default_page_size cannot be negative")
        if self.timeout <= 0:
            raise ValueError("ProxyConfig timeout must be positive")

    @classmethod
    def for_region(cls, region: Region | str, **overrides) -> ProxyConfig:
        """Build a config pointing at a hosted region."""
        region = Region(region)
        return cls(base_url=region.base_url, **overrides)
