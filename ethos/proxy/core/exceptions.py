"""Custom exception hierarchy."""

from __future__ import annotations


class ProxyError(Exception):
    """Base exception for all library errors."""

    pass


class InvalidArgumentError(ProxyError, ValueError):
    """Caller supplied an unusable argument.

    Raised eagerly, before any request is sent: blank resource names,
    missing filter references, blank filter text or bad builder input.
    """

    pass


class MissingHeaderError(ProxyError):
    """A load-bearing response header is absent or unreadable."""

    def __init__(self, message: str, header: str | None = None) -> None:
        super().__init__(message)
        self.header = header


class TransportError(ProxyError):
    """A request against the remote API failed."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        url: str | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.url = url


class InvalidPageSizeError(ProxyError, ValueError):
    """Page size is zero or negative where a positive value is required."""

    def __init__(self, message: str, page_size: int | None = None) -> None:
        super().__init__(message)
        self.page_size = page_size
