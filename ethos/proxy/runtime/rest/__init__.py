"""REST runtime abstractions."""

from .http_client import HTTPClient
from .transport import RESTTransport, Transport
from .urls import EthosUrls, add_paging, build_headers

__all__ = [
    "HTTPClient",
    "Transport",
    "RESTTransport",
    "EthosUrls",
    "add_paging",
    "build_headers",
]
