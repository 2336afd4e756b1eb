"""Runtime components: REST transport and the paging engine."""

from .paging import CountAndSizeResolver, PagingContext, PagingDriver, PagingEngine
from .rest import EthosUrls, HTTPClient, RESTTransport, Transport

__all__ = [
    "CountAndSizeResolver",
    "PagingContext",
    "PagingDriver",
    "PagingEngine",
    "EthosUrls",
    "HTTPClient",
    "RESTTransport",
    "Transport",
]
