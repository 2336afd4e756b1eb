"""Ethos Proxy - Filtered and paged access to the Ethos Integration API."""

from .client import EthosFilterQueryClient
from .core import (
    FilterKind,
    InvalidArgumentError,
    InvalidPageSizeError,
    MissingHeaderError,
    PagingMode,
    ProxyConfig,
    ProxyError,
    Region,
    TransportError,
)
from .models import (
    CriteriaFilter,
    FilterMap,
    FilterSpec,
    NamedQueryFilter,
    QapiBody,
    ResponseEnvelope,
)
from .runtime import PagingEngine, RESTTransport, Transport

__version__ = "0.1.0"

__all__ = [
    # Client
    "EthosFilterQueryClient",
    # Configuration
    "ProxyConfig",
    "Region",
    "FilterKind",
    "PagingMode",
    # Models
    "CriteriaFilter",
    "NamedQueryFilter",
    "FilterMap",
    "QapiBody",
    "FilterSpec",
    "ResponseEnvelope",
    # Runtime
    "PagingEngine",
    "Transport",
    "RESTTransport",
    # Exceptions
    "ProxyError",
    "InvalidArgumentError",
    "MissingHeaderError",
    "TransportError",
    "InvalidPageSizeError",
]
