"""Core components."""

from .config import ProxyConfig
from .constants import (
    CRITERIA_FILTER_PREFIX,
    DEFAULT_MAX_PAGE_SIZE,
    DEFAULT_PAGE_SIZE,
    DEFAULT_VERSION,
    HDR_X_MAX_PAGE_SIZE,
    HDR_X_TOTAL_COUNT,
)
from .enums import FilterKind, PagingMode, Region
from .exceptions import (
    InvalidArgumentError,
    InvalidPageSizeError,
    MissingHeaderError,
    ProxyError,
    TransportError,
)

__all__ = [
    "ProxyConfig",
    "Region",
    "FilterKind",
    "PagingMode",
    "CRITERIA_FILTER_PREFIX",
    "DEFAULT_MAX_PAGE_SIZE",
    "DEFAULT_PAGE_SIZE",
    "DEFAULT_VERSION",
    "HDR_X_MAX_PAGE_SIZE",
    "HDR_X_TOTAL_COUNT",
    "ProxyError",
    "InvalidArgumentError",
    "MissingHeaderError",
    "TransportError",
    "InvalidPageSizeError",
]
