"""Defaults and header names shared by the proxy client."""

DEFAULT_VERSION = "application/json"

# A caller page size at or below this value lets the engine pick the page size.
DEFAULT_PAGE_SIZE = 0
DEFAULT_MAX_PAGE_SIZE = 500

DEFAULT_TIMEOUT = 30.0

HDR_ACCEPT = "Accept"
HDR_CONTENT_TYPE = "Content-Type"
HDR_X_TOTAL_COUNT = "x-total-count"
HDR_X_MAX_PAGE_SIZE = "x-max-page-size"

CRITERIA_FILTER_PREFIX = "?criteria="
