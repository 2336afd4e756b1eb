"""Core enumerations.

Key Types:
    - Region: Hosted API regions and their base URLs
    - FilterKind: Tag of the filtering mechanism a request uses
    - PagingMode: How an unfiltered listing is paged
"""

from enum import Enum

_MAIN_BASE_URL = "https://integrate.elluciancloud"

_REGION_SUFFIX = {
    "us": ".com",
    "canada": ".ca",
    "europe": ".ie",
    "australia": ".com.au",
}


class Region(str, Enum):
    """Hosted regions of the integration API."""

    US = "us"
    CANADA = "canada"
    EUROPE = "europe"
    AUSTRALIA = "australia"

    @property
    def base_url(self) -> str:
        """Base URL for this region, without a trailing slash."""
        return f"{_MAIN_BASE_URL}{_REGION_SUFFIX[self.value]}"


class FilterKind(str, Enum):
    """Filtering mechanism of a request.

    GET-style kinds are sent in the URL of a filtered listing; QAPI is sent
    as a POST body.
    """

    CRITERIA = "criteria"
    NAMED_QUERY = "named_query"
    FILTER_MAP = "filter_map"
    QAPI = "qapi"

    @property
    def uses_post(self) -> bool:
        return self is FilterKind.QAPI


class PagingMode(str, Enum):
    """Paging strategy for unfiltered listings."""

    ALL_PAGES = "all_pages"
    NUM_PAGES = "num_pages"
    NUM_ROWS = "num_rows"
