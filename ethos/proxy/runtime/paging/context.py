"""Paging context: state of one paging operation in progress."""

from __future__ import annotations

from dataclasses import dataclass

from ...core.constants import DEFAULT_VERSION
from ...core.enums import FilterKind
from ...models.filters import FilterSpec
from ...models.response import ResponseEnvelope

UNKNOWN_TOTAL_COUNT = -1
UNRESOLVED_PAGE_SIZE = 0


@dataclass
class PagingContext:
    """Mutable accumulator for a single paging call.

    Built per call from caller input, populated in place by the resolver and
    the engine, then discarded. Never shared between calls.

    Attributes:
        resource_name: Resource being listed
        version: Media type sent in Accept/Content-Type
        filter: Active filter, or None for an unfiltered listing
        page_size: Records per fetch (0 = not resolved yet)
        total_count: Matching records (-1 = unknown)
        offset: Zero-based row the first fetch starts from
        num_pages: Page cap for unfiltered paging (0 = no cap)
        num_rows: Row cap for unfiltered paging (0 = no cap)
        should_page: Derived decision, see ``PagingEngine.should_page``
        last_probe_response: Response of the probe request, if any
    """

    resource_name: str
    version: str = DEFAULT_VERSION
    filter: FilterSpec | None = None
    page_size: int = UNRESOLVED_PAGE_SIZE
    total_count: int = UNKNOWN_TOTAL_COUNT
    offset: int = 0
    num_pages: int = 0
    num_rows: int = 0
    should_page: bool = False
    last_probe_response: ResponseEnvelope | None = None

    @property
    def filter_kind(self) -> FilterKind | None:
        return self.filter.kind if self.filter is not None else None

    @property
    def total_known(self) -> bool:
        return self.total_count >= 0

    @property
    def page_size_known(self) -> bool:
        return self.page_size > 0
