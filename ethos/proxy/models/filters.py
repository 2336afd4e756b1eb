"""Filter specifications for filtered resource requests.

Architecture:
    A request is filtered by exactly one of four mechanisms, modelled as a
    closed tagged union (``FilterSpec``):

    - CriteriaFilter: ``?criteria={json}`` appended to the resource listing URL
    - NamedQueryFilter: ``?<queryName>={json}`` appended to the listing URL
    - FilterMap: legacy ``?key=value&key=value`` URL parameters
    - QapiBody: JSON criteria sent as the body of a POST to the QAPI endpoint

    Each variant is an immutable value carrying its raw text and a ``kind``
    tag. ``url_text()`` returns the text ready for the wire, and ``encode()``
    returns a copy whose text is already encoded so encoding happens once.

Design Decisions:
    - Frozen dataclasses: filters are values, safe to reuse across calls
    - Builders produce compact JSON (no whitespace) from Python mappings
    - Only criteria and named-query text is percent-encoded; filter maps are
      sent as given and QAPI bodies never touch the URL
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass, replace
from typing import Any, ClassVar, Union
from urllib.parse import quote_plus

from ..core.constants import CRITERIA_FILTER_PREFIX
from ..core.enums import FilterKind
from ..core.exceptions import InvalidArgumentError

__all__ = [
    "CriteriaFilter",
    "NamedQueryFilter",
    "FilterMap",
    "QapiBody",
    "FilterSpec",
    "encode_criteria_filter_str",
    "encode_named_query_str",
]


def _url_encode(value: str) -> str:
    # Form encoding, UTF-8: spaces become '+', everything reserved is escaped.
    return quote_plus(value, safe="", encoding="utf-8")


def _compact_json(value: Any) -> str:
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)


def encode_criteria_filter_str(criteria_filter_str: str) -> str:
    """Percent-encode the JSON part of a criteria filter.

    A leading ``?criteria=`` is stripped before encoding and re-prepended
    verbatim afterwards; input without the prefix gets it added.

    Args:
        criteria_filter_str: Criteria filter text, with or without prefix

    Returns:
        ``?criteria=`` followed by the encoded JSON
    """
    if criteria_filter_str.startswith(CRITERIA_FILTER_PREFIX):
        json_criteria = criteria_filter_str[criteria_filter_str.index("=") + 1 :]
    else:
        json_criteria = criteria_filter_str
    return f"{CRITERIA_FILTER_PREFIX}{_url_encode(json_criteria)}"


def encode_named_query_str(named_query_str: str) -> str:
    """Percent-encode the value part of a named query filter.

    Without an ``=`` the whole string is encoded. Otherwise everything up to
    and including the first ``=`` is kept and only the rest is encoded.
    """
    if "=" not in named_query_str:
        return _url_encode(named_query_str)
    split = named_query_str.index("=") + 1
    return f"{named_query_str[:split]}{_url_encode(named_query_str[split:])}"


def _require_text(text: str | None, kind: FilterKind) -> str:
    if text is None or not str(text).strip():
        raise InvalidArgumentError(f"Cannot build {kind.value} filter from blank text")
    return str(text)


def _require_criteria(criteria: Mapping[str, Any] | None, what: str) -> Mapping[str, Any]:
    if not criteria:
        raise InvalidArgumentError(f"Cannot build {what} from empty criteria")
    for key, value in criteria.items():
        if key is None or not str(key).strip():
            raise InvalidArgumentError(f"Cannot build {what} due to a blank criteria key")
        if value is None or (isinstance(value, str) and not value.strip()):
            raise InvalidArgumentError(
                f"Cannot build {what} due to a blank value for criteria key {key!r}"
            )
    return criteria


@dataclass(frozen=True)
class _BaseFilter:
    text: str
    encoded: bool = False

    kind: ClassVar[FilterKind]

    def __post_init__(self) -> None:
        _require_text(self.text, self.kind)

    def url_text(self) -> str:
        """Filter text as it goes on the wire."""
        return self.text

    def encode(self):
        """Copy of this filter whose text is already in wire form."""
        if self.encoded:
            return self
        return replace(self, text=self.url_text(), encoded=True)

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True)
class CriteriaFilter(_BaseFilter):
    """JSON criteria filter, e.g. ``?criteria={"lastName":"Smith"}``."""

    kind: ClassVar[FilterKind] = FilterKind.CRITERIA

    @classmethod
    def build(cls, *criteria_sets: Mapping[str, Any]) -> CriteriaFilter:
        """Build a criteria filter from one or more criteria mappings.

        Criteria sets are merged in order into a single JSON object; values
        can be strings, numbers, nested mappings or lists.

        Example:
            >>> str(CriteriaFilter.build({"names": [{"firstName": "John"}]}))
            '?criteria={"names":[{"firstName":"John"}]}'
        """
        if not criteria_sets:
            raise InvalidArgumentError("Cannot build criteria filter without criteria")
        merged: dict[str, Any] = {}
        for criteria in criteria_sets:
            merged.update(_require_criteria(criteria, "criteria filter"))
        return cls(f"{CRITERIA_FILTER_PREFIX}{_compact_json(merged)}")

    def url_text(self) -> str:
        if self.encoded:
            return self.text
        return encode_criteria_filter_str(self.text)


@dataclass(frozen=True)
class NamedQueryFilter(_BaseFilter):
    """Named query filter, e.g. ``?keywordSearch={"keywordSearch":"Smith"}``."""

    kind: ClassVar[FilterKind] = FilterKind.NAMED_QUERY

    @classmethod
    def build(cls, query_name: str, criteria: Mapping[str, Any]) -> NamedQueryFilter:
        if query_name is None or not query_name.strip():
            raise InvalidArgumentError("Cannot build named query filter due to a blank query name")
        _require_criteria(criteria, "named query filter")
        return cls(f"?{query_name}={_compact_json(dict(criteria))}")

    def url_text(self) -> str:
        if self.encoded:
            return self.text
        return encode_named_query_str(self.text)


@dataclass(frozen=True)
class FilterMap(_BaseFilter):
    """Legacy ``?key=value&key=value`` filter. Sent without encoding."""

    kind: ClassVar[FilterKind] = FilterKind.FILTER_MAP

    @classmethod
    def build(cls, pairs: Mapping[str, Any]) -> FilterMap:
        _require_criteria(pairs, "filter map")
        return cls("?" + "&".join(f"{key}={value}" for key, value in pairs.items()))


@dataclass(frozen=True)
class QapiBody(_BaseFilter):
    """QAPI request body: JSON criteria POSTed instead of sent in the URL."""

    kind: ClassVar[FilterKind] = FilterKind.QAPI

    @classmethod
    def build(cls, criteria: Mapping[str, Any]) -> QapiBody:
        _require_criteria(criteria, "QAPI request body")
        return cls(_compact_json(dict(criteria)))

    def encode(self) -> QapiBody:
        # The body is never placed in a URL.
        return self


FilterSpec = Union[CriteriaFilter, NamedQueryFilter, FilterMap, QapiBody]
