"""Data models for filters and responses.

Model Categories:
    - Filters: CriteriaFilter, NamedQueryFilter, FilterMap, QapiBody (FilterSpec)
    - Responses: ResponseEnvelope (pydantic, frozen)
"""

from .filters import (
    CriteriaFilter,
    FilterMap,
    FilterSpec,
    NamedQueryFilter,
    QapiBody,
    encode_criteria_filter_str,
    encode_named_query_str,
)
from .response import ResponseEnvelope

__all__ = [
    "CriteriaFilter",
    "FilterMap",
    "FilterSpec",
    "NamedQueryFilter",
    "QapiBody",
    "ResponseEnvelope",
    "encode_criteria_filter_str",
    "encode_named_query_str",
]
