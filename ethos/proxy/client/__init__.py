"""High-level client facade."""

from .filter_query_client import EthosFilterQueryClient

__all__ = ["EthosFilterQueryClient"]
