"""Query and result models."""

from solrprovider.models.base import SearchModel, SearchResult
from solrprovider.models.query import SelectQuery

__all__ = ["SearchModel", "SearchResult", "SelectQuery"]
