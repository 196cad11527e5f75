"""Data provider layer — Sort, pagination, model resolution and keys."""

from solrprovider.data.keys import KeyExtractor
from solrprovider.data.pagination import Pagination
from solrprovider.data.provider import SearchDataProvider
from solrprovider.data.resolver import ComputedModelType, FixedModelType, ModelResolver
from solrprovider.data.sort import Sort, SortAttribute, SortOrder

__all__ = [
    "ComputedModelType",
    "FixedModelType",
    "KeyExtractor",
    "ModelResolver",
    "Pagination",
    "SearchDataProvider",
    "Sort",
    "SortAttribute",
    "SortOrder",
]
