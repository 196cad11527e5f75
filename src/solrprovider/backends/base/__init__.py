"""Base backend interface — Abstract classes for query executors."""

from solrprovider.backends.base.backend import BackendHealth, QueryBackend, ResultSet
from solrprovider.backends.base.registry import BackendRegistry

__all__ = ["BackendHealth", "BackendRegistry", "QueryBackend", "ResultSet"]
