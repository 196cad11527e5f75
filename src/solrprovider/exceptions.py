"""Exception hierarchy shared by the provider and its backends."""


class SolrProviderError(Exception):
    """Base exception for all SolrProvider errors."""


class ConfigurationError(SolrProviderError):
    """Raised when the provider or a backend is misconfigured."""


class BackendError(SolrProviderError):
    """Base exception for failures raised while executing a query."""


class ConnectionError(BackendError):
    """Raised when the backend cannot reach the search service."""


class QueryError(BackendError):
    """Raised when the search service rejects or fails a query."""


class ResolutionError(SolrProviderError):
    """Raised when a document cannot be turned into a model."""


class KeyExtractionError(SolrProviderError, LookupError):
    """Raised when a prepared model lacks the field used as its key."""
