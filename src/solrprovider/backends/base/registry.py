"""Backend Registry — Registration and retrieval of query backends.

The registry maps backend names to classes and keeps the initialized
instances, so callers can build a backend from configuration by name.
"""

from __future__ import annotations

import logging
from typing import Any

from solrprovider.backends.base.backend import QueryBackend
from solrprovider.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


class BackendRegistry:
    """Registry for query backend classes and instances.

    Example:
        >>> registry = BackendRegistry()
        >>> registry.register("solr", SolrBackend)
        >>> registry.initialize_backend("solr", collection="documents")
        >>> backend = registry.get("solr")
    """

    def __init__(self) -> None:
        self._classes: dict[str, type[QueryBackend]] = {}
        self._instances: dict[str, QueryBackend] = {}

    @classmethod
    def with_builtins(cls) -> BackendRegistry:
        """Create a registry with the built-in backends registered."""
        from solrprovider.backends.solr.backend import SolrBackend

        registry = cls()
        registry.register("solr", SolrBackend)
        return registry

    def register(self, name: str, backend_class: type[QueryBackend]) -> None:
        if name in self._classes:
            logger.warning("Overwriting existing backend registration: %s", name)
        self._classes[name] = backend_class
        logger.debug("Registered backend: %s", name)

    def initialize_backend(self, name: str, **kwargs: Any) -> QueryBackend:
        """Create and initialize a backend instance.

        Args:
            name: The registered backend name.
            **kwargs: Parameters passed to the backend constructor.

        Raises:
            ConfigurationError: If no backend is registered under this name.
        """
        if name not in self._classes:
            raise ConfigurationError(
                f"No backend registered with name '{name}'. "
                f"Available backends: {list(self._classes.keys())}"
            )

        backend = self._classes[name](**kwargs)
        backend.initialize()
        self._instances[name] = backend
        logger.info("Initialized backend: %s", name)
        return backend

    def get(self, name: str) -> QueryBackend:
        if name not in self._instances:
            raise ConfigurationError(
                f"Backend '{name}' is not initialized. Call initialize_backend() first."
            )
        return self._instances[name]

    def shutdown_all(self) -> None:
        """Shut down all initialized backends."""
        for name, backend in self._instances.items():
            try:
                backend.shutdown()
                logger.info("Shut down backend: %s", name)
            except Exception:
                logger.warning("Error shutting down backend: %s", name, exc_info=True)
        self._instances.clear()

    @property
    def registered_backends(self) -> list[str]:
        return list(self._classes.keys())

    @property
    def active_backends(self) -> list[str]:
        return list(self._instances.keys())
