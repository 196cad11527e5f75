"""Base query backend — Abstract interface for executing search queries.

The data provider consumes exactly one backend operation: ``execute()``.
A backend is responsible for:
  1. Sending a query to the search service
  2. Returning the page of raw documents together with the total match count
  3. Reporting health status

Backends must not mutate the query they are given; the provider always
passes a clone when it needs a modified query.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from solrprovider.models.query import SelectQuery


class BackendHealth(BaseModel):
    """Health status of a query backend."""

    status: str = Field(description="Health status: healthy, degraded, unhealthy")
    latency_ms: int = Field(default=0, description="Latency of last health check in ms")
    last_check: str | None = Field(default=None, description="ISO timestamp of last health check")
    message: str | None = Field(default=None, description="Additional health message")


class ResultSet(BaseModel):
    """Read-only response of a backend to a single query."""

    model_config = ConfigDict(frozen=True)

    documents: list[dict[str, Any]] = Field(default_factory=list, description="Raw documents in backend order")
    num_found: int = Field(default=0, ge=0, description="Total number of matching documents")
    metadata: dict[str, Any] = Field(default_factory=dict, description="Backend-specific metadata")
    took_ms: int = Field(default=0, description="Backend query execution time in ms")

    def __iter__(self) -> Iterator[dict[str, Any]]:  # type: ignore[override]
        return iter(self.documents)

    def __len__(self) -> int:
        return len(self.documents)


class QueryBackend(ABC):
    """Abstract base class for query backends.

    All backends must implement:
      - execute(): Run a query and return a ``ResultSet``
      - health_check(): Report backend health status

    ``initialize()`` and ``shutdown()`` default to no-ops for backends that
    hold no connections.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Unique backend name (e.g., 'solr')."""

    def initialize(self) -> None:
        """Open connections. Called once before the first query."""

    def shutdown(self) -> None:
        """Release connections."""

    @abstractmethod
    def execute(self, query: SelectQuery) -> ResultSet:
        """Execute a query against the search service.

        Args:
            query: The query to run. Must not be mutated.

        Returns:
            The page of documents and the total match count.

        Raises:
            BackendError: If the query cannot be executed.
        """

    @abstractmethod
    def health_check(self) -> BackendHealth:
        """Check the health of the search service."""
