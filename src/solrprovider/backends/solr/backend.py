"""Apache Solr backend — Query execution via Solr's JSON Request API.

Connects to Apache Solr (v8+) using a blocking ``httpx.Client``.

Usage::

    with SolrBackend(base_url="http://localhost:8983/solr", collection="documents") as backend:
        results = backend.execute(SelectQuery(query="solar"))
"""

from __future__ import annotations

import logging
import time
from datetime import UTC, datetime
from typing import Any

import httpx
from pydantic import ValidationError

from solrprovider.backends.base.backend import BackendHealth, QueryBackend, ResultSet
from solrprovider.exceptions import ConnectionError, QueryError
from solrprovider.models.query import SelectQuery

logger = logging.getLogger(__name__)


class SolrBackend(QueryBackend):
    """Query backend for Apache Solr (v8+).

    Communicates with Solr via its `JSON Request API`_ over HTTP.

    .. _JSON Request API: https://solr.apache.org/guide/solr/latest/query-guide/json-request-api.html

    Args:
        base_url: Solr base URL, e.g. ``"http://localhost:8983/solr"``.
        collection: Solr collection/core name.
        username: Optional basic-auth username.
        password: Optional basic-auth password.
        timeout: HTTP request timeout in seconds.
        default_params: Solr params merged under each query's own params.
    """

    def __init__(
        self,
        base_url: str = "http://localhost:8983/solr",
        collection: str = "documents",
        username: str | None = None,
        password: str | None = None,
        timeout: float = 30.0,
        default_params: dict[str, Any] | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._collection = collection
        self._username = username
        self._password = password
        self._timeout = timeout
        self._default_params = dict(default_params or {})
        self._client: httpx.Client | None = None

    @property
    def name(self) -> str:
        return "solr"

    def __enter__(self) -> SolrBackend:
        self.initialize()
        return self

    def __exit__(self, *exc: object) -> None:
        self.shutdown()

    def initialize(self) -> None:
        """Create an ``httpx.Client`` and ping the Solr admin API."""
        auth = None
        if self._username and self._password:
            auth = httpx.BasicAuth(self._username, self._password)

        self._client = httpx.Client(
            base_url=self._base_url,
            timeout=httpx.Timeout(self._timeout),
            auth=auth,
        )

        try:
            resp = self._client.get(f"/{self._collection}/admin/ping")
            resp.raise_for_status()
            logger.info(
                "Connected to Solr collection '%s' at %s",
                self._collection,
                self._base_url,
            )
        except httpx.HTTPError as e:
            self.shutdown()
            raise ConnectionError(f"Failed to connect to Solr: {e}") from e

    def shutdown(self) -> None:
        """Close the HTTP client."""
        if self._client:
            self._client.close()
            self._client = None

    # ── Query ────────────────────────────────────────────────────────────

    def execute(self, query: SelectQuery) -> ResultSet:
        """Run ``query`` against the collection's ``/select`` handler."""
        if not self._client:
            raise ConnectionError("Solr client not initialized.")

        body = query.to_request_body()
        if self._default_params:
            body["params"] = {**self._default_params, **body.get("params", {})}

        try:
            start = time.monotonic()
            resp = self._client.post(f"/{self._collection}/select", json=body)
            resp.raise_for_status()
            took_ms = int((time.monotonic() - start) * 1000)
        except httpx.HTTPError as e:
            raise QueryError(f"Solr query failed: {e}") from e

        try:
            data = resp.json()
        except ValueError as e:
            raise QueryError(f"Solr returned a non-JSON response: {e}") from e
        if not isinstance(data, dict):
            raise QueryError(f"Solr returned an unexpected payload: {data!r}")

        error = data.get("error")
        if error:
            message = error.get("msg", error) if isinstance(error, dict) else error
            raise QueryError(f"Solr query failed: {message}")

        response_section = data.get("response") or {}
        header = data.get("responseHeader") or {}
        try:
            return ResultSet(
                documents=response_section.get("docs", []),
                num_found=response_section.get("numFound", 0),
                metadata={"qtime_ms": header.get("QTime", 0)},
                took_ms=took_ms,
            )
        except (AttributeError, ValidationError) as e:
            raise QueryError(f"Solr returned a malformed response: {e}") from e

    # ── Health ───────────────────────────────────────────────────────────

    def health_check(self) -> BackendHealth:
        """Ping the Solr admin endpoint."""
        if not self._client:
            return BackendHealth(status="unhealthy", message="Client not initialized")

        try:
            start = time.monotonic()
            resp = self._client.get(f"/{self._collection}/admin/ping")
            latency_ms = int((time.monotonic() - start) * 1000)
        except httpx.HTTPError as e:
            return BackendHealth(status="unhealthy", message=str(e))

        if resp.status_code == 200:
            solr_status = resp.json().get("status", "unknown")
            return BackendHealth(
                status="healthy" if solr_status == "OK" else "degraded",
                latency_ms=latency_ms,
                last_check=datetime.now(UTC).isoformat(),
                message=f"Collection: {self._collection}, status: {solr_status}",
            )
        return BackendHealth(
            status="degraded",
            latency_ms=latency_ms,
            last_check=datetime.now(UTC).isoformat(),
            message=f"Solr returned HTTP {resp.status_code}",
        )
