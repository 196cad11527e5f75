"""Solr select query — Mutable query template for the JSON Request API.

The provider treats a ``SelectQuery`` as a template: it never mutates the
caller's instance, but works on clones obtained via :meth:`SelectQuery.clone`
(paginated fetch) and :meth:`SelectQuery.without_window` (count-only fetch).

Usage::

    query = SelectQuery(query="title:solar").add_filter("live:1")
    query.clone().set_rows(10).set_start(20).add_sort("score", SelectQuery.SORT_DESC)
"""

from __future__ import annotations

from typing import Any, ClassVar

from pydantic import BaseModel, Field


class SelectQuery(BaseModel):
    """A Solr ``/select`` request expressed as JSON Request API fields."""

    SORT_ASC: ClassVar[str] = "asc"
    SORT_DESC: ClassVar[str] = "desc"

    query: str = Field(default="*:*", description="Main query (Solr ``q``)")
    filters: list[str] = Field(default_factory=list, description="Filter queries (Solr ``fq``)")
    fields: list[str] = Field(default_factory=list, description="Returned fields (Solr ``fl``)")
    rows: int | None = Field(default=None, ge=0, description="Maximum documents to return")
    start: int | None = Field(default=None, ge=0, description="Offset of the first document")
    sorts: list[tuple[str, str]] = Field(default_factory=list, description="Ordered (field, direction) pairs")
    params: dict[str, Any] = Field(default_factory=dict, description="Extra Solr request parameters")

    # ── Fluent mutators ──────────────────────────────────────────────────

    def set_query(self, query: str) -> SelectQuery:
        self.query = query
        return self

    def add_filter(self, clause: str) -> SelectQuery:
        self.filters.append(clause)
        return self

    def set_fields(self, fields: list[str]) -> SelectQuery:
        self.fields = list(fields)
        return self

    def set_rows(self, rows: int | None) -> SelectQuery:
        self.rows = rows
        return self

    def set_start(self, start: int | None) -> SelectQuery:
        self.start = start
        return self

    def add_sort(self, field: str, direction: str) -> SelectQuery:
        """Append a sort clause.

        Raises:
            ValueError: If ``direction`` is not ``SORT_ASC`` or ``SORT_DESC``.
        """
        if direction not in (self.SORT_ASC, self.SORT_DESC):
            raise ValueError(f"Unknown sort direction: {direction!r}")
        self.sorts.append((field, direction))
        return self

    # ── Copies ───────────────────────────────────────────────────────────

    def clone(self) -> SelectQuery:
        """Return an independent deep copy of this query."""
        return self.model_copy(deep=True)

    def without_window(self) -> SelectQuery:
        """Return a filter-only clone: no rows, no start, no sort."""
        return self.model_copy(deep=True, update={"rows": None, "start": None, "sorts": []})

    # ── Wire format ──────────────────────────────────────────────────────

    def to_request_body(self) -> dict[str, Any]:
        """Render the JSON Request API body for Solr's ``/select`` handler."""
        body: dict[str, Any] = {"query": self.query}
        if self.filters:
            body["filter"] = list(self.filters)
        if self.fields:
            body["fields"] = list(self.fields)
        if self.rows is not None:
            body["limit"] = self.rows
        if self.start is not None:
            body["offset"] = self.start
        if self.sorts:
            body["sort"] = ", ".join(f"{field} {direction}" for field, direction in self.sorts)
        if self.params:
            body["params"] = dict(self.params)
        return body
