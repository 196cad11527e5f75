"""Search data provider — Lazy, memoized page of models over a search query.

The provider turns a query template into three values, each computed once on
first access:
  1. Total count: an independent, filter-only query execution
  2. Models: the paginated, sorted page, populated into model instances
  3. Keys: one key per model, in model order

Usage::

    query = SelectQuery(query="live:1").add_filter("type:article")

    provider = SearchDataProvider(
        query,
        backend,
        Article,
        sort={"params": {"sort": "-sales"}},
        pagination={"page_size": 10, "page": 1},
    )
    provider.get_models()       # documents 11-20
    provider.get_total_count()  # numFound of the unpaged query

A provider belongs to one request. Changing the query, sort or pagination
after a value was computed has no effect on it; build a new provider instead.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from solrprovider.backends.base.backend import QueryBackend
from solrprovider.data.keys import KeyExtractor
from solrprovider.data.pagination import Pagination
from solrprovider.data.resolver import Document, ModelResolver
from solrprovider.data.sort import Sort, SortAttribute, SortOrder
from solrprovider.exceptions import ConfigurationError
from solrprovider.models.query import SelectQuery

logger = logging.getLogger(__name__)


class SearchDataProvider:
    """Data provider backed by a ``QueryBackend``.

    Args:
        query: Query template. Never mutated.
        backend: Executes queries.
        model_class: A model class, a function ``document -> model class``,
            or a ``ModelResolver``.
        key: Field name or function giving each model's key. When unset the
            model class identity, then the position, is used.
        sort: ``False`` to disable sorting, a ``Sort``, or ``Sort`` kwargs.
        pagination: ``False`` to disable paging, a ``Pagination``, or
            ``Pagination`` kwargs.
        total_count: Known total count; skips the count query.
    """

    def __init__(
        self,
        query: SelectQuery | None,
        backend: QueryBackend,
        model_class: type | Callable[[Document], type] | ModelResolver,
        *,
        key: str | Callable[[Any], Any] | None = None,
        sort: Sort | dict[str, Any] | bool | None = None,
        pagination: Pagination | dict[str, Any] | bool | None = None,
        total_count: int | None = None,
    ) -> None:
        self.query = query
        self.backend = backend
        self.resolver = ModelResolver.of(model_class)
        self.key = key
        self._sort: Sort | None = None
        self._pagination: Pagination | None = None
        self._total_count = total_count
        self._models: list[Any] | None = None
        self._keys: list[Any] | None = None
        self.set_pagination(pagination)
        self.set_sort(sort)

    # ── Configuration ────────────────────────────────────────────────────

    def get_sort(self) -> Sort | None:
        return self._sort

    def set_sort(self, value: Sort | dict[str, Any] | bool | None) -> None:
        """Assign the sort state.

        When the assigned sort has no attributes and the model class lists
        its attributes, every attribute becomes sortable both ways, labeled
        by the model. This happens here, once, not on each fetch.
        """
        if value is False:
            self._sort = None
            return
        if value is None or value is True:
            sort = Sort()
        elif isinstance(value, dict):
            sort = Sort(**value)
        elif isinstance(value, Sort):
            sort = value
        else:
            raise ConfigurationError(f"Invalid sort configuration: {value!r}")

        model_class = self.resolver.default_type()
        if not sort.attributes and callable(getattr(model_class, "attributes", None)):
            label = getattr(model_class, "attribute_label", None)
            for attribute in model_class.attributes():
                sort.attributes[attribute] = SortAttribute.for_attribute(
                    attribute, label(attribute) if callable(label) else None
                )
        self._sort = sort

    def get_pagination(self) -> Pagination | None:
        return self._pagination

    def set_pagination(self, value: Pagination | dict[str, Any] | bool | None) -> None:
        if value is False:
            self._pagination = None
        elif value is None or value is True:
            self._pagination = Pagination()
        elif isinstance(value, dict):
            self._pagination = Pagination(**value)
        elif isinstance(value, Pagination):
            self._pagination = value
        else:
            raise ConfigurationError(f"Invalid pagination configuration: {value!r}")

    # ── Lazy values ──────────────────────────────────────────────────────

    def get_models(self) -> list[Any]:
        if self._models is None:
            self._models = self._prepare_models()
        return self._models

    def get_keys(self) -> list[Any]:
        if self._keys is None:
            models = self.get_models()
            extractor = KeyExtractor(self.key, self.resolver.default_type())
            self._keys = extractor.extract(models)
        return self._keys

    def get_total_count(self) -> int:
        if self._total_count is None:
            self._total_count = self._prepare_total_count()
        return self._total_count

    def get_count(self) -> int:
        """Number of models on the current page."""
        return len(self.get_models())

    models = property(get_models)
    keys = property(get_keys)
    total_count = property(get_total_count)
    count = property(get_count)

    # ── Preparation ──────────────────────────────────────────────────────

    def _template(self) -> SelectQuery:
        if not isinstance(self.query, SelectQuery):
            raise ConfigurationError('The "query" property must be a SelectQuery instance.')
        return self.query

    def _prepare_models(self) -> list[Any]:
        query = self._template().clone()

        if self._pagination is not None:
            if self._pagination.get_page_size() >= 1:
                self._pagination.total_count = self.get_total_count()
            query.set_rows(self._pagination.limit()).set_start(self._pagination.offset())

        if self._sort is not None:
            for attribute, order in self._sort.attribute_orders().items():
                query.add_sort(attribute, SelectQuery.SORT_ASC if order is SortOrder.ASC else SelectQuery.SORT_DESC)

        result = self.backend.execute(query)
        logger.debug(
            "Fetched %d of %d documents (start=%s, rows=%s)",
            len(result),
            result.num_found,
            query.start,
            query.rows,
        )
        return [self.resolver.build(document) for document in result]

    def _prepare_total_count(self) -> int:
        result = self.backend.execute(self._template().without_window())
        logger.debug("Counted %d matching documents", result.num_found)
        return int(result.num_found)
