"""Pagination state — Page window over a known total count."""

from __future__ import annotations

import math
from collections.abc import Mapping
from typing import Any


class Pagination:
    """Pagination state consumed by the data provider.

    The provider writes ``total_count`` before reading ``limit()`` and
    ``offset()``; both depend on it when ``validate_page`` is enabled and on
    the last page. With paging disabled neither does, and the provider
    leaves ``total_count`` alone.

    Args:
        page_size: Default number of items per page. Below 1 disables paging.
        page: Zero-based page used when ``params`` carries none.
        params: Parameters holding the one-based page and the page size.
        page_param: Name of the page parameter.
        page_size_param: Name of the page size parameter.
        page_size_limit: Inclusive (min, max) bounds for a requested page size.
        validate_page: Clamp the page into ``[0, page_count - 1]``.
        total_count: Total number of items, if already known.
    """

    def __init__(
        self,
        page_size: int = 20,
        page: int = 0,
        params: Mapping[str, Any] | None = None,
        page_param: str = "page",
        page_size_param: str = "per-page",
        page_size_limit: tuple[int, int] | None = (1, 50),
        validate_page: bool = True,
        total_count: int = 0,
    ) -> None:
        self.default_page_size = page_size
        self.params = dict(params or {})
        self.page_param = page_param
        self.page_size_param = page_size_param
        self.page_size_limit = page_size_limit
        self.validate_page = validate_page
        self.total_count = total_count
        self._page = page

    @property
    def page_count(self) -> int:
        page_size = self.get_page_size()
        if page_size < 1:
            return 1 if self.total_count > 0 else 0
        return math.ceil(max(self.total_count, 0) / page_size)

    def get_page_size(self) -> int:
        requested = _as_int(self.params.get(self.page_size_param))
        if requested is None:
            return self.default_page_size
        if self.page_size_limit is not None:
            low, high = self.page_size_limit
            requested = min(max(requested, low), high)
        return requested

    def get_page(self) -> int:
        requested = _as_int(self.params.get(self.page_param))
        page = requested - 1 if requested is not None else self._page
        if self.validate_page:
            page = min(page, self.page_count - 1)
        return max(page, 0)

    def offset(self) -> int:
        page_size = self.get_page_size()
        return 0 if page_size < 1 else self.get_page() * page_size

    def limit(self) -> int | None:
        """Rows to fetch: the page size, clamped to the items left after ``offset()``.

        Returns ``None`` when paging is disabled.
        """
        page_size = self.get_page_size()
        if page_size < 1:
            return None
        return max(min(page_size, self.total_count - self.offset()), 0)


def _as_int(value: Any) -> int | None:
    if value is None or isinstance(value, bool):
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None
