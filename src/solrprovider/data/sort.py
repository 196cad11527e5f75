"""Sort state — Sortable attribute definitions and requested orders.

Requested orders are read from a parameter mapping (typically request query
parameters) in the form ``"-title,sales"``: attributes separated by
``separator``, a leading ``-`` meaning descending.
"""

from __future__ import annotations

import enum
from collections.abc import Iterable, Mapping
from typing import Any

from pydantic import BaseModel, Field

from solrprovider.models.base import humanize


class SortOrder(enum.Enum):
    ASC = "asc"
    DESC = "desc"


class SortAttribute(BaseModel):
    """How one attribute sorts in each direction, plus its display label."""

    asc: dict[str, SortOrder] = Field(default_factory=dict, description="Field orders for ascending sort")
    desc: dict[str, SortOrder] = Field(default_factory=dict, description="Field orders for descending sort")
    label: str = Field(default="", description="Display label")

    @classmethod
    def for_attribute(cls, attribute: str, label: str | None = None) -> SortAttribute:
        return cls(
            asc={attribute: SortOrder.ASC},
            desc={attribute: SortOrder.DESC},
            label=label if label is not None else humanize(attribute),
        )


class Sort:
    """Sort state consumed by the data provider.

    Args:
        attributes: Sortable attributes, as names or ``name -> definition``.
            An empty value lets the provider fill in defaults from the model.
        params: Parameters holding the requested sort under ``sort_param``.
        sort_param: Name of the parameter holding the requested sort.
        default_order: Orders used when no valid sort was requested.
        enable_multi_sort: Honor more than the first requested attribute.
        separator: Separator between requested attributes.
    """

    def __init__(
        self,
        attributes: Iterable[str] | Mapping[str, SortAttribute | dict[str, Any]] | None = None,
        params: Mapping[str, Any] | None = None,
        sort_param: str = "sort",
        default_order: Mapping[str, SortOrder] | None = None,
        enable_multi_sort: bool = False,
        separator: str = ",",
    ) -> None:
        self.attributes: dict[str, SortAttribute] = _normalize_attributes(attributes)
        self.params = dict(params or {})
        self.sort_param = sort_param
        self.default_order = dict(default_order or {})
        self.enable_multi_sort = enable_multi_sort
        self.separator = separator

    def attribute_orders(self) -> dict[str, SortOrder]:
        """Requested ``attribute -> order`` pairs, in request order."""
        orders: dict[str, SortOrder] = {}
        for attribute, order in self._requested():
            if attribute not in self.attributes:
                continue
            orders[attribute] = order
            if not self.enable_multi_sort:
                return orders
        return orders or dict(self.default_order)

    def _requested(self) -> list[tuple[str, SortOrder]]:
        raw = self.params.get(self.sort_param)
        if not raw or not isinstance(raw, str):
            return []
        requested = []
        for part in raw.split(self.separator):
            part = part.strip()
            if part.startswith("-"):
                requested.append((part[1:], SortOrder.DESC))
            elif part:
                requested.append((part, SortOrder.ASC))
        return requested


def _normalize_attributes(
    attributes: Iterable[str] | Mapping[str, SortAttribute | dict[str, Any]] | None,
) -> dict[str, SortAttribute]:
    if not attributes:
        return {}
    if not isinstance(attributes, Mapping):
        return {name: SortAttribute.for_attribute(name) for name in attributes}

    normalized: dict[str, SortAttribute] = {}
    for name, definition in attributes.items():
        if isinstance(definition, SortAttribute):
            normalized[name] = definition
            continue
        base = SortAttribute.for_attribute(name)
        normalized[name] = base.model_copy(update=SortAttribute.model_validate(definition).model_dump(exclude_unset=True))
    return normalized
