"""Search model base — Typed application models populated from Solr documents.

Application models subclass :class:`SearchModel` to satisfy the contracts the
data provider relies on:

  1. ``populate_from_search_result()`` builds an instance from a raw document
  2. ``attributes()`` / ``attribute_label()`` drive default sort definitions
  3. ``primary_key()`` declares the model identity used for keys

Example::

    class Article(SearchModel):
        identity: ClassVar[tuple[str, ...]] = ("id",)

        id: str
        title: str = Field(default="", title="Headline")
        sales: int = 0
"""

from __future__ import annotations

import re
import types
import typing
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from solrprovider.exceptions import ResolutionError

_MULTI_VALUED = (list, tuple, set, frozenset)


def _is_multi_valued(annotation: Any) -> bool:
    """Whether a field annotation accepts a collection of values."""
    origin = typing.get_origin(annotation)
    if origin in _MULTI_VALUED or annotation in _MULTI_VALUED:
        return True
    if origin is typing.Union or origin is types.UnionType:
        return any(_is_multi_valued(arg) for arg in typing.get_args(annotation))
    return False


def _is_scalar(annotation: Any) -> bool:
    """Whether a list value for this annotation should be unwrapped."""
    if annotation in (Any, object, None):
        return False
    return not _is_multi_valued(annotation)


def humanize(name: str) -> str:
    """Turn an attribute name into a display label (``published_date`` → ``Published Date``)."""
    spaced = re.sub(r"(?<=[a-z0-9])(?=[A-Z])", " ", name)
    words = re.split(r"[\s_.\-]+", spaced.strip())
    return " ".join(w[:1].upper() + w[1:] for w in words if w)


class SearchModel(BaseModel):
    """Base class for models built from search result documents.

    Subclasses declare their identity at class level. An empty ``identity``
    means the model has none and keys fall back to positions.
    """

    model_config = ConfigDict(populate_by_name=True)

    identity: ClassVar[tuple[str, ...]] = ()

    @classmethod
    def populate_from_search_result(cls, document: dict[str, Any]) -> SearchModel:
        """Build a model from a raw Solr document.

        Solr may return single-valued fields as lists. A one-element list is
        unwrapped for a scalar field, and an empty list falls back to the
        field default when there is one. Longer lists are left for pydantic
        to reject, and fields typed ``Any`` receive the value unchanged.

        Raises:
            ResolutionError: If the document does not validate against the model.
        """
        data = dict(document)
        for name, field in cls.model_fields.items():
            key = field.alias or name
            value = data.get(key)
            if not isinstance(value, list) or not _is_scalar(field.annotation):
                continue
            if len(value) == 1:
                data[key] = value[0]
            elif not value and not field.is_required():
                del data[key]
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise ResolutionError(f"Cannot populate {cls.__name__} from document: {e}") from e

    @classmethod
    def attributes(cls) -> list[str]:
        """Declared attribute names in definition order."""
        return list(cls.model_fields)

    @classmethod
    def attribute_label(cls, attribute: str) -> str:
        field = cls.model_fields.get(attribute)
        if field is not None and field.title:
            return field.title
        return humanize(attribute)

    @classmethod
    def primary_key(cls) -> tuple[str, ...]:
        return tuple(cls.identity)

    def __getitem__(self, name: str) -> Any:
        if name in type(self).model_fields:
            return getattr(self, name)
        extra = self.model_extra or {}
        if name in extra:
            return extra[name]
        raise KeyError(name)


class SearchResult(SearchModel):
    """Generic model for documents of any shape, keyed by ``id``."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    identity: ClassVar[tuple[str, ...]] = ("id",)

    id: str = Field(description="Unique document identifier")
    score: float | None = Field(default=None, description="Relevance score from Solr")
