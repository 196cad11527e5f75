"""Model resolution — Which model class a document becomes, and how.

A resolver is a tagged choice:
  - ``FixedModelType``: every document becomes the same class
  - ``ComputedModelType``: a function picks the class per document, which
    allows heterogeneous result sets (e.g. by a ``type`` field)

Example::

    def by_type(doc):
        return Book if doc["type"] == "book" else Article

    resolver = ModelResolver.of(by_type)
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any

from solrprovider.exceptions import ResolutionError

Document = dict[str, Any]


class ModelResolver(ABC):
    """Maps raw documents to model classes and populates them."""

    @classmethod
    def of(cls, value: type | Callable[[Document], type] | ModelResolver) -> ModelResolver:
        """Build a resolver from a class, a resolver function, or a resolver."""
        if isinstance(value, ModelResolver):
            return value
        if isinstance(value, type):
            return FixedModelType(value)
        if callable(value):
            return ComputedModelType(value)
        raise ResolutionError(f"Cannot resolve models with {value!r}")

    @abstractmethod
    def resolve(self, document: Document) -> type:
        """Return the model class for ``document``."""

    @abstractmethod
    def default_type(self) -> type | None:
        """Return the model class known without a document, if any."""

    def populate(self, model_class: type, document: Document) -> Any:
        return model_class.populate_from_search_result(document)

    def build(self, document: Document) -> Any:
        return self.populate(self.resolve(document), document)


class FixedModelType(ModelResolver):
    def __init__(self, model_class: type) -> None:
        self.model_class = _check_model_class(model_class)

    def resolve(self, document: Document) -> type:
        return self.model_class

    def default_type(self) -> type | None:
        return self.model_class


class ComputedModelType(ModelResolver):
    """Resolver picking the model class per document.

    Args:
        func: Called with each document, returns a model class.
        base: Class describing every possible result, used for default sort
            attributes and key identity. Optional.
    """

    def __init__(self, func: Callable[[Document], type], base: type | None = None) -> None:
        self.func = func
        self.base = _check_model_class(base) if base is not None else None

    def resolve(self, document: Document) -> type:
        return _check_model_class(self.func(document))

    def default_type(self) -> type | None:
        return self.base


def _check_model_class(model_class: Any) -> type:
    if not isinstance(model_class, type) or not callable(getattr(model_class, "populate_from_search_result", None)):
        raise ResolutionError(f"{model_class!r} is not a model class with populate_from_search_result()")
    return model_class
