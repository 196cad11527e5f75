"""Key extraction — One key per prepared model.

Policy, first match wins:
  1. explicit field name: ``model[field]``
  2. explicit function: ``func(model)``
  3. model class identity: the single value, or ``{field: value}`` for a
     composite identity
  4. the model's position in the page
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any

from solrprovider.exceptions import KeyExtractionError


class KeyExtractor:
    def __init__(self, key: str | Callable[[Any], Any] | None = None, model_class: type | None = None) -> None:
        self.key = key
        self.model_class = model_class

    def identity(self) -> tuple[str, ...]:
        """Identity fields declared by the model class."""
        primary_key = getattr(self.model_class, "primary_key", None)
        return tuple(primary_key()) if callable(primary_key) else ()

    def extract(self, models: Sequence[Any]) -> list[Any]:
        if isinstance(self.key, str):
            return [_field(model, self.key) for model in models]
        if self.key is not None:
            return [self.key(model) for model in models]

        fields = self.identity()
        if len(fields) == 1:
            return [_field(model, fields[0]) for model in models]
        if fields:
            return [{f: _field(model, f) for f in fields} for model in models]
        return list(range(len(models)))


def _field(model: Any, name: str) -> Any:
    try:
        return model[name]
    except (KeyError, IndexError, TypeError) as e:
        raise KeyExtractionError(f"{type(model).__name__} has no key field '{name}'") from e
