"""Model instance protocol: the keyed bag of values mapped through a schema."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class ModelInstance(Protocol):
    """A concrete model value supplied by the model-introspection layer.

    Values are addressed by local field name. Type coercion is the
    implementer's concern; schemas pass values through unchanged.
    """

    @property
    def model_name(self) -> str:
        """Declared model identity, compared against the schema name."""
        ...

    def get_field_value(self, name: str) -> Any:
        """Return the value of a field. Raises ``KeyError`` if the field does not exist."""
        ...


@dataclass(frozen=True)
class ModelRecord:
    """Mapping-backed :class:`ModelInstance`."""

    model_name: str
    values: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "values", MappingProxyType(dict(self.values)))

    def get_field_value(self, name: str) -> Any:
        return self.values[name]
