"""Secondary index declaration attached to a model schema."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, Field


class ModelIndex(BaseModel):
    """Secondary index of a model: an optional name and an ordered list of field names."""

    index_name: str | None = Field(default=None, description="Index name, if declared.")
    index_field_names: tuple[str, ...] = Field(default=(), description="Indexed field names, in order.")

    model_config = {"extra": "forbid", "frozen": True}

    @classmethod
    def from_declaration(cls, declaration: Any = None) -> ModelIndex:
        """Derive an index from an optional declaration.

        Accepts ``None`` (empty index), an existing :class:`ModelIndex`, a mapping
        with ``name`` / ``fields`` keys, or a ``(name, fields)`` pair. Field names
        are not checked against the model's fields here.
        """
        if declaration is None:
            return cls()
        if isinstance(declaration, ModelIndex):
            return declaration
        if isinstance(declaration, Mapping):
            name = declaration.get("name", declaration.get("index_name"))
            fields = declaration.get("fields", declaration.get("index_field_names", ()))
        elif isinstance(declaration, tuple) and len(declaration) == 2:
            name, fields = declaration
        else:
            raise TypeError(f"Unsupported index declaration: {declaration!r}")
        if isinstance(fields, str):
            raise TypeError(f"Index fields must be a sequence of names, got string {fields!r}")
        return cls(index_name=name, index_field_names=tuple(fields or ()))

    def is_empty(self) -> bool:
        """True when no index was declared."""
        return self.index_name is None and not self.index_field_names
