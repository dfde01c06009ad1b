"""Schema builder: turns a model description into a ModelSchema."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from modelkit_core.config import SchemaConfig
from modelkit_core.exceptions import ConstructionFailure
from modelkit_core.schema.field import FieldDescriptor
from modelkit_core.schema.index import ModelIndex
from modelkit_core.schema.model import ModelSchema

logger = logging.getLogger(__name__)


def build_model_schema(
    name: str,
    fields: Mapping[str, FieldDescriptor | Mapping[str, Any]],
    *,
    target_model_name: str | None = None,
    index: Any = None,
    config: SchemaConfig | None = None,
) -> ModelSchema:
    """Build an immutable :class:`ModelSchema` from a field table.

    Args:
        name: Canonical model name.
        fields: Mapping of local field name to a :class:`FieldDescriptor`, or to a
            plain mapping of descriptor attributes.
        target_model_name: Model name in the target; defaults to *name*.
        index: Optional secondary index declaration, see
            :meth:`ModelIndex.from_declaration`.
        config: Build options. Defaults to :class:`SchemaConfig` defaults.

    Returns:
        The built schema, with its canonical field order already computed.

    Raises:
        ConstructionFailure: If the description is malformed.
    """
    config = config or SchemaConfig()
    try:
        model_index = ModelIndex.from_declaration(index)
        schema = ModelSchema(
            name=name,
            target_model_name=target_model_name or name,
            fields=dict(fields),
            model_index=model_index,
        )
    except (ValidationError, ValueError, TypeError) as exc:
        logger.warning("Error in constructing a ModelSchema for %s: %s", name, exc)
        raise ConstructionFailure(
            model_name=name,
            detail="error in constructing a ModelSchema",
            cause=exc,
        ) from exc

    if config.strict_index:
        unknown = [f for f in schema.model_index.index_field_names if f not in schema.fields]
        if unknown:
            logger.warning("Index %r of %s names unknown field(s) %s", schema.model_index.index_name, name, unknown)
            raise ConstructionFailure(
                model_name=name,
                detail=f"index {schema.model_index.index_name!r} references unknown field(s): {unknown}",
            )

    logger.debug("Built ModelSchema %s with %d field(s)", name, len(schema.fields))
    return schema


class ModelSchemaBuilder:
    """Fluent builder collecting a model description before building it.

    >>> schema = (
    ...     ModelSchemaBuilder("Post")
    ...     .field(FieldDescriptor(name="id", declared_type="id", is_primary_key=True))
    ...     .index("byTitle", ["title"])
    ...     .build()
    ... )
    >>> [f.name for f in schema.sorted_fields]
    ['id']
    """

    def __init__(self, name: str, *, config: SchemaConfig | None = None) -> None:
        self._name = name
        self._config = config
        self._target_model_name: str | None = None
        self._fields: dict[str, FieldDescriptor | Mapping[str, Any]] = {}
        self._index: Any = None

    def target_model_name(self, target_model_name: str | None) -> ModelSchemaBuilder:
        self._target_model_name = target_model_name
        return self

    def field(self, descriptor: FieldDescriptor) -> ModelSchemaBuilder:
        """Add a field, keyed by its own name."""
        self._fields[descriptor.name] = descriptor
        return self

    def fields(self, fields: Mapping[str, FieldDescriptor | Mapping[str, Any]]) -> ModelSchemaBuilder:
        self._fields.update(fields)
        return self

    def index(self, name: str | None, field_names: list[str] | tuple[str, ...]) -> ModelSchemaBuilder:
        self._index = (name, tuple(field_names))
        return self

    def build(self) -> ModelSchema:
        return build_model_schema(
            self._name,
            self._fields,
            target_model_name=self._target_model_name,
            index=self._index,
            config=self._config,
        )
