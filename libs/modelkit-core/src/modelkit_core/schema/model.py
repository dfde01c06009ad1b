"""Model schema: canonically ordered field metadata for one model type."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from pydantic import BaseModel, Field, PrivateAttr, model_validator

from modelkit_core.exceptions import SchemaMismatch
from modelkit_core.protocols import ModelInstance
from modelkit_core.schema.field import FieldDescriptor, ModelConnection
from modelkit_core.schema.index import ModelIndex

logger = logging.getLogger(__name__)


def field_sort_key(field: FieldDescriptor) -> tuple[bool, bool, str]:
    """Sort key of the canonical field order.

    1. the primary key sorts last;
    2. connected fields sort before plain fields;
    3. ties are broken by ascending name.
    """
    return (field.is_primary_key, not field.is_connected(), field.name)


def compare_fields(a: FieldDescriptor, b: FieldDescriptor) -> int:
    """Three-way comparison consistent with :func:`field_sort_key`."""
    ka, kb = field_sort_key(a), field_sort_key(b)
    return (ka > kb) - (ka < kb)


class ModelSchema(BaseModel):
    """Immutable metadata of a model, with fields kept in canonical order.

    The canonical order (:func:`field_sort_key`) is computed once at construction
    so that query generation and serialization always see the same sequence
    for the same set of fields.

    Build schemas with :func:`~modelkit_core.schema.builder.build_model_schema`
    or load them with :func:`~modelkit_core.serialization.io.load_schema`; both
    report malformed input as :class:`~modelkit_core.exceptions.ConstructionFailure`.
    Calling the constructor directly raises ``pydantic.ValidationError`` instead.
    """

    name: str = Field(min_length=1, description="Canonical model identifier.")
    target_model_name: str = Field(default="", description="Model name in the target. Defaults to name.")
    field_map: dict[str, FieldDescriptor] = Field(
        default_factory=dict, alias="fields", description="Fields keyed by local name."
    )
    model_index: ModelIndex = Field(default_factory=ModelIndex, description="Secondary index of the model.")

    model_config = {"extra": "forbid", "frozen": True, "populate_by_name": True}

    _fields: Mapping[str, FieldDescriptor] = PrivateAttr(default_factory=lambda: MappingProxyType({}))
    _sorted_fields: tuple[FieldDescriptor, ...] = PrivateAttr(default=())
    _primary_key: FieldDescriptor | None = PrivateAttr(default=None)
    _foreign_keys: tuple[FieldDescriptor, ...] = PrivateAttr(default=())
    _connections: Mapping[FieldDescriptor, ModelConnection] = PrivateAttr(
        default_factory=lambda: MappingProxyType({})
    )

    @model_validator(mode="before")
    @classmethod
    def default_target_model_name(cls, data: Any) -> Any:
        """Fall back to the model name when no target name is given."""
        if isinstance(data, dict) and not data.get("target_model_name") and data.get("name"):
            data = {**data, "target_model_name": data["name"]}
        return data

    @model_validator(mode="after")
    def validate_field_map(self) -> ModelSchema:
        """Validate map keys, target-name uniqueness and at most one primary key."""
        targets: dict[str, str] = {}
        for key, field in self.field_map.items():
            if key != field.name:
                raise ValueError(f"Model '{self.name}' maps key '{key}' to field named '{field.name}'")
            if field.target_name in targets:
                raise ValueError(
                    f"Model '{self.name}' has fields '{targets[field.target_name]}' and '{field.name}' "
                    f"sharing target name '{field.target_name}'"
                )
            targets[field.target_name] = field.name

        pk_names = sorted(f.name for f in self.field_map.values() if f.is_primary_key)
        if len(pk_names) > 1:
            raise ValueError(f"Model '{self.name}' has multiple primary key fields: {pk_names}")
        return self

    def model_post_init(self, __context: Any) -> None:
        self._fields = MappingProxyType(self.field_map)
        sorted_fields = tuple(sorted(self.field_map.values(), key=field_sort_key))
        self._sorted_fields = sorted_fields
        self._primary_key = next((f for f in sorted_fields if f.is_primary_key), None)
        self._foreign_keys = tuple(f for f in sorted_fields if f.is_foreign_key())
        self._connections = MappingProxyType(
            {f: f.connection for f in sorted_fields if f.connection is not None}
        )

    @property
    def fields(self) -> Mapping[str, FieldDescriptor]:
        """Read-only mapping of local field name to descriptor."""
        return self._fields

    @property
    def sorted_fields(self) -> tuple[FieldDescriptor, ...]:
        """All fields in canonical order."""
        return self._sorted_fields

    def primary_key(self) -> FieldDescriptor | None:
        return self._primary_key

    def foreign_keys(self) -> tuple[FieldDescriptor, ...]:
        """Belongs-to fields, in canonical order."""
        return self._foreign_keys

    def connections(self) -> Mapping[FieldDescriptor, ModelConnection]:
        """Read-only mapping of connected fields to their connection, in canonical order."""
        return self._connections

    def field(self, name: str) -> FieldDescriptor | None:
        return self.fields.get(name)

    def field_names(self) -> list[str]:
        return [f.name for f in self._sorted_fields]

    def target_names(self) -> list[str]:
        return [f.target_name for f in self._sorted_fields]

    def map_field_names_to_values(self, instance: ModelInstance) -> dict[str, Any]:
        """Map every schema field to its value on *instance*, keyed by target name.

        Raises:
            SchemaMismatch: If the instance is not of this model, or lacks one of
                the schema's fields.
        """
        if instance.model_name != self.name:
            raise SchemaMismatch(
                model_name=self.name,
                detail=(
                    f"the object provided is an instance of '{instance.model_name}'; "
                    f"provide an instance of '{self.name}' which this is a schema for"
                ),
            )

        result: dict[str, Any] = {}
        for field in self._sorted_fields:
            try:
                result[field.target_name] = instance.get_field_value(field.name)
            except (LookupError, AttributeError) as exc:
                raise SchemaMismatch(
                    model_name=self.name,
                    detail=f"field '{field.name}' is not present in the provided '{instance.model_name}' instance",
                    cause=exc,
                ) from exc
        logger.debug("Mapped %d field value(s) for model %s", len(result), self.name)
        return result


def map_field_names_to_values(schema: ModelSchema, instance: ModelInstance) -> dict[str, Any]:
    """Functional form of :meth:`ModelSchema.map_field_names_to_values`."""
    return schema.map_field_names_to_values(instance)
