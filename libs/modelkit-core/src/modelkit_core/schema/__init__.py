"""Model schema types and the canonical field-ordering engine."""

from modelkit_core.schema.builder import ModelSchemaBuilder, build_model_schema
from modelkit_core.schema.field import (
    FieldDescriptor,
    FieldType,
    ModelConnection,
    Relationship,
    RelationshipKind,
)
from modelkit_core.schema.index import ModelIndex
from modelkit_core.schema.model import ModelSchema, compare_fields, field_sort_key, map_field_names_to_values

__all__ = [
    "FieldDescriptor",
    "FieldType",
    "ModelConnection",
    "ModelIndex",
    "ModelSchema",
    "ModelSchemaBuilder",
    "Relationship",
    "RelationshipKind",
    "build_model_schema",
    "compare_fields",
    "field_sort_key",
    "map_field_names_to_values",
]
