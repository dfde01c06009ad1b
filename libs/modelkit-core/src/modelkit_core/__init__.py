"""Modelkit Core — canonical model schemas for query generation and storage."""

from modelkit_core.config import SchemaConfig, load_schema_config
from modelkit_core.exceptions import ConstructionFailure, ModelSchemaError, SchemaMismatch
from modelkit_core.protocols import ModelInstance, ModelRecord
from modelkit_core.schema import (
    FieldDescriptor,
    FieldType,
    ModelConnection,
    ModelIndex,
    ModelSchema,
    ModelSchemaBuilder,
    Relationship,
    RelationshipKind,
    build_model_schema,
    compare_fields,
    field_sort_key,
    map_field_names_to_values,
)
from modelkit_core.serialization import load_schema, save_schema

__all__ = [
    "ConstructionFailure",
    "FieldDescriptor",
    "FieldType",
    "ModelConnection",
    "ModelIndex",
    "ModelInstance",
    "ModelRecord",
    "ModelSchema",
    "ModelSchemaBuilder",
    "ModelSchemaError",
    "Relationship",
    "RelationshipKind",
    "SchemaConfig",
    "SchemaMismatch",
    "build_model_schema",
    "compare_fields",
    "field_sort_key",
    "load_schema",
    "load_schema_config",
    "map_field_names_to_values",
    "save_schema",
]
