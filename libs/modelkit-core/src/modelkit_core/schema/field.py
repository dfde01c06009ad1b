"""Field descriptor definitions for model schemas."""

from __future__ import annotations

import re
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, field_validator, model_validator

# Valid identifier: starts with a letter or underscore, alphanumeric + underscores, max 64 chars.
_IDENTIFIER_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_]{0,63}$")


class FieldType(str, Enum):
    """Semantic type tag of a model attribute."""

    ID = "id"
    STRING = "string"
    INT = "int"
    FLOAT = "float"
    BOOLEAN = "boolean"
    DATETIME = "datetime"
    DATE = "date"
    JSON = "json"
    ENUM = "enum"
    MODEL = "model"  # Reference to another model
    COLLECTION = "collection"


class RelationshipKind(str, Enum):
    """Kind of link between two models."""

    BELONGS_TO = "belongs_to"  # Direct foreign-key column on this model
    HAS_ONE = "has_one"
    HAS_MANY = "has_many"


class Relationship(BaseModel):
    """Reference from a field to another model's schema."""

    target_model: str = Field(min_length=1, description="Name of the referenced model schema.")
    kind: RelationshipKind = Field(default=RelationshipKind.BELONGS_TO, description="Relationship kind.")
    limit: int | None = Field(default=None, gt=0, description="Maximum number of related items.")
    sort_field: str | None = Field(default=None, description="Field used to order related items.")

    model_config = {"extra": "forbid", "frozen": True}


class ModelConnection(BaseModel):
    """A named connection resolved through another field rather than a column on this model."""

    name: str | None = Field(default=None, description="Connection name shared by both ends.")
    key_field: str | None = Field(default=None, description="Field on the target holding the key.")
    sort_field: str | None = Field(default=None, description="Field used to sort connected items.")
    key_name: str | None = Field(default=None, description="Name of the secondary index backing the key.")
    limit: int | None = Field(default=None, gt=0, description="Maximum number of connected items.")
    fields: tuple[str, ...] = Field(default=(), description="Participating field names.")
    relationship: RelationshipKind = Field(description="Relationship kind of the connection.")
    connection_target: str = Field(min_length=1, description="Name of the connected model.")

    model_config = {"extra": "forbid", "frozen": True}


class FieldDescriptor(BaseModel):
    """Normalized metadata for one model attribute."""

    name: str = Field(min_length=1, description="Local field identifier.")
    target_name: str = Field(default="", description="External (serialized) name. Defaults to name.")
    declared_type: FieldType = Field(description="Semantic type of the field.")
    target_type: str | None = Field(default=None, description="Type name in the target, e.g. 'AWSDateTime'.")
    is_required: bool = Field(default=False, description="Whether a value must be present.")
    is_array: bool = Field(default=False, description="Whether the field holds a collection of values.")
    is_enum: bool = Field(default=False, description="Whether the field holds an enum value.")
    is_primary_key: bool = Field(default=False, description="Whether this field is the primary key.")
    relationship: Relationship | None = Field(default=None, description="Direct reference to another model.")
    connection: ModelConnection | None = Field(default=None, description="Derived connection descriptor.")

    model_config = {"extra": "forbid", "frozen": True}

    @model_validator(mode="before")
    @classmethod
    def fill_defaults(cls, data: Any) -> Any:
        """Default target_name to name and flag enum-typed fields as enums."""
        if not isinstance(data, dict):
            return data
        data = dict(data)
        if not data.get("target_name") and data.get("name"):
            data["target_name"] = data["name"]
        if data.get("declared_type") in (FieldType.ENUM, FieldType.ENUM.value):
            data["is_enum"] = True
        return data

    @field_validator("name")
    @classmethod
    def validate_field_name(cls, v: str) -> str:
        """Enforce safe identifier pattern on local field names."""
        if not _IDENTIFIER_RE.match(v):
            raise ValueError(
                f"Field name {v!r} is not a valid identifier. "
                "Must start with a letter or underscore, contain only alphanumeric characters "
                "and underscores, and be at most 64 characters."
            )
        return v

    @model_validator(mode="after")
    def validate_relationship_shape(self) -> FieldDescriptor:
        """Reject fields that are both a foreign key and a connection."""
        if self.is_foreign_key() and self.is_connected():
            raise ValueError(
                f"Field '{self.name}' cannot be both a belongs-to foreign key "
                f"(-> {self.relationship.target_model}) and a connection "  # type: ignore[union-attr]
                f"(-> {self.connection.connection_target})"  # type: ignore[union-attr]
            )
        return self

    def is_foreign_key(self) -> bool:
        """True if the field is a direct belongs-to foreign-key column."""
        return self.relationship is not None and self.relationship.kind == RelationshipKind.BELONGS_TO

    def is_connected(self) -> bool:
        """True if the field is a derived relationship resolved through another model."""
        return self.connection is not None
