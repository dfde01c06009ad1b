"""Shared test fixtures for modelkit-core."""

from __future__ import annotations

import pytest
from modelkit_core.schema import (
    FieldDescriptor,
    FieldType,
    ModelConnection,
    ModelSchema,
    Relationship,
    RelationshipKind,
    build_model_schema,
)


def post_fields() -> dict[str, FieldDescriptor]:
    """Fields of a blog Post: a primary key, a foreign key, two connections and plain columns."""
    fields = [
        FieldDescriptor(name="id", declared_type=FieldType.ID, is_required=True, is_primary_key=True),
        FieldDescriptor(name="title", target_name="Title", declared_type=FieldType.STRING, is_required=True),
        FieldDescriptor(
            name="ownerId",
            target_name="owner_id",
            declared_type=FieldType.ID,
            relationship=Relationship(target_model="User"),
        ),
        FieldDescriptor(name="rating", declared_type=FieldType.INT),
        FieldDescriptor(
            name="comments",
            declared_type=FieldType.COLLECTION,
            is_array=True,
            connection=ModelConnection(
                name="PostComments",
                key_name="byPost",
                fields=("postId",),
                relationship=RelationshipKind.HAS_MANY,
                connection_target="Comment",
            ),
        ),
        FieldDescriptor(
            name="blog",
            declared_type=FieldType.MODEL,
            connection=ModelConnection(
                key_field="blogId",
                relationship=RelationshipKind.BELONGS_TO,
                connection_target="Blog",
            ),
        ),
    ]
    return {f.name: f for f in fields}


@pytest.fixture
def post_schema() -> ModelSchema:
    return build_model_schema("Post", post_fields(), index=("byTitle", ["title"]))


@pytest.fixture
def simple_post_schema() -> ModelSchema:
    """The three-field Post used for value extraction."""
    return build_model_schema(
        "Post",
        {
            "id": FieldDescriptor(name="id", declared_type=FieldType.ID, is_primary_key=True),
            "title": FieldDescriptor(name="title", target_name="Title", declared_type=FieldType.STRING),
            "ownerId": FieldDescriptor(
                name="ownerId",
                target_name="owner_id",
                declared_type=FieldType.ID,
                relationship=Relationship(target_model="User"),
            ),
        },
    )


@pytest.fixture
def post_field_map() -> dict[str, FieldDescriptor]:
    return post_fields()
