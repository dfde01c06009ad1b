"""Tests for schema snapshots, fingerprints and diffs."""

import json

import pytest
from modelkit_core import ConstructionFailure
from modelkit_core.schema import FieldDescriptor, FieldType, build_model_schema
from modelkit_core.serialization import diff_schemas, load_schema, save_schema, schema_fingerprint


class TestSnapshotIO:
    def test_round_trip_preserves_schema(self, post_schema, tmp_path):
        path = save_schema(post_schema, tmp_path / "post.json")
        loaded = load_schema(path)
        assert loaded == post_schema
        assert loaded.field_names() == post_schema.field_names()
        assert loaded.model_index.index_name == "byTitle"
        assert [f.name for f in loaded.foreign_keys()] == ["ownerId"]
        assert [f.name for f in loaded.connections()] == ["blog", "comments"]

    def test_creates_parent_directories(self, post_schema, tmp_path):
        path = save_schema(post_schema, tmp_path / "nested" / ".modelkit" / "schema.json")
        assert path.is_file()

    def test_snapshot_excludes_derived_order(self, post_schema, tmp_path):
        path = save_schema(post_schema, tmp_path / "post.json")
        data = json.loads(path.read_text())
        assert set(data) == {"name", "target_model_name", "fields", "model_index"}

    def test_load_recomputes_canonical_order(self, post_schema, tmp_path):
        path = save_schema(post_schema, tmp_path / "post.json")
        data = json.loads(path.read_text())
        data["fields"] = dict(sorted(data["fields"].items(), reverse=True))
        path.write_text(json.dumps(data))
        assert load_schema(path).field_names() == post_schema.field_names()

    def test_invalid_snapshot(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"name": "Post", "fields": {"id": {"name": "id"}}}))
        with pytest.raises(ConstructionFailure) as exc_info:
            load_schema(path)
        assert exc_info.value.model_name == "Post"

    def test_malformed_json(self, tmp_path):
        path = tmp_path / "post.json"
        path.write_text("{not json")
        with pytest.raises(ConstructionFailure) as exc_info:
            load_schema(path)
        assert exc_info.value.model_name == "post"

    def test_non_utf8_snapshot(self, tmp_path):
        path = tmp_path / "post.json"
        path.write_bytes(b'{"name": "\xff\xfe"}')
        with pytest.raises(ConstructionFailure) as exc_info:
            load_schema(path)
        assert isinstance(exc_info.value.__cause__, UnicodeDecodeError)

    def test_snapshot_keys_fields_by_public_name(self, post_schema, tmp_path):
        data = json.loads(save_schema(post_schema, tmp_path / "post.json").read_text())
        assert "field_map" not in data
        assert set(data["fields"]) == set(post_schema.fields)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_schema(tmp_path / "missing.json")


class TestFingerprint:
    def test_independent_of_input_order(self, post_field_map):
        reversed_map = dict(reversed(list(post_field_map.items())))
        a = build_model_schema("Post", post_field_map)
        b = build_model_schema("Post", reversed_map)
        assert schema_fingerprint(a) == schema_fingerprint(b)

    def test_changes_with_fields(self, post_schema, post_field_map):
        post_field_map["summary"] = FieldDescriptor(name="summary", declared_type=FieldType.STRING)
        other = build_model_schema("Post", post_field_map, index=("byTitle", ["title"]))
        assert schema_fingerprint(post_schema) != schema_fingerprint(other)


class TestDiffSchemas:
    def test_identical(self, post_schema):
        assert diff_schemas(post_schema, post_schema).has_changes is False

    def test_added_removed_changed(self, post_field_map):
        old = build_model_schema("Post", post_field_map)
        new_fields = dict(post_field_map)
        del new_fields["rating"]
        new_fields["summary"] = FieldDescriptor(name="summary", declared_type=FieldType.STRING)
        new_fields["title"] = FieldDescriptor(name="title", target_name="Headline", declared_type=FieldType.STRING)
        new = build_model_schema("Post", new_fields)

        result = diff_schemas(old, new)
        assert result.added == ["summary"]
        assert result.removed == ["rating"]
        assert result.changed == ["title"]
        assert result.order_changed is False
        assert result.has_changes is True

    def test_order_change_detected(self):
        old = build_model_schema(
            "Post",
            {
                "a": FieldDescriptor(name="a", declared_type=FieldType.STRING),
                "b": FieldDescriptor(name="b", declared_type=FieldType.STRING),
            },
        )
        new = build_model_schema(
            "Post",
            {
                "a": FieldDescriptor(name="a", declared_type=FieldType.STRING),
                "b": FieldDescriptor(name="b", declared_type=FieldType.STRING, is_primary_key=True),
            },
        )
        result = diff_schemas(old, new)
        assert result.order_changed is False
        assert result.changed == ["b"]

        new_connected = build_model_schema(
            "Post",
            {
                "a": FieldDescriptor(name="a", declared_type=FieldType.STRING),
                "b": FieldDescriptor(
                    name="b",
                    declared_type=FieldType.COLLECTION,
                    connection={"relationship": "has_many", "connection_target": "Other"},
                ),
            },
        )
        assert diff_schemas(old, new_connected).order_changed is True

    def test_index_change(self, post_field_map):
        old = build_model_schema("Post", post_field_map, index=("byTitle", ["title"]))
        new = build_model_schema("Post", post_field_map, index=("byOwner", ["ownerId"]))
        result = diff_schemas(old, new)
        assert result.index_changed is True
        assert result.has_changes is True
