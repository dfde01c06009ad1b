"""Schema fingerprints and version-to-version comparison.

Both operate on the canonical field order, so two schemas built from the same
field set always share a fingerprint regardless of input ordering.
"""

from __future__ import annotations

import hashlib
import json
from dataclasses import dataclass, field

from modelkit_core.schema.model import ModelSchema


@dataclass(frozen=True)
class SchemaDiff:
    """Result of comparing two versions of a model schema."""

    added: list[str] = field(default_factory=list)
    removed: list[str] = field(default_factory=list)
    changed: list[str] = field(default_factory=list)
    order_changed: bool = False
    index_changed: bool = False

    @property
    def has_changes(self) -> bool:
        return bool(self.added or self.removed or self.changed) or self.order_changed or self.index_changed


def _canonical_payload(schema: ModelSchema) -> dict:
    return {
        "name": schema.name,
        "target_model_name": schema.target_model_name,
        "fields": [f.model_dump(mode="json") for f in schema.sorted_fields],
        "model_index": schema.model_index.model_dump(mode="json"),
    }


def schema_fingerprint(schema: ModelSchema) -> str:
    """Stable SHA-256 of the schema in canonical field order."""
    raw = json.dumps(_canonical_payload(schema), sort_keys=True, default=str)
    return hashlib.sha256(raw.encode()).hexdigest()


def diff_schemas(old: ModelSchema, new: ModelSchema) -> SchemaDiff:
    """Compare two schema versions field by field.

    ``order_changed`` is set when the fields common to both versions appear in
    a different relative canonical order.
    """
    old_names = old.field_names()
    new_names = new.field_names()
    added = [n for n in new_names if n not in old.fields]
    removed = [n for n in old_names if n not in new.fields]
    changed = [n for n in new_names if n in old.fields and old.fields[n] != new.fields[n]]

    common_old = [n for n in old_names if n in new.fields]
    common_new = [n for n in new_names if n in old.fields]

    return SchemaDiff(
        added=added,
        removed=removed,
        changed=changed,
        order_changed=common_old != common_new,
        index_changed=old.model_index != new.model_index,
    )
