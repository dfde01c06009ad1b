"""Schema snapshot I/O, diffing and JSON value conversion."""

from modelkit_core.serialization.diff import SchemaDiff, diff_schemas, schema_fingerprint
from modelkit_core.serialization.io import load_schema, save_schema
from modelkit_core.serialization.json_values import to_list, to_map, to_native

__all__ = [
    "SchemaDiff",
    "diff_schemas",
    "load_schema",
    "save_schema",
    "schema_fingerprint",
    "to_list",
    "to_map",
    "to_native",
]
