"""Read and write ModelSchema snapshots to/from JSON files."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from modelkit_core.config import MODELKIT_DIR
from modelkit_core.exceptions import ConstructionFailure
from modelkit_core.schema.model import ModelSchema

logger = logging.getLogger(__name__)

DEFAULT_SCHEMA_PATH = Path(MODELKIT_DIR) / "schema.json"


def save_schema(schema: ModelSchema, path: str | Path = DEFAULT_SCHEMA_PATH) -> Path:
    """Serialize a ModelSchema to a JSON file.

    Args:
        schema: The schema to persist.
        path: Destination file path. Parent directories are created automatically.

    Returns:
        The path that was written.
    """
    dest = Path(path)
    dest.parent.mkdir(parents=True, exist_ok=True)
    dest.write_text(schema.model_dump_json(indent=2, by_alias=True) + "\n", encoding="utf-8")
    logger.debug("Saved schema %s to %s", schema.name, dest)
    return dest


def load_schema(path: str | Path = DEFAULT_SCHEMA_PATH) -> ModelSchema:
    """Deserialize a ModelSchema from a JSON file.

    The canonical field order is recomputed on load.

    Raises:
        FileNotFoundError: If the file does not exist.
        ConstructionFailure: If the JSON does not describe a valid schema.
    """
    src = Path(path)
    try:
        data = json.loads(src.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise ConstructionFailure(
            model_name=src.stem,
            detail=f"snapshot {src} is not valid UTF-8 JSON",
            cause=exc,
        ) from exc
    try:
        return ModelSchema.model_validate(data)
    except ValidationError as exc:
        name = data.get("name", src.stem) if isinstance(data, dict) else src.stem
        raise ConstructionFailure(
            model_name=str(name),
            detail=f"invalid schema snapshot {src}",
            cause=exc,
        ) from exc
