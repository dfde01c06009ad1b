"""Read and validate .modelkit/config.json build options."""

from __future__ import annotations

import json
import os
from pathlib import Path

from pydantic import BaseModel, Field

MODELKIT_DIR = ".modelkit"
CONFIG_FILE = "config.json"


class SchemaConfig(BaseModel):
    """Options applied when building schemas and converting JSON values."""

    strict_index: bool = Field(
        default=False,
        description="Reject index declarations that name fields missing from the model.",
    )
    narrow_integral_numbers: bool = Field(
        default=False,
        description="Convert JSON floats without a fractional part to int.",
    )

    model_config = {"extra": "forbid", "frozen": True}


def load_schema_config(project_root: str | Path | None = None) -> SchemaConfig:
    """Load config.json from the .modelkit directory.

    The project root defaults to ``$MODELKIT_ROOT`` or the current directory.
    Falls back to defaults when the file doesn't exist.
    """
    if project_root is None:
        project_root = Path(os.getenv("MODELKIT_ROOT", "."))
    else:
        project_root = Path(project_root)

    config_path = project_root / MODELKIT_DIR / CONFIG_FILE

    if not config_path.exists():
        return SchemaConfig()

    data = json.loads(config_path.read_text(encoding="utf-8"))
    return SchemaConfig.model_validate(data)
