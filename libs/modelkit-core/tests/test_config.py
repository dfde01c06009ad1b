"""Tests for SchemaConfig loading."""

import json

import pytest
from modelkit_core.config import SchemaConfig, load_schema_config
from pydantic import ValidationError


def _write_config(root, data) -> None:
    state = root / ".modelkit"
    state.mkdir()
    (state / "config.json").write_text(json.dumps(data))


class TestSchemaConfig:
    def test_defaults(self):
        config = SchemaConfig()
        assert config.strict_index is False
        assert config.narrow_integral_numbers is False

    def test_extra_keys_rejected(self):
        with pytest.raises(ValidationError):
            SchemaConfig(strict=True)


class TestLoadSchemaConfig:
    def test_missing_file_gives_defaults(self, tmp_path):
        assert load_schema_config(tmp_path) == SchemaConfig()

    def test_reads_config_file(self, tmp_path):
        _write_config(tmp_path, {"strict_index": True})
        config = load_schema_config(tmp_path)
        assert config.strict_index is True
        assert config.narrow_integral_numbers is False

    def test_root_from_environment(self, tmp_path, monkeypatch):
        _write_config(tmp_path, {"narrow_integral_numbers": True})
        monkeypatch.setenv("MODELKIT_ROOT", str(tmp_path))
        assert load_schema_config().narrow_integral_numbers is True

    def test_invalid_config_rejected(self, tmp_path):
        _write_config(tmp_path, {"strict_index": "sometimes"})
        with pytest.raises(ValidationError):
            load_schema_config(tmp_path)
