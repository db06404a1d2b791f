from __future__ import annotations

"""
Unit tests for Configuration Management.

Verifies default generation, persistence round trips through a temporary
file, recovery from corrupted files and validation of raw values.
"""

import json
from pathlib import Path

from navshell.domain.config import (
    get_default_config,
    load_config,
    save_config,
    validate_config,
)
from navshell.domain.constants import CURRENT_CONFIG_VERSION


def test_default_config_keys():
    cfg = get_default_config()
    assert cfg["indent_unit"] == "  "
    assert cfg["head_lines"] == 10
    assert cfg["ascii_tree"] is False
    assert cfg["version"] == CURRENT_CONFIG_VERSION


def test_load_missing_file_returns_defaults(tmp_path: Path):
    assert load_config(str(tmp_path / "absent.json")) == get_default_config()


def test_save_then_load_preserves_values(tmp_path: Path):
    path = str(tmp_path / "cfg" / "config.json")
    cfg = get_default_config()
    cfg["indent_unit"] = "\t"
    cfg["head_lines"] = 3

    save_config(cfg, path)
    loaded = load_config(path)

    assert loaded["indent_unit"] == "\t"
    assert loaded["head_lines"] == 3


def test_load_drops_unknown_keys_and_keeps_defaults(tmp_path: Path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"ascii_tree": True, "legacy": 1, "version": "0.0.1"}), encoding="utf-8")

    loaded = load_config(str(path))

    assert loaded["ascii_tree"] is True
    assert "legacy" not in loaded
    assert loaded["version"] == CURRENT_CONFIG_VERSION
    assert loaded["head_lines"] == 10


def test_load_corrupted_file_falls_back(tmp_path: Path):
    path = tmp_path / "config.json"
    path.write_text("{not json", encoding="utf-8")
    assert load_config(str(path)) == get_default_config()

    path.write_text("[1, 2, 3]", encoding="utf-8")
    assert load_config(str(path)) == get_default_config()


def test_validate_config_coerces_and_reports():
    clean, warnings = validate_config({
        "indent_unit": 4,
        "head_lines": "7",
        "log_level": "debug",
        "ascii_tree": 1,
    })

    assert clean["indent_unit"] == "  "
    assert clean["head_lines"] == 7
    assert clean["log_level"] == "DEBUG"
    assert clean["ascii_tree"] is True
    assert len(warnings) == 1


def test_validate_config_rejects_bad_values():
    clean, warnings = validate_config({"head_lines": -2, "log_level": "LOUD"})
    assert clean["head_lines"] == 10
    assert clean["log_level"] == "INFO"
    assert len(warnings) == 2
