from __future__ import annotations

"""
Configuration Management.

Persists user preferences (tree layout, head/tail length, logging) as JSON
in the user data directory. Missing or corrupted files fall back to the
defaults; unknown keys are dropped on load.
"""

import json
import logging
import os
from typing import Any, Dict, List, Optional, Tuple

from navshell.domain.constants import (
    CURRENT_CONFIG_VERSION,
    DEFAULT_HEAD_LINES,
    DEFAULT_INDENT_UNIT,
    DEFAULT_LOG_LEVEL,
)
from navshell.infra.fs import get_user_data_dir

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = "config.json"
_VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

# -----------------------------------------------------------------------------
# Defaults
# -----------------------------------------------------------------------------

def get_default_config() -> Dict[str, Any]:
    """
    Build the default configuration.

    Returns:
        Dict[str, Any]: Fresh dictionary of default values.
    """
    return {
        "version": CURRENT_CONFIG_VERSION,
        "indent_unit": DEFAULT_INDENT_UNIT,
        "ascii_tree": False,
        "head_lines": DEFAULT_HEAD_LINES,
        "log_level": DEFAULT_LOG_LEVEL,
        "log_to_file": False,
    }


def get_config_path() -> str:
    return os.path.join(get_user_data_dir(), CONFIG_FILE_NAME)

# -----------------------------------------------------------------------------
# Persistence
# -----------------------------------------------------------------------------

def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load the configuration from disk, merged over the defaults.

    Args:
        path: Config file location; defaults to get_config_path().

    Returns:
        Dict[str, Any]: Configuration with every default key present.
    """
    config_path = path or get_config_path()
    config = get_default_config()

    if not os.path.exists(config_path):
        logger.debug("Config file not found. Using defaults.")
        return config

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        logger.error(f"Failed to load config: {e}. Using defaults.")
        return config

    if not isinstance(data, dict):
        logger.warning("Corrupted config file. Using defaults.")
        return config

    for key in config:
        if key in data and key != "version":
            config[key] = data[key]
    return config


def save_config(config: Dict[str, Any], path: Optional[str] = None) -> None:
    """
    Persist the configuration. Failures are logged, not raised.

    Args:
        config: Values to save; the version stamp is refreshed.
        path: Config file location; defaults to get_config_path().
    """
    config_path = path or get_config_path()
    payload = dict(config)
    payload["version"] = CURRENT_CONFIG_VERSION
    try:
        os.makedirs(os.path.dirname(os.path.abspath(config_path)), exist_ok=True)
        with open(config_path, "w", encoding="utf-8") as f:
            json.dump(payload, f, ensure_ascii=False, indent=4)
        logger.debug(f"Configuration saved to {config_path}")
    except OSError as e:
        logger.error(f"Failed to save configuration: {e}")

# -----------------------------------------------------------------------------
# Validation
# -----------------------------------------------------------------------------

def validate_config(raw: Dict[str, Any]) -> Tuple[Dict[str, Any], List[str]]:
    """
    Coerce raw values into a clean configuration.

    Invalid entries are replaced by their defaults and reported.

    Args:
        raw: Possibly user-edited configuration dictionary.

    Returns:
        Tuple[Dict[str, Any], List[str]]: (clean config, warnings).
    """
    defaults = get_default_config()
    clean = dict(defaults)
    warnings: List[str] = []

    indent = raw.get("indent_unit", defaults["indent_unit"])
    if isinstance(indent, str):
        clean["indent_unit"] = indent
    else:
        warnings.append(f"indent_unit must be a string, got {indent!r}")

    clean["ascii_tree"] = bool(raw.get("ascii_tree", defaults["ascii_tree"]))
    clean["log_to_file"] = bool(raw.get("log_to_file", defaults["log_to_file"]))

    head_lines = raw.get("head_lines", defaults["head_lines"])
    try:
        n = int(head_lines)
        if n < 0:
            raise ValueError(n)
        clean["head_lines"] = n
    except (TypeError, ValueError):
        warnings.append(f"head_lines must be a non-negative integer, got {head_lines!r}")

    level = str(raw.get("log_level", defaults["log_level"])).strip().upper()
    if level in _VALID_LOG_LEVELS:
        clean["log_level"] = level
    else:
        warnings.append(f"Unknown log_level {level!r}")

    return clean, warnings
