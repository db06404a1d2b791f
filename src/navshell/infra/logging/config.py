from __future__ import annotations

"""
Logging Configuration Model.

Settings consumed by configure_logging, derived from the navshell
configuration dictionary.
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

LEVELS: Dict[str, int] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


@dataclass(frozen=True)
class LoggingConfig:
    """
    Settings for the logging subsystem.

    Attributes:
        level: Minimum severity name to capture.
        console: Emit records to stderr.
        log_file: Optional path of a rotating log file.
        max_bytes: Size threshold that triggers rotation.
        backup_count: Number of rotated files to keep.
    """
    level: str = "INFO"
    console: bool = True
    log_file: Optional[str] = None

    max_bytes: int = 1024 * 1024
    backup_count: int = 2

    @classmethod
    def from_settings(cls, settings: Dict[str, Any], log_path: Callable[[], str]) -> "LoggingConfig":
        """
        Build from a validated configuration ('log_level', 'log_to_file').

        log_path is only called when file logging is enabled, so the user
        data directory is not created otherwise.
        """
        return cls(
            level=settings["log_level"],
            log_file=log_path() if settings["log_to_file"] else None,
        )

    @property
    def level_number(self) -> int:
        """Numeric level; unknown names fall back to INFO."""
        return LEVELS.get(str(self.level or "").strip().upper(), logging.INFO)
