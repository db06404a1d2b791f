from __future__ import annotations

"""
Domain Constants.

Process-wide values read once at import time (home directory) and the
defaults shared by the configuration layer, the renderer and the CLI.
"""

import os

# -----------------------------------------------------------------------------
# PROCESS-WIDE VALUES
# -----------------------------------------------------------------------------

# Read once at startup and treated as constant for the life of the process
HOME_DIR: str = os.path.expanduser("~")

HOME_MARKER = "~"

# -----------------------------------------------------------------------------
# DEFAULTS
# -----------------------------------------------------------------------------

CURRENT_CONFIG_VERSION = "1.0.0"
DEFAULT_INDENT_UNIT = "  "
DEFAULT_HEAD_LINES = 10
DEFAULT_LOG_LEVEL = "INFO"
