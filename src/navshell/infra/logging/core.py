from __future__ import annotations

"""
Logging Core.

One-shot setup of the root logger. Records are pushed through a
QueueHandler and written by a QueueListener thread, so file I/O never
blocks the interactive session. Handlers installed here are tagged and
the rest of the root logger (e.g. pytest's capture) is left alone.
"""

import atexit
import logging
import os
import queue
import sys
from logging.handlers import QueueHandler, QueueListener, RotatingFileHandler
from typing import List, Optional

from navshell.infra import fs
from navshell.infra.logging.config import LoggingConfig

_CONFIGURED_FLAG_ATTR: str = "_navshell_configured"
_QUEUE_LISTENER_ATTR: str = "_navshell_queue_listener"
_HANDLER_TAG_ATTR: str = "_navshell_handler"

CONSOLE_FORMAT = "navshell: %(levelname)s | %(message)s"
FILE_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# ==============================================================================
# PUBLIC API
# ==============================================================================

def get_default_log_path(file_name: str = "navshell.log") -> str:
    """Log file path inside the user data directory."""
    return os.path.join(fs.get_user_data_dir(), "logs", file_name)


def configure_logging(cfg: LoggingConfig) -> logging.Logger:
    """
    Configure the root logger once per process; later calls are no-ops.

    Args:
        cfg: Logging settings.

    Returns:
        logging.Logger: The root logger.
    """
    root = logging.getLogger()
    if getattr(root, _CONFIGURED_FLAG_ATTR, False):
        return root

    level = cfg.level_number
    root.setLevel(level)

    handlers: List[logging.Handler] = []
    if cfg.console:
        sh = logging.StreamHandler(sys.stderr)
        sh.setFormatter(logging.Formatter(CONSOLE_FORMAT))
        handlers.append(sh)
    if cfg.log_file:
        fh = _open_log_file(cfg)
        if fh:
            handlers.append(fh)

    setattr(root, _CONFIGURED_FLAG_ATTR, True)
    if not handlers:
        return root

    for h in handlers:
        h.setLevel(level)

    log_queue: queue.Queue[logging.LogRecord] = queue.Queue(-1)
    queue_handler = QueueHandler(log_queue)
    setattr(queue_handler, _HANDLER_TAG_ATTR, True)

    listener = QueueListener(log_queue, *handlers, respect_handler_level=True)
    listener.start()
    atexit.register(_stop_listener, listener)

    root.addHandler(queue_handler)
    setattr(root, _QUEUE_LISTENER_ATTR, listener)
    return root


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def get_recent_logs(n_lines: int = 50, log_path: Optional[str] = None) -> str:
    """
    Return the last n_lines lines of the persistent log file.

    Returns:
        str: The log tail, or a short notice if the file is missing.
    """
    path = log_path or get_default_log_path()
    if not os.path.exists(path):
        return "Log file not found."

    lines = fs.read_text(path).splitlines(keepends=True)
    return "".join(lines[-n_lines:]) if n_lines > 0 else ""

# ==============================================================================
# PRIVATE HELPERS
# ==============================================================================

def _stop_listener(listener: QueueListener) -> None:
    # stop() fails on a listener that was already stopped
    if getattr(listener, "_thread", None) is not None:
        listener.stop()


def _open_log_file(cfg: LoggingConfig) -> Optional[RotatingFileHandler]:
    """Rotating handler for cfg.log_file, or None (with a stderr note) on failure."""
    try:
        os.makedirs(os.path.dirname(os.path.abspath(cfg.log_file)), exist_ok=True)
        fh = RotatingFileHandler(
            cfg.log_file,
            maxBytes=cfg.max_bytes,
            backupCount=cfg.backup_count,
            encoding="utf-8",
        )
    except OSError as e:
        sys.stderr.write(f"WARNING: cannot open log file '{cfg.log_file}': {e}\n")
        return None

    fh.setFormatter(logging.Formatter(FILE_FORMAT, datefmt=DATE_FORMAT))
    return fh
