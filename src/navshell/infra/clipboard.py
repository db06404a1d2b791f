from __future__ import annotations

"""
System Clipboard Bridge.

Reads and writes the system clipboard through a hidden CustomTkinter root
window. The window is created on first use and kept alive for the rest of
the process so clipboard ownership survives after a write.
"""

import logging
from typing import Any, Optional

from navshell.domain.errors import ClipboardUnavailable

logger = logging.getLogger(__name__)

_ROOT: Optional[Any] = None

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def clipboard_get() -> str:
    """
    Return the clipboard contents as a string.

    Raises:
        ClipboardUnavailable: If no display is available or the clipboard
            does not hold text.
    """
    try:
        return str(_get_root().clipboard_get())
    except Exception as e:
        raise ClipboardUnavailable(f"Clipboard read failed: {e}") from e


def clipboard_set(text: str) -> None:
    """
    Replace the clipboard contents with text. Failures are logged, not raised.

    Args:
        text: Content to place on the clipboard.
    """
    try:
        root = _get_root()
        root.clipboard_clear()
        root.clipboard_append(text)
        root.update()
        logger.debug(f"Clipboard updated ({len(text)} chars)")
    except Exception as e:
        logger.error(f"Clipboard write failed: {e}")

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _get_root() -> Any:
    """Lazily create the hidden root window that owns the clipboard."""
    global _ROOT
    if _ROOT is None:
        import customtkinter as ctk

        root = ctk.CTk()
        root.withdraw()
        _ROOT = root
    return _ROOT
