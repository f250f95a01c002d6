from __future__ import annotations

import importlib
import logging
import os
import sys
from typing import Optional

logger = logging.getLogger(__name__)


def _has_display() -> bool:
    """Best-effort check for a GUI display."""
    if sys.platform.startswith("linux"):
        if not os.environ.get("DISPLAY") and not os.environ.get("WAYLAND_DISPLAY"):
            return False
    return True


def detect_backend(prefer: str = "Agg") -> str:
    """Decide which matplotlib backend to use.

    ``MPLBACKEND`` wins; interactive backends are only picked with a display.
    """
    env = os.environ.get("MPLBACKEND")
    if env:
        return env
    if prefer.lower() in ("agg", "pdf", "svg", "ps", "cairo"):
        return prefer
    if _has_display():
        return prefer
    return "Agg"


def setup_matplotlib_backend(
    prefer: str = "Agg", fallback: str = "Agg", force: Optional[str] = None
) -> str:
    """Set the matplotlib backend before pyplot is imported.

    Once pyplot is loaded the current backend is kept.  Returns the backend
    in use.
    """
    if "matplotlib.pyplot" in sys.modules:
        import matplotlib
        return matplotlib.get_backend()

    backend = force or detect_backend(prefer=prefer)

    import matplotlib
    try:
        matplotlib.use(backend, force=True)
    except (ImportError, ValueError) as e:
        logger.warning("backend %s unavailable (%s); using %s", backend, e, fallback)
        matplotlib.use(fallback, force=True)

    importlib.import_module("matplotlib.pyplot")
    return matplotlib.get_backend()


__all__ = ["detect_backend", "setup_matplotlib_backend"]
