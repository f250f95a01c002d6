"""Treemap rendering helpers.

Import :func:`setup_matplotlib_backend` before :mod:`treeweave.viz.panels`
when a specific backend is needed; the panels module imports pyplot.
"""

from .backend import detect_backend, setup_matplotlib_backend
from .style import TreeMapStyle, get_style_from_cfg

__all__ = ["detect_backend", "setup_matplotlib_backend", "TreeMapStyle", "get_style_from_cfg"]
