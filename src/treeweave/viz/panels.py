"""Matplotlib drawing of treemap nodes.

Nodes are drawn in the order given, so a pre-order list paints parents below
their children.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Sequence

import matplotlib.pyplot as plt
from matplotlib.patches import Rectangle

from ..node import NodeAttributes
from ..types import Rect
from .style import TreeMapStyle


def _frame_of(nodes: Sequence[NodeAttributes]) -> Rect:
    frame: Optional[Rect] = None
    for n in nodes:
        frame = n.bounds if frame is None else frame.union(n.bounds)
    return frame if frame is not None else Rect(0.0, 0.0, 1.0, 1.0)


def draw_treemap(
    ax: plt.Axes,
    nodes: Sequence[NodeAttributes],
    *,
    style: TreeMapStyle,
    frame: Optional[Rect] = None,
) -> List[Rectangle]:
    """Render ``nodes`` on ``ax`` and return the rectangle patches.

    Coloured nodes are filled with their colour, dummies with
    ``style.dummy_fill``; nodes without a colour are drawn as outlines only.
    Leaf labels are centred on the leaf footprint.
    """
    ax.clear()
    frame = frame if frame is not None else _frame_of(nodes)
    ax.set_aspect("equal")
    ax.set_xlim(frame.x, frame.x + frame.width)
    if style.invert_y:
        ax.set_ylim(frame.y + frame.height, frame.y)
    else:
        ax.set_ylim(frame.y, frame.y + frame.height)
    ax.set_facecolor(style.background)
    ax.set_xticks([])
    ax.set_yticks([])

    patches: List[Rectangle] = []
    for n in nodes:
        b = n.bounds
        if n.is_dummy:
            face = style.dummy_fill
        elif n.hex_colour is not None:
            face = n.hex_colour
        else:
            face = "none"
        patch = Rectangle(
            (b.x, b.y),
            b.width,
            b.height,
            facecolor=face,
            edgecolor=style.border_color,
            linewidth=style.border_width,
            zorder=1 + n.level,
        )
        ax.add_patch(patch)
        patches.append(patch)

        if style.show_labels and n.is_leaf and not n.is_dummy and n.label:
            c = b.centre
            ax.text(
                c.x,
                c.y,
                n.label,
                ha="center",
                va="center",
                fontsize=style.label_fontsize,
                clip_on=True,
                zorder=100,
            )
    return patches


def render_to_file(
    nodes: Sequence[NodeAttributes],
    path: str | Path,
    *,
    style: TreeMapStyle,
    frame: Optional[Rect] = None,
) -> Path:
    """Draw ``nodes`` into a new figure and save it to ``path``."""
    frame = frame if frame is not None else _frame_of(nodes)
    aspect = frame.height / frame.width if frame.width > 0 else 1.0
    fig, ax = plt.subplots(figsize=(8.0, max(8.0 * aspect, 1.0)), dpi=style.dpi)
    try:
        draw_treemap(ax, nodes, style=style, frame=frame)
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        fig.savefig(path, facecolor=style.background, bbox_inches="tight")
    finally:
        plt.close(fig)
    return path
