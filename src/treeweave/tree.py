"""Pre-order construction of :class:`NodeAttributes` for a laid-out tree."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .context import RenderContext
from .node import NodeAttributes
from .types import Point, RGB, Rect

logger = logging.getLogger(__name__)

__all__ = ["TreeNode", "build_node_attributes"]


@dataclass
class TreeNode:
    """Input node whose footprint has already been computed by a layout."""

    label: str
    footprint: Rect
    geo_centre: Optional[Point] = None
    colour: Optional[RGB] = None
    is_dummy: bool = False
    children: List["TreeNode"] = field(default_factory=list)

    @property
    def is_leaf(self) -> bool:
        return not self.children

    @property
    def centre(self) -> Point:
        return self.geo_centre if self.geo_centre is not None else self.footprint.centre


def _count_at_level(root: TreeNode, level: int) -> int:
    n = 0
    stack: List[Tuple[TreeNode, int]] = [(root, 0)]
    while stack:
        node, lvl = stack.pop()
        if lvl == level:
            n += 1
            continue
        stack.extend((c, lvl + 1) for c in node.children)
    return n


def build_node_attributes(
    root: TreeNode,
    context: RenderContext,
    *,
    colour_level: int = 1,
    hue_offset: float = 0.0,
) -> List[NodeAttributes]:
    """Return one :class:`NodeAttributes` per node, in pre-order.

    Nodes at ``colour_level`` each start a colour family with an evenly spaced
    hue; their descendants drift from the parent colour.  Shallower nodes are
    left uncoloured unless they carry an explicit colour.
    """
    if colour_level < 0:
        raise ValueError(f"colour_level must be >= 0, got {colour_level}")

    n_families = _count_at_level(root, colour_level)
    family = 0
    out: List[NodeAttributes] = []

    # (node, level, resolved parent colour)
    stack: List[Tuple[TreeNode, int, Optional[RGB]]] = [(root, 0, None)]
    while stack:
        node, level, parent_colour = stack.pop()

        hue: Optional[float] = None
        if level == colour_level:
            hue = hue_offset + family / n_families
            family += 1
            parent_colour = None
        elif level < colour_level:
            parent_colour = None

        attrs = NodeAttributes.create(
            node.label,
            node.footprint,
            node.centre,
            node.is_leaf,
            node.is_dummy,
            hue,
            context,
            colour=node.colour,
            parent_colour=parent_colour,
            level=level,
        )
        out.append(attrs)

        # reversed so children pop in document order
        for child in reversed(node.children):
            stack.append((child, level + 1, attrs.colour))

    logger.info("built %d nodes (%d colour families)", len(out), n_families)
    return out
