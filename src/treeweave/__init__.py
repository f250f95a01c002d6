"""treeweave top-level API.

External users can simply ``from treeweave import colour_tree``.
"""

from .api import ColourResult, colour_tree
from .context import RenderContext, TreeMapContext
from .node import NodeAttributes
from .tree import TreeNode, build_node_attributes
from .types import Point, RGB, Rect

__all__ = [
    "colour_tree",
    "ColourResult",
    "NodeAttributes",
    "RenderContext",
    "TreeMapContext",
    "TreeNode",
    "build_node_attributes",
    "Point",
    "RGB",
    "Rect",
]
