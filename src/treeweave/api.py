from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Mapping, Optional, Union

from .config.schema import TreeMapConfig
from .context import TreeMapContext
from .node import NodeAttributes
from .tree import TreeNode, build_node_attributes
from .types import Rect


@dataclass
class ColourResult:
    nodes: List[NodeAttributes]
    canvas: Optional[Rect]
    config: TreeMapConfig


def colour_tree(
    root: TreeNode,
    config: Union[TreeMapConfig, Mapping[str, Any], None] = None,
) -> ColourResult:
    """Build node attributes for ``root`` using ``config``.

    ``config`` may be a validated :class:`TreeMapConfig` or a raw mapping with
    the same layout as ``configs/treemap.yaml``.
    """
    if config is None:
        cfg = TreeMapConfig()
    elif isinstance(config, TreeMapConfig):
        cfg = config
    else:
        cfg = TreeMapConfig.model_validate(dict(config))

    ctx = TreeMapContext(mutation=cfg.colour.mutation, seed=cfg.colour.seed)
    nodes = build_node_attributes(
        root,
        ctx,
        colour_level=cfg.colour.colour_level,
        hue_offset=cfg.colour.hue_offset,
    )
    return ColourResult(nodes=nodes, canvas=ctx.canvas_bounds, config=cfg)
