from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping

import yaml

from ..colour import parse_colour
from ..node import NodeAttributes
from ..tree import TreeNode
from ..types import Point, Rect

__all__ = ["load_tree", "tree_from_dict", "node_records", "save_nodes"]


def _as_rect(raw: Any, where: str) -> Rect:
    if not isinstance(raw, (list, tuple)) or len(raw) != 4:
        raise ValueError(f"{where}: footprint must be [x, y, width, height], got {raw!r}")
    x, y, w, h = (float(v) for v in raw)
    return Rect(x, y, w, h)


def _as_point(raw: Any, where: str) -> Point:
    if not isinstance(raw, (list, tuple)) or len(raw) != 2:
        raise ValueError(f"{where}: centre must be [x, y], got {raw!r}")
    return Point(float(raw[0]), float(raw[1]))


def tree_from_dict(doc: Mapping[str, Any], where: str = "root") -> TreeNode:
    """Build a :class:`TreeNode` hierarchy from nested mappings."""
    if not isinstance(doc, Mapping):
        raise TypeError(f"{where}: node must be a mapping, got {type(doc).__name__}")
    if "footprint" not in doc:
        raise KeyError(f"{where}: missing required key 'footprint'")
    label = str(doc.get("label", ""))
    children_raw = doc.get("children") or []
    if not isinstance(children_raw, list):
        raise TypeError(f"{where}: children must be a list")
    children = [
        tree_from_dict(c, f"{where}/{i}") for i, c in enumerate(children_raw)
    ]
    centre = doc.get("centre")
    colour = doc.get("colour")
    return TreeNode(
        label=label,
        footprint=_as_rect(doc["footprint"], where),
        geo_centre=None if centre is None else _as_point(centre, where),
        colour=None if colour is None else parse_colour(colour),
        is_dummy=bool(doc.get("dummy", False)),
        children=children,
    )


def load_tree(path: str | Path) -> TreeNode:
    """Read a tree document from JSON (``.json``) or YAML (anything else)."""
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"tree file not found: {path}")
    with p.open("r", encoding="utf-8") as f:
        if p.suffix.lower() == ".json":
            doc = json.load(f)
        else:
            doc = yaml.safe_load(f)
    return tree_from_dict(doc)


def node_records(nodes: Iterable[NodeAttributes]) -> List[Dict[str, Any]]:
    return [
        {
            "label": n.label,
            "level": n.level,
            "leaf": n.is_leaf,
            "dummy": n.is_dummy,
            "bounds": list(n.bounds.as_tuple()),
            "centre": [n.geo_bounds.x, n.geo_bounds.y],
            "colour": n.hex_colour,
        }
        for n in nodes
    ]


def save_nodes(path: str | Path, nodes: Iterable[NodeAttributes]) -> None:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as f:
        json.dump(node_records(nodes), f, ensure_ascii=False, indent=2)
