"""Colour the sample tree and save a PNG next to this script."""
from pathlib import Path

from treeweave.viz import setup_matplotlib_backend, get_style_from_cfg

setup_matplotlib_backend("Agg")

from treeweave import colour_tree
from treeweave.config import load_config
from treeweave.data import load_tree, save_nodes
from treeweave.logging import init_logging
from treeweave.viz.panels import render_to_file

HERE = Path(__file__).parent


def main():
    cfg = load_config(HERE.parent / "configs" / "treemap.yaml", overrides={"colour": {"seed": 1, "mutation": 0.4}})
    init_logging("info")
    result = colour_tree(load_tree(HERE / "sample_tree.yaml"), cfg)
    for n in result.nodes:
        print(f"{'  ' * n.level}{n.label or '<dummy>'}: {n.hex_colour}")
    save_nodes(HERE / "out" / "nodes.json", result.nodes)
    render_to_file(result.nodes, HERE / "out" / "sample_tree.png", style=get_style_from_cfg(cfg.viz), frame=result.canvas)


if __name__ == "__main__":
    main()
