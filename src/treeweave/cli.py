# -*- coding: utf-8 -*-
from __future__ import annotations
import argparse, json, sys

from pydantic import ValidationError

from .api import colour_tree
from .config.loader import DEFAULT_CONFIG_PATH, load_config
from .data.file_io import load_tree, node_records, save_nodes
from .logging import init_logging_from_cfg


def cmd_colour(args):
    overrides = {}
    if args.seed is not None:
        overrides.setdefault("colour", {})["seed"] = args.seed
    if args.mutation is not None:
        overrides.setdefault("colour", {})["mutation"] = args.mutation
    try:
        cfg = load_config(args.config, overrides=overrides)
    except ValidationError as e:
        raise SystemExit(f"invalid config: {e}")
    init_logging_from_cfg(cfg.model_dump())

    try:
        root = load_tree(args.tree)
    except (FileNotFoundError, KeyError, TypeError, ValueError) as e:
        raise SystemExit(f"cannot load tree: {e}")

    result = colour_tree(root, cfg)
    save_nodes(args.out, result.nodes)

    if args.png:
        from .viz.backend import setup_matplotlib_backend
        setup_matplotlib_backend(prefer=cfg.viz.backend)
        from .viz.panels import render_to_file
        from .viz.style import get_style_from_cfg
        render_to_file(result.nodes, args.png, style=get_style_from_cfg(cfg.viz), frame=result.canvas)

    if args.print:
        print(json.dumps(node_records(result.nodes), ensure_ascii=False))
    return 0


def make_parser():
    p = argparse.ArgumentParser(prog="treeweave")
    sub = p.add_subparsers(dest="cmd", required=True)

    pc = sub.add_parser("colour", help="Resolve node colours for a laid-out tree")
    pc.add_argument("--tree", required=True, help="tree document (JSON or YAML)")
    pc.add_argument("--config", default=DEFAULT_CONFIG_PATH, help="treemap config YAML")
    pc.add_argument("--seed", type=int, default=None, help="random seed override")
    pc.add_argument("--mutation", type=float, default=None, help="mutation magnitude override (0..1)")
    pc.add_argument("--out", default="out/nodes.json")
    pc.add_argument("--png", default=None, help="optional PNG rendering")
    pc.add_argument("--print", action="store_true", help="print JSON records to stdout")
    pc.set_defaults(func=cmd_colour)

    return p


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    parser = make_parser()
    ns = parser.parse_args(argv)
    return ns.func(ns)


if __name__ == "__main__":
    raise SystemExit(main())
