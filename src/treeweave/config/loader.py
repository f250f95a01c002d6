"""Treemap configuration loader."""
from __future__ import annotations

from copy import deepcopy
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

from .schema import TreeMapConfig

__all__ = ["load_config", "deep_update"]

DEFAULT_CONFIG_PATH = "configs/treemap.yaml"


def deep_update(base: dict, override: Mapping[str, Any]) -> dict:
    """Return a copy of *base* with *override* merged in recursively.

    Nested mappings are merged key by key; any other value replaces the one in
    the copy.  *base* itself is left untouched.
    """
    result = deepcopy(base)
    for k, v in override.items():
        if isinstance(v, Mapping) and isinstance(result.get(k), dict):
            result[k] = deep_update(result[k], v)
        else:
            result[k] = deepcopy(v)
    return result


def _read_yaml(path: str | Path) -> Dict[str, Any]:
    p = Path(path)
    if not p.exists():
        return {}
    with p.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            raise TypeError(f"Top-level YAML at {path} must be a mapping")
        return data


def load_config(
    path: str | Path = DEFAULT_CONFIG_PATH,
    overrides: Optional[Mapping[str, Any]] = None,
) -> TreeMapConfig:
    """Load ``path`` (if present), apply ``overrides`` and validate.

    A missing file yields the built-in defaults.
    """
    cfg = _read_yaml(path)
    if overrides:
        cfg = deep_update(cfg, overrides)
    return TreeMapConfig.model_validate(cfg)
