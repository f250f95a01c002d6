from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Union

from ..config.schema import VizConfig


@dataclass
class TreeMapStyle:
    """Style values for the treemap panel.

    Each field mirrors a ``viz.*`` key of the YAML configuration.
    """

    background: str = "#FFFFFF"
    border_color: str = "#404040"
    border_width: float = 0.5
    dummy_fill: str = "#F0F0F0"
    show_labels: bool = True
    label_fontsize: float = 8.0
    invert_y: bool = True
    dpi: int = 100


def get_style_from_cfg(cfg: Union[VizConfig, Mapping[str, Any]]) -> TreeMapStyle:
    """Return :class:`TreeMapStyle` from a validated or raw ``viz`` section."""
    viz = cfg if isinstance(cfg, VizConfig) else VizConfig.model_validate(dict(cfg))
    return TreeMapStyle(
        background=viz.background,
        border_color=viz.border_color,
        border_width=viz.border_width,
        dummy_fill=viz.dummy_fill,
        show_labels=viz.show_labels,
        label_fontsize=viz.label_fontsize,
        invert_y=viz.invert_y,
        dpi=viz.dpi,
    )
