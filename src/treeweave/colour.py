"""Colour helpers for treemap nodes.

Root colours come from a fixed-saturation HSB mapping; descendants drift from
their parent one channel at a time.  All functions work on :class:`RGB`
triples with integer channels.
"""

from __future__ import annotations

import math
from typing import Any, Callable, Optional

import numpy as np
from matplotlib.colors import hsv_to_rgb, to_rgb

from .types import RGB

ROOT_SATURATION = 0.4
ROOT_BRIGHTNESS = 0.8
# Mutation magnitude 1.0 maps to a full swing of 127 levels per channel.
MUTATION_SCALE = 127

__all__ = [
    "ROOT_SATURATION",
    "ROOT_BRIGHTNESS",
    "MUTATION_SCALE",
    "hsb_colour",
    "perturb_channel",
    "perturb_colour",
    "hex_colour",
    "parse_colour",
]


def hsb_colour(hue: float, saturation: float = ROOT_SATURATION,
               brightness: float = ROOT_BRIGHTNESS) -> RGB:
    """Convert hue/saturation/brightness to an :class:`RGB` triple.

    Only the fractional part of ``hue`` is used, so ``1.25`` and ``0.25`` give
    the same colour.  Channels are scaled by 255 and rounded half up.
    """
    h = float(hue) - math.floor(hue)
    rgb = hsv_to_rgb(np.array([h, saturation, brightness], dtype=float))
    r, g, b = (int(c * 255.0 + 0.5) for c in rgb)
    return RGB(r, g, b)


def perturb_channel(value: int, draw: float, colour_var: float) -> int:
    """Shift one channel by ``(draw - 0.5) * colour_var``.

    The shifted value is truncated toward zero before clamping to [0, 255].
    """
    shifted = int(value + (draw - 0.5) * colour_var)
    return int(np.clip(shifted, 0, 255))


def perturb_colour(parent: RGB, mutation: float, random: Callable[[], float]) -> RGB:
    """Random walk from ``parent``; one independent draw per channel."""
    colour_var = mutation * MUTATION_SCALE
    r = perturb_channel(parent.r, random(), colour_var)
    g = perturb_channel(parent.g, random(), colour_var)
    b = perturb_channel(parent.b, random(), colour_var)
    return RGB(r, g, b)


def hex_colour(colour: Optional[RGB]) -> Optional[str]:
    """Format ``colour`` as ``#rrggbb``; ``None`` passes through."""
    if colour is None:
        return None
    # the marker bit keeps leading zeros; its digit is dropped below
    digits = format((colour.packed() & 0xFFFFFF) | 0x1000000, "x")
    return "#" + digits[1:]


def parse_colour(spec: Any) -> RGB:
    """Accept an RGB triple, an ``RGB`` or any matplotlib colour string."""
    if isinstance(spec, RGB):
        return spec
    if isinstance(spec, (list, tuple)) and len(spec) == 3 and all(
        isinstance(c, int) and not isinstance(c, bool) for c in spec
    ):
        if any(c < 0 or c > 255 for c in spec):
            raise ValueError(f"colour channels must be in [0, 255]: {spec!r}")
        return RGB(*spec)
    try:
        rgb = to_rgb(spec)
    except ValueError as e:
        raise ValueError(f"invalid colour: {spec!r}") from e
    r, g, b = (int(round(c * 255)) for c in rgb)
    return RGB(r, g, b)
