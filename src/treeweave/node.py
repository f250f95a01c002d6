"""Visual representation of a single treemap node."""

from __future__ import annotations

from typing import Callable, Optional

from .colour import hex_colour, hsb_colour, perturb_colour
from .context import RenderContext
from .types import Point, RGB, Rect

__all__ = ["NodeAttributes", "resolve_colour"]


def resolve_colour(
    mutation: float,
    random: Callable[[], float],
    hue: Optional[float],
    colour: Optional[RGB] = None,
    parent_colour: Optional[RGB] = None,
) -> Optional[RGB]:
    """Pick a node colour.

    Priority: an explicit ``colour`` wins, then a root colour from ``hue``
    when there is no parent colour, otherwise a perturbation of
    ``parent_colour``.  Returns ``None`` only when none of these apply.
    """
    if colour is not None:
        return colour
    if parent_colour is None:
        if hue is None:
            return None
        return hsb_colour(hue)
    return perturb_colour(parent_colour, mutation, random)


class NodeAttributes:
    """Footprint, colour and metadata of one treemap node.

    Instances are built once through :meth:`create` and never modified.
    They hold no reference to parent or child nodes; the tree lives with the
    caller.
    """

    __slots__ = ("_footprint", "_geo_centre", "_label", "_colour", "_is_leaf", "_is_dummy", "_level")

    def __init__(
        self,
        label: str,
        footprint: Rect,
        geo_centre: Point,
        colour: Optional[RGB],
        is_leaf: bool,
        is_dummy: bool,
        level: int,
    ):
        self._label = label
        self._footprint = footprint
        self._geo_centre = geo_centre
        self._colour = colour
        self._is_leaf = bool(is_leaf)
        self._is_dummy = bool(is_dummy)
        self._level = int(level)

    @classmethod
    def create(
        cls,
        label: str,
        footprint: Rect,
        geo_centre: Point,
        is_leaf: bool,
        is_dummy: bool,
        hue: Optional[float],
        context: RenderContext,
        *,
        colour: Optional[RGB] = None,
        parent_colour: Optional[RGB] = None,
        level: int = 0,
    ) -> "NodeAttributes":
        """Build a node and register its integer bounds with ``context``.

        Parameters
        ----------
        label:
            Text displayed on the node.
        footprint:
            Spatial bounds in render-surface coordinates.
        geo_centre:
            Transformed geographic centroid of the node.
        is_leaf, is_dummy:
            Node kind flags.
        hue:
            Hue used when there is neither an explicit nor a parent colour.
        context:
            Supplies the mutation magnitude and random draws, and receives the
            node's outer bounds.
        colour:
            Fixed colour for this node, used verbatim.  Any ``(r, g, b)``
            sequence is accepted.
        parent_colour:
            Resolved colour of the parent node, if any.
        level:
            Depth of the node, 0 for the root.
        """
        colour = None if colour is None else RGB(*colour)
        parent_colour = None if parent_colour is None else RGB(*parent_colour)
        mutation = context.mutation
        context.register_bounds(footprint.outer_bounds())
        resolved = resolve_colour(
            mutation, context.random, hue, colour=colour, parent_colour=parent_colour
        )
        return cls(label, footprint, geo_centre, resolved, is_leaf, is_dummy, level)

    @property
    def bounds(self) -> Rect:
        return self._footprint

    @property
    def geo_bounds(self) -> Point:
        return self._geo_centre

    @property
    def label(self) -> str:
        return self._label

    @property
    def colour(self) -> Optional[RGB]:
        return self._colour

    @property
    def hex_colour(self) -> Optional[str]:
        """Colour as ``#rrggbb``, or ``None`` for nodes without colour."""
        return hex_colour(self._colour)

    @property
    def level(self) -> int:
        return self._level

    @property
    def is_leaf(self) -> bool:
        return self._is_leaf

    @property
    def is_dummy(self) -> bool:
        return self._is_dummy

    def __repr__(self) -> str:
        return (
            f"NodeAttributes(label={self._label!r}, level={self._level}, "
            f"bounds={self._footprint.as_tuple()}, colour={self.hex_colour})"
        )
