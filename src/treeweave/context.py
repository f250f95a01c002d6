from __future__ import annotations

import logging
from typing import Optional, Protocol

import numpy as np

from .types import Rect

logger = logging.getLogger(__name__)

__all__ = ["RenderContext", "TreeMapContext"]


class RenderContext(Protocol):
    """Capability consumed by :class:`treeweave.node.NodeAttributes`."""

    @property
    def mutation(self) -> float: ...

    def random(self) -> float: ...

    def register_bounds(self, rect: Rect) -> None: ...


class TreeMapContext:
    """Default render context backed by a numpy ``Generator``.

    Keeps the running union of every registered rectangle so callers can size
    the canvas once all nodes have been built.
    """

    def __init__(
        self,
        mutation: float = 0.2,
        seed: Optional[int] = None,
        rng: Optional[np.random.Generator] = None,
    ):
        self._mutation = float(mutation)
        self._rng = rng if rng is not None else np.random.default_rng(seed)
        self._canvas: Optional[Rect] = None
        self.registered = 0

    @property
    def mutation(self) -> float:
        return self._mutation

    @property
    def canvas_bounds(self) -> Optional[Rect]:
        return self._canvas

    def random(self) -> float:
        return float(self._rng.random())

    def register_bounds(self, rect: Rect) -> None:
        self._canvas = rect if self._canvas is None else self._canvas.union(rect)
        self.registered += 1
        logger.debug("registered bounds %s (canvas now %s)", rect.as_tuple(), self._canvas.as_tuple())
