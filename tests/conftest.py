import numpy as np
import pytest

from treeweave.tree import TreeNode
from treeweave.types import Rect


class ScriptedContext:
    """Render context with fixed draws that records every call."""

    def __init__(self, mutation=0.5, draws=()):
        self._mutation = mutation
        self._draws = list(draws)
        self.mutation_reads = 0
        self.draw_calls = 0
        self.bounds = []

    @property
    def mutation(self):
        self.mutation_reads += 1
        return self._mutation

    def random(self):
        self.draw_calls += 1
        return self._draws.pop(0) if self._draws else 0.5

    def register_bounds(self, rect):
        self.bounds.append(rect)


@pytest.fixture
def rng():
    return np.random.default_rng(0)

@pytest.fixture
def scripted():
    return ScriptedContext

@pytest.fixture
def small_tree():
    """root -> A(a1, a2), B; footprints tile a 100x60 canvas."""
    a1 = TreeNode("a1", Rect(0, 0, 60, 30))
    a2 = TreeNode("a2", Rect(0, 30, 60, 30))
    A = TreeNode("A", Rect(0, 0, 60, 60), children=[a1, a2])
    B = TreeNode("B", Rect(60, 0, 40, 60))
    return TreeNode("root", Rect(0, 0, 100, 60), children=[A, B])
