import matplotlib

matplotlib.use("Agg")

import pytest

from trees.Quad_tree import QuadTree


@pytest.fixture
def small_tree():
    # capacidad 4 en ([0, 0], [10, 10]); el quinto punto provoca el split
    return QuadTree(((0, 0), (10, 10)), [(1, 1), (2, 2), (3, 3), (4, 4), (9, 9)], capacity=4)
