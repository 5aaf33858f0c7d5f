import time
import tracemalloc
import gc

import numpy as np

from .Quad_tree import QuadTree
from .config import BENCHMARK_EXTENT, DEFAULT_CAPACITY


def _get_quadtree_leaf_stats(tree):
    # devuelve (num_leaves, total_points, list_points_per_leaf)
    leaves = [len(leaf.points) for leaf in tree.leaves()]
    return len(leaves), sum(leaves), leaves


def random_points(n, extent=BENCHMARK_EXTENT, seed=None):
    """Puntos flotantes aleatorios en [0, extent) más las dos esquinas.

    Las esquinas fijan el límite del árbol a ([0, 0], [extent, extent]).
    Más de `capacity` puntos repetidos no se pueden separar y terminan en
    un DegenerateBoundaryError, por eso no se usan coordenadas enteras.
    """
    rng = np.random.default_rng(seed)
    points = rng.random((n, 2)) * extent
    return np.vstack([points, [[0.0, 0.0], [float(extent), float(extent)]]])


def benchmark_quadtree(sizes, capacity=DEFAULT_CAPACITY, extent=BENCHMARK_EXTENT, seed=None):
    """Inserta puntos aleatorios y devuelve métricas para cada tamaño.
    Retorna dict con listas: sizes, times, mem_peaks, load_factors, avg_occupancies, num_leaves, heights
    """
    sizes = list(sizes)
    times = []
    mem_peaks = []
    load_factors = []
    avg_occupancies = []
    num_leaves_list = []
    heights = []

    for n in sizes:
        points = random_points(n, extent, seed)

        gc.collect()
        tracemalloc.start()
        start = time.perf_counter()

        tree = QuadTree.from_points(points, capacity=capacity)

        elapsed = time.perf_counter() - start
        current, peak = tracemalloc.get_traced_memory()
        tracemalloc.stop()

        # load factor: avg occupancy / capacity
        num_leaves, total_points, _ = _get_quadtree_leaf_stats(tree)
        avg_occ = (total_points / num_leaves) if num_leaves > 0 else 0
        lf = avg_occ / capacity

        times.append(elapsed)
        mem_peaks.append(peak)
        load_factors.append(lf)
        avg_occupancies.append(avg_occ)
        num_leaves_list.append(num_leaves)
        heights.append(tree.height())

    return {
        'sizes': sizes,
        'times': times,
        'mem_peaks': mem_peaks,
        'load_factors': load_factors,
        'avg_occupancies': avg_occupancies,
        'num_leaves': num_leaves_list,
        'heights': heights
    }


def analyze_quadtree_instance(tree: QuadTree):
    """Analiza un QuadTree existente y devuelve métricas similares a benchmark_quadtree para un único tamaño."""
    gc.collect()
    tracemalloc.start()
    start = time.perf_counter()

    num_leaves, total_points, _ = _get_quadtree_leaf_stats(tree)
    height = tree.height()

    elapsed = time.perf_counter() - start
    current, peak = tracemalloc.get_traced_memory()
    tracemalloc.stop()

    avg_occ = (total_points / num_leaves) if num_leaves > 0 else 0
    lf = avg_occ / tree.capacity

    return {
        'sizes': [total_points],
        'times': [elapsed],
        'mem_peaks': [peak],
        'load_factors': [lf],
        'avg_occupancies': [avg_occ],
        'num_leaves': [num_leaves],
        'heights': [height]
    }
