import argparse
import logging
import sys
import time

import matplotlib.pyplot as plt

from Nodes.Errors import QuadTreeError
from trees.Quad_tree import QuadTree
from trees.Quad_plot import plot_quadtree, plot_metrics
from trees.metrics import benchmark_quadtree, random_points
from trees.config import BENCHMARK_SIZES, DEFAULT_CAPACITY, DEMO_EXTENT, DEMO_POINTS
from trees.logger import LOG_FORMAT, set_debug


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Construye un quad tree con puntos aleatorios y lo imprime")
    parser.add_argument(
        "-n", "--points", type=int, default=DEMO_POINTS,
        help=f"Cantidad de puntos aleatorios (por defecto {DEMO_POINTS})")
    parser.add_argument(
        "-c", "--capacity", type=int, default=DEFAULT_CAPACITY,
        help=f"Capacidad de cada nodo (por defecto {DEFAULT_CAPACITY})")
    parser.add_argument("--seed", type=int, default=None, help="Semilla del generador")
    parser.add_argument("--quiet", action="store_true", help="No imprimir el volcado del árbol")
    parser.add_argument("--plot", action="store_true", help="Mostrar la partición con matplotlib")
    parser.add_argument(
        "--benchmark", nargs="*", type=int, default=None,
        help=f"Correr el benchmark con estos tamaños (por defecto {BENCHMARK_SIZES})")
    parser.add_argument("--debug", action="store_true", help="Logs de depuración")

    return parser.parse_args(argv)


def run_benchmark(sizes, capacity, seed):
    res = benchmark_quadtree(sizes, capacity=capacity, seed=seed)
    for s, t, m, lf, h in zip(res['sizes'], res['times'], res['mem_peaks'], res['load_factors'], res['heights']):
        print(f"N={s}: time={t:.4f}s, mem_peak={m/1024:.1f} KiB, load_factor={lf:.3f}, height={h}")
    return res


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(format=LOG_FORMAT)
    set_debug(args.debug)

    if args.benchmark is not None:
        res = run_benchmark(args.benchmark or BENCHMARK_SIZES, args.capacity, args.seed)
        if args.plot:
            plot_metrics(res)
            plt.show()
        return 0

    points = random_points(args.points, DEMO_EXTENT, args.seed)

    start = time.perf_counter()
    try:
        tree = QuadTree.from_points(points, capacity=args.capacity)
    except (QuadTreeError, ValueError) as e:
        sys.exit(f"Error construyendo el árbol: {e}")
    elapsed = time.perf_counter() - start

    if not args.quiet:
        print(tree)
    print(tree.number_of_points())
    print(f"{elapsed:.4f}s")

    if args.plot:
        plot_quadtree(tree)
        plt.show()
    return 0


if __name__ == "__main__":
    sys.exit(main())
