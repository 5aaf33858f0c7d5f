import numpy as np
import matplotlib.pyplot as plt
import matplotlib.patches


def plot_quadtree(tree, ax=None, show_points=True):
    """Dibuja la partición del árbol: un rectángulo por nodo y los puntos de las hojas."""
    if ax is None:
        fig = plt.figure(figsize=(10, 10))
        ax = fig.gca()
    else:
        fig = ax.figure

    b = tree.boundary
    ax.set_xlim((b.x0, b.x1))
    ax.set_ylim((b.y0, b.y1))
    # el eje y crece hacia abajo: (x0, y0) es la esquina superior izquierda
    ax.invert_yaxis()
    ax.set_aspect('equal')

    xs, ys = [], []
    for _, node in tree.nodes():
        nb = node.boundary
        r = matplotlib.patches.Rectangle((nb.x0, nb.y0), nb.width, nb.height,
                                         fill=False,
                                         edgecolor='black',
                                         linewidth=0.5)
        ax.add_patch(r)
        for handle in node.points:
            p = tree.store.point(handle)
            xs.append(p[0])
            ys.append(p[1])

    if show_points and xs:
        ax.scatter(xs, ys, s=4, color='blue')

    ax.set_title(f"QuadTree: {len(xs)} puntos, capacidad {tree.capacity}")
    return fig


def plot_metrics(results, fig=None):
    """Gráficos de barras de factor de carga y tiempos de benchmark_quadtree."""
    if fig is None:
        fig = plt.figure(figsize=(8, 8))
    fig.clear()

    x = np.arange(len(results['sizes']))
    labels = [str(s) for s in results['sizes']]

    ax1 = fig.add_subplot(2, 1, 1)
    ax1.bar(x, results['load_factors'], 0.4, label='QuadTree LF')
    ax1.set_xticks(x)
    ax1.set_xticklabels(labels)
    ax1.set_ylabel('Factor de Carga')
    ax1.legend()

    ax2 = fig.add_subplot(2, 1, 2)
    ax2.bar(x, results['times'], 0.4, label='QuadTree time')
    ax2.set_xticks(x)
    ax2.set_xticklabels(labels)
    ax2.set_xlabel('N (nº de inserciones)')
    ax2.set_ylabel('Tiempo (s)')
    ax2.legend()

    return fig
